"""Comando: sged validate — valida um snapshot de documento como no envio."""

from __future__ import annotations

import argparse
import json
import pathlib
from datetime import date

from rich import box
from rich.console import Console
from rich.table import Table

from chain import parse_br_date
from data_model import SECTION_NAMES
from form_engine import DocumentFormSession, NotificationCenter
from sged._config import notification_seconds, rule_table_or_exit
from validator import SnapshotError

console = Console()


def _today(raw: str | None) -> date:
    if raw is None:
        return date.today()
    parsed = parse_br_date(raw)
    if parsed is None:
        console.print(f"[red]Data inválida em --today:[/red] {raw!r} (use dd/mm/aaaa)")
        raise SystemExit(1)
    return parsed


def run(args: argparse.Namespace) -> None:
    snapshot_path = pathlib.Path(args.snapshot)
    if not snapshot_path.exists():
        console.print(f"[red]Arquivo não encontrado:[/red] {snapshot_path}")
        raise SystemExit(1)

    try:
        snapshot = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Erro ao ler JSON:[/red] {exc}")
        raise SystemExit(1)

    table = rule_table_or_exit(args.rules, console)
    today = _today(args.today)

    session = DocumentFormSession(
        table,
        notifications=NotificationCenter(duration=notification_seconds()),
        today=lambda: today,
    )
    try:
        session.load(snapshot)
    except SnapshotError as exc:
        console.print(f"[red]Snapshot inválido:[/red] {exc}")
        raise SystemExit(1)

    result = session.validate()
    form = session.form

    if args.json_output:
        out: dict = {"ok": result.ok}
        if result.error is not None:
            e = result.error
            out["error"] = {
                "code": str(e.code),
                "field": e.field,
                "message": e.message,
                "severity": str(e.severity),
                "focus_hint": str(e.focus_hint) if e.focus_hint else None,
                "details": e.details,
            }
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        sections = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        sections.add_column("Seção", style="cyan")
        sections.add_column("Visível", justify="center")
        sections.add_column("Obrigatória", justify="center")
        for name in SECTION_NAMES:
            state = session.sections.state(name)
            sections.add_row(
                name,
                "sim" if state.visible else "não",
                "sim" if state.required else "não",
            )
        console.print(
            f"[bold]{form.document_type or '(sem tipo)'}[/bold] · "
            f"{form.subject or '(sem assunto)'} · "
            f"{len(form.amendments)} retificação(ões) · {len(form.research)} pesquisa(s)"
        )
        console.print(sections)

        if result.ok:
            console.print("[green]OK[/green]  Documento pronto para envio.")
        else:
            e = result.error
            color = "red" if e.severity == "error" else "yellow"
            console.print(f"[{color}]{e.code}[/{color}]  {e.message}", highlight=False)
            console.print(f"[dim]campo: {e.field}[/dim]")

    if not result.ok:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Valida um snapshot de documento (JSON) como no envio do formulário.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Carrega o snapshot (chaves do registro Documento: tipoDocumento, assunto,
retificacoes, pesquisas...) e executa a validação do envio:

  1  cronologia (erro): data da decisão judicial e cadeia de retificações
  2  preenchimento (aviso): campos obrigatórios na ordem do formulário

Só a primeira falha é reportada. Sai com código 1 quando há falha.

Exemplos:
  sged validate documento.json
  sged validate documento.json --today 18/10/2026 --json-output
        """,
    )
    p.add_argument("snapshot", metavar="ARQUIVO", help="Snapshot do documento (JSON).")
    p.add_argument(
        "--rules", "-r",
        default=None,
        metavar="ARQUIVO",
        help="Tabela de regras (JSON); padrão: SGED_RULES_FILE ou tabela embutida.",
    )
    p.add_argument(
        "--today",
        default=None,
        metavar="DD/MM/AAAA",
        help="Data de referência para \"posterior à data atual\" (padrão: hoje).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Imprime o resultado como JSON.",
    )
    p.set_defaults(func=run)
