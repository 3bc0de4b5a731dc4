"""Comando: sged check-rules — consistência entre catálogo e tabela de seções."""

from __future__ import annotations

import argparse
import json
import pathlib

from rich.console import Console

from sections import check_consistency
from sged._config import rule_table_or_exit

console = Console()

_SECTIONS: list[tuple[str, str]] = [
    ("orphan_sections",    "Entradas sem associação no catálogo"),
    ("missing_sections",   "Pares do catálogo sem entrada na tabela"),
    ("missing_no_subject", "Tipos sem assunto sem entrada SEM_ASSUNTO"),
    ("unknown_subjects",   "Assuntos fora do cadastro"),
]


def _read_subjects(path: str) -> list[str]:
    lines = pathlib.Path(path).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def run(args: argparse.Namespace) -> None:
    table = rule_table_or_exit(args.rules, console)

    known_subjects: list[str] | None = None
    if args.subjects:
        try:
            known_subjects = _read_subjects(args.subjects)
        except OSError as exc:
            console.print(f"[red]Não foi possível ler o cadastro de assuntos:[/red] {exc}")
            raise SystemExit(1)

    report = check_consistency(table, known_subjects)

    if args.json_output:
        out = {name: getattr(report, name) for name, _ in _SECTIONS}
        out["is_consistent"] = report.is_consistent
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        for name, title in _SECTIONS:
            items = getattr(report, name)
            if not items:
                continue
            console.print(f"[yellow]{title}[/yellow] ({len(items)}):")
            for item in items:
                console.print(f"  [yellow]·[/yellow] {item}")

        if report.is_consistent:
            console.print(
                f"[green]OK[/green]  {len(table)} classificações, "
                f"{len(table.catalog.document_types)} tipos de documento."
            )
        else:
            console.print("[red]INCONSISTENTE[/red]  Corrija a tabela de regras.")

    if not report.is_consistent:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check-rules",
        help="Verifica a consistência entre catálogo e tabela de seções.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Valida a tabela de regras (schema JSON) e verifica:

  - entradas de seções sem associação no catálogo;
  - pares (tipo, assunto) do catálogo sem entrada de seções;
  - tipos sem assunto sem a entrada "Tipo|SEM_ASSUNTO";
  - assuntos fora do cadastro (com --subjects).

Sai com código 1 quando há inconsistências.

Exemplos:
  sged check-rules
  sged check-rules --rules regras-secoes.json --subjects assuntos.txt
        """,
    )
    p.add_argument(
        "--rules", "-r",
        default=None,
        metavar="ARQUIVO",
        help="Tabela de regras (JSON); padrão: SGED_RULES_FILE ou tabela embutida.",
    )
    p.add_argument(
        "--subjects",
        default=None,
        metavar="ARQUIVO",
        help="Cadastro de assuntos (um por linha).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Imprime o relatório como JSON.",
    )
    p.set_defaults(func=run)
