"""Comando: sged resolve — seções de um par tipo de documento + assunto."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import SECTION_NAMES, classification_key
from sged._config import rule_table_or_exit

console = Console()


def run(args: argparse.Namespace) -> None:
    table = rule_table_or_exit(args.rules, console)

    key = classification_key(args.document_type, args.subject)
    rule = table.lookup(key)
    known = rule is not None
    rule = table.rule_for(args.document_type, args.subject)

    if args.json_output:
        print(json.dumps(
            {
                "key": key,
                "known": known,
                "sections": {
                    name: {
                        "visible": rule.state(name).visible,
                        "required": rule.state(name).required,
                    }
                    for name in SECTION_NAMES
                },
            },
            ensure_ascii=False,
            indent=2,
        ))
        return

    if key is None:
        console.print("[yellow]Sem classificação[/yellow] (tipo ou assunto ausente) — todas as seções ocultas.")
    elif not known:
        console.print(f"[yellow]Classificação desconhecida:[/yellow] {key} — todas as seções ocultas.")
    else:
        console.print(f"[bold]{key}[/bold]")

    out = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    out.add_column("Seção", style="cyan")
    out.add_column("Visível", justify="center")
    out.add_column("Obrigatória", justify="center")
    for name in SECTION_NAMES:
        state = rule.state(name)
        out.add_row(
            name,
            "sim" if state.visible else "não",
            "sim" if state.required else "não",
        )
    console.print(out)

    allowed = table.catalog.subjects_for(args.document_type)
    if args.subject and allowed and args.subject not in allowed:
        console.print(
            f"[yellow]Assunto fora do catálogo para {args.document_type}.[/yellow]"
        )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "resolve",
        help="Mostra as seções de um tipo de documento + assunto.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Resolve a classificação (tipo de documento + assunto) na tabela de regras.
Classificação ausente ou desconhecida resulta em todas as seções ocultas.
Mídia não tem assunto.

Exemplos:
  sged resolve "Ofício" "Encaminhamento de decisão judicial"
  sged resolve "Mídia"
  sged resolve "Ofício Circular" "Outros" --json-output
        """,
    )
    p.add_argument("document_type", metavar="TIPO", help="Tipo de documento.")
    p.add_argument(
        "subject",
        metavar="ASSUNTO",
        nargs="?",
        default="",
        help="Assunto (omitir para Mídia).",
    )
    p.add_argument(
        "--rules", "-r",
        default=None,
        metavar="ARQUIVO",
        help="Tabela de regras (JSON); padrão: SGED_RULES_FILE ou tabela embutida.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Imprime o resultado como JSON.",
    )
    p.set_defaults(func=run)
