"""Comando: sged sections — lista a tabela de seções por classificação."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import SECTION_NAMES, SectionState, split_key
from sged._config import rule_table_or_exit

console = Console()

_SECTION_TITLES = {
    "section2": "Decisão judicial",
    "section3": "Mídia",
    "section4": "Pesquisa",
}


def _cell(state: SectionState) -> str:
    if not state.visible:
        return "[dim]—[/dim]"
    if state.required:
        return "[green]obrigatória[/green]"
    return "[yellow]opcional[/yellow]"


def run(args: argparse.Namespace) -> None:
    table = rule_table_or_exit(args.rules, console)

    rows = [
        (key, rule)
        for key, rule in table.items()
        if args.type is None or split_key(key)[0] == args.type
    ]
    if args.visible_only:
        rows = [(k, r) for k, r in rows if len(r.hidden_sections) < len(SECTION_NAMES)]

    if args.json_output:
        print(json.dumps(
            {k: v for k, v in table.to_dict()["sections"].items() if k in dict(rows)},
            ensure_ascii=False,
            indent=2,
        ))
        return

    if not rows:
        console.print("[yellow]Nenhuma classificação encontrada.[/yellow]")
        return

    out = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    out.add_column("Tipo de documento", style="cyan", no_wrap=True)
    out.add_column("Assunto")
    for name in SECTION_NAMES:
        out.add_column(_SECTION_TITLES[name], justify="center")

    for key, rule in rows:
        document_type, subject = split_key(key)
        out.add_row(
            document_type,
            subject or "[dim](sem assunto)[/dim]",
            *(_cell(rule.state(name)) for name in SECTION_NAMES),
        )

    console.print(out)
    console.print(f"[dim]{len(rows)} classificação(ões).[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "sections",
        help="Lista a tabela de seções por classificação.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Lista, para cada classificação (tipo de documento + assunto), o estado das
seções 2 (decisão judicial), 3 (mídia) e 4 (pesquisa).

Exemplos:
  sged sections
  sged sections --type "Ofício" --visible-only
  sged sections --rules regras-secoes.json --json-output
        """,
    )
    p.add_argument(
        "--rules", "-r",
        default=None,
        metavar="ARQUIVO",
        help="Tabela de regras (JSON); padrão: SGED_RULES_FILE ou tabela embutida.",
    )
    p.add_argument(
        "--type", "-t",
        default=None,
        metavar="TIPO",
        help="Filtra por tipo de documento.",
    )
    p.add_argument(
        "--visible-only",
        action="store_true",
        help="Mostra só classificações com alguma seção visível.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Imprime as regras como JSON.",
    )
    p.set_defaults(func=run)
