"""Comando: sged search — busca multipalavra numa lista de candidatos."""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from rich.console import Console

from form_engine import CandidatePools
from form_engine.collaborators import POOL_BY_FIELD
from search import filter_items

console = Console()


def _candidates(args: argparse.Namespace) -> list[str]:
    if args.pool:
        return CandidatePools.from_file(args.pool).for_field(args.field)
    if args.items:
        text = pathlib.Path(args.items).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()
    return [line.strip() for line in text.splitlines() if line.strip()]


def run(args: argparse.Namespace) -> None:
    try:
        candidates = _candidates(args)
    except (OSError, json.JSONDecodeError) as exc:
        console.print(f"[red]Não foi possível ler os candidatos:[/red] {exc}")
        raise SystemExit(1)

    results = filter_items(candidates, args.query)
    if args.limit:
        results = results[: args.limit]

    if args.json_output:
        print(json.dumps(results, ensure_ascii=False, indent=2))
        return

    if not results:
        console.print(f"[yellow]Nenhum resultado para[/yellow] {args.query!r}.")
        return
    for i, item in enumerate(results):
        console.print(f"[dim]{i:>3}[/dim]  {item}", highlight=False)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "search",
        help="Busca multipalavra (sem acentos/caixa) numa lista de candidatos.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""
Todas as palavras da consulta precisam aparecer no candidato, em qualquer
ordem; acentos e maiúsculas são ignorados. A ordem da lista é preservada.

Fonte dos candidatos (em ordem de prioridade):
  --pool ARQUIVO  dados de referência (JSON) + --field ({", ".join(POOL_BY_FIELD)})
  --items ARQUIVO um candidato por linha
  stdin           um candidato por linha

Exemplos:
  sged search "11 goiania" --items orgaos.txt
  sged search "juiz" --pool referencia.json --field autoridade
        """,
    )
    p.add_argument("query", metavar="CONSULTA", help="Texto de busca.")
    p.add_argument(
        "--pool",
        default=None,
        metavar="ARQUIVO",
        help="Dados de referência em JSON (destinatarios, autoridades, orgaosJudiciais...).",
    )
    p.add_argument(
        "--field", "-f",
        default="destinatario",
        choices=sorted(POOL_BY_FIELD),
        help="Campo de busca cuja lista será usada com --pool.",
    )
    p.add_argument(
        "--items",
        default=None,
        metavar="ARQUIVO",
        help="Arquivo texto com um candidato por linha.",
    )
    p.add_argument(
        "--limit", "-n",
        type=int,
        default=0,
        help="Número máximo de resultados (0 = todos).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Imprime os resultados como lista JSON.",
    )
    p.set_defaults(func=run)
