"""
sged — ferramenta de linha de comando do motor de formulários de documentos.

Uso:
  sged <comando> [opções]

Comandos:
  sections     Lista a tabela de seções (visível / obrigatória) por classificação.
  resolve      Mostra as seções de um par tipo de documento + assunto.
  check-rules  Verifica a consistência entre catálogo e tabela de seções.
  search       Busca multipalavra (sem acentos) numa lista de candidatos.
  validate     Valida um snapshot de documento (JSON) como no envio do formulário.

Configuração (variáveis de ambiente ou arquivo .env):
  SGED_RULES_FILE, SGED_LOG_LEVEL, SGED_NOTIFICATION_SECONDS
"""

from __future__ import annotations

import argparse
import sys

from sged import __version__
from sged._config import load_env, setup_logging
from sged.commands import check_rules as cmd_check_rules
from sged.commands import resolve as cmd_resolve
from sged.commands import search as cmd_search
from sged.commands import sections as cmd_sections
from sged.commands import validate as cmd_validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sged",
        description="SGED — motor de formulários de documentos.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"sged {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        metavar="NÍVEL",
        help="Nível de log (DEBUG, INFO, WARNING...); padrão: SGED_LOG_LEVEL ou WARNING.",
    )

    subparsers = parser.add_subparsers(
        title="comandos",
        metavar="<comando>",
        dest="command",
    )
    subparsers.required = True

    cmd_sections.add_parser(subparsers)
    cmd_resolve.add_parser(subparsers)
    cmd_check_rules.add_parser(subparsers)
    cmd_search.add_parser(subparsers)
    cmd_validate.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main(sys.argv[1:])
