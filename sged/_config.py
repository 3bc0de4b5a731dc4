"""
Configuração por variáveis de ambiente (opcionalmente de um arquivo .env).

  SGED_RULES_FILE            tabela de regras de seções (JSON); padrão embutido
  SGED_LOG_LEVEL             nível de log (padrão WARNING)
  SGED_NOTIFICATION_SECONDS  duração das notificações (padrão 3)
"""

from __future__ import annotations

import logging
import os
import pathlib

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from form_engine import DEFAULT_DURATION
from sections import RuleTable, RuleTableError


def load_env(path: str | pathlib.Path | None = None) -> None:
    """Carrega o .env do diretório atual (ou `path`) sem sobrescrever o ambiente."""
    load_dotenv(path or pathlib.Path.cwd() / ".env", override=False)


def setup_logging(level: str | None = None) -> None:
    level = (level or os.getenv("SGED_LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def rules_file(override: str | None = None) -> pathlib.Path | None:
    value = override or os.getenv("SGED_RULES_FILE")
    return pathlib.Path(value) if value else None


def load_rule_table(override: str | None = None) -> RuleTable:
    """Tabela de --rules, de SGED_RULES_FILE ou a padrão."""
    path = rules_file(override)
    if path is None:
        return RuleTable.default()
    return RuleTable.from_file(path)


def notification_seconds() -> float:
    raw = os.getenv("SGED_NOTIFICATION_SECONDS")
    if not raw:
        return DEFAULT_DURATION
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"SGED_NOTIFICATION_SECONDS inválido: {raw!r}") from None
    if value <= 0:
        raise ValueError(f"SGED_NOTIFICATION_SECONDS deve ser positivo: {raw!r}")
    return value


def rule_table_or_exit(override: str | None, console: Console) -> RuleTable:
    """load_rule_table() para os comandos: erro de configuração encerra com código 1."""
    try:
        return load_rule_table(override)
    except (RuleTableError, OSError) as exc:
        console.print(f"[red]Erro na tabela de regras:[/red] {exc}")
        raise SystemExit(1)
