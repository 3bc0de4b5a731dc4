"""
chain — cadeia de retificações da decisão judicial.

Interface pública:
    RetificationChain                      — mutação da cadeia
    validate_chain, validate_signing_date  — regras cronológicas
    ChainViolation, ChainErrorKind         — resultado da validação
    parse_br_date, format_date_mask, ...   — datas dd/mm/aaaa
"""

from .dates import (
    format_br_date,
    format_date_mask,
    from_html_date,
    parse_br_date,
    to_html_date,
)
from .validation import (
    BASE_LABEL,
    ChainErrorKind,
    ChainViolation,
    ordinal_label,
    validate_chain,
    validate_signing_date,
)
from .manager import RetificationChain

__all__ = [
    "format_br_date",
    "format_date_mask",
    "from_html_date",
    "parse_br_date",
    "to_html_date",
    "BASE_LABEL",
    "ChainErrorKind",
    "ChainViolation",
    "ordinal_label",
    "validate_chain",
    "validate_signing_date",
    "RetificationChain",
]
