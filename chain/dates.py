"""
chain/dates.py — datas no formato brasileiro (dd/mm/aaaa).

  parse_br_date(s)     → date | None  (None para vazio ou data inexistente)
  format_date_mask(s)  → máscara progressiva dd/mm/aaaa a partir dos dígitos
  from_html_date(s)    → "aaaa-mm-dd" (input type=date) para "dd/mm/aaaa"
  to_html_date(s)      → "dd/mm/aaaa" para "aaaa-mm-dd"
"""

from __future__ import annotations

import re
from datetime import date

_NON_DIGIT = re.compile(r"\D")


def parse_br_date(value: str) -> date | None:
    """
    Converte "dd/mm/aaaa" em date.

    A data precisa existir no calendário: "31/02/2024" → None.
    """
    if not value or not value.strip():
        return None
    parts = value.strip().split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
    except ValueError:
        return None
    if not day or not month or not year:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date_mask(value: str) -> str:
    """
    Aplica a máscara conforme o usuário digita.

    "1" → "1", "1503" → "15/03", "15032024" → "15/03/2024".
    Caracteres não numéricos são descartados; no máximo 8 dígitos.
    """
    digits = _NON_DIGIT.sub("", value)
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:8]}"


def from_html_date(value: str) -> str:
    if not value:
        return ""
    parts = value.split("-")
    if len(parts) != 3:
        return ""
    year, month, day = parts
    return f"{day}/{month}/{year}"


def to_html_date(value: str) -> str:
    if not value or len(value) < 10:
        return ""
    parts = value.split("/")
    if len(parts) != 3:
        return ""
    day, month, year = parts
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def format_br_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
