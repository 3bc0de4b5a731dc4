"""
form_engine/formatters.py — máscaras de entrada do formulário.

format_media_size(s) — tamanho da mídia no padrão brasileiro
                       ("1234567,5" → "1.234.567,5"; "1234.56" → "1.234,56")
"""

from __future__ import annotations

import re

_NOT_NUMERIC = re.compile(r"[^\d.,]")


def _thousands(digits: str) -> str:
    """Separador de milhares com ponto: "1234567" → "1.234.567"."""
    if len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return ".".join(groups)


def format_media_size(value: str) -> str:
    """
    Normaliza o tamanho digitado para o padrão brasileiro.

    - vírgula é o separador decimal (no máximo 2 casas);
    - sem vírgula, um único ponto seguido de 1–2 dígitos é lido como decimal
      (formato americano); caso contrário, pontos são separadores de milhar;
    - mais de uma vírgula descarta tudo após a primeira.
    """
    clean = _NOT_NUMERIC.sub("", value.strip())
    if not clean:
        return ""

    if "," in clean:
        parts = clean.split(",")
        integer = _thousands(parts[0].replace(".", ""))
        if len(parts) == 2:
            return f"{integer},{parts[1][:2]}"
        return integer

    parts = clean.split(".")
    if len(parts) == 2 and len(parts[1]) <= 2:
        return f"{_thousands(parts[0])},{parts[1]}"
    return _thousands(clean.replace(".", ""))
