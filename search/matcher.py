"""
search/matcher.py — busca multipalavra insensível a acentos e caixa.

  normalize(s)                  NFD → remove marcas combinantes → minúsculas
  matches(item, query)          todos os tokens da consulta contidos no item
  filter_items(pool, query)     filtro preservando a ordem do pool
  filter_records(records, ...)  idem para cadastros estruturados (dicts)

Os tokens não precisam ser adjacentes nem estar em ordem:
"11 goiania" casa com "11ª Promotoria de Justiça de Goiânia".
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

DEFAULT_RECORD_FIELDS: tuple[str, ...] = (
    "nome",
    "nomeFantasia",
    "razaoSocial",
    "nomeCompleto",
)


def normalize(s: str) -> str:
    decomposed = unicodedata.normalize("NFD", s)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower()


def tokenize(query: str) -> list[str]:
    return normalize(query).split()


def matches(item: str, query: str) -> bool:
    """Consulta em branco casa com tudo."""
    tokens = tokenize(query)
    if not tokens:
        return True
    haystack = normalize(item)
    return all(token in haystack for token in tokens)


def filter_items(pool: Iterable[str], query: str) -> list[str]:
    tokens = tokenize(query)
    if not tokens:
        return list(pool)
    return [item for item in pool if all(t in normalize(item) for t in tokens)]


def record_label(
    record: Mapping[str, Any],
    fields: Sequence[str] = DEFAULT_RECORD_FIELDS,
) -> str:
    """Primeiro campo textual não vazio do registro (ordem de `fields`)."""
    for name in fields:
        value = record.get(name)
        if isinstance(value, str) and value:
            return value
    return ""


def filter_records(
    records: Iterable[Mapping[str, Any]],
    query: str,
    fields: Sequence[str] = DEFAULT_RECORD_FIELDS,
) -> list[str]:
    """
    Filtra registros estruturados e devolve seus rótulos.

    Rótulos vazios são descartados; duplicados aparecem uma vez, na posição
    da primeira ocorrência.
    """
    seen: set[str] = set()
    out: list[str] = []
    for record in records:
        label = record_label(record, fields)
        if not label or label in seen:
            continue
        if matches(label, query):
            seen.add(label)
            out.append(label)
    return out
