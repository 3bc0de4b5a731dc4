"""
form_engine/research.py — operações sobre as linhas de pesquisa.

A lista nunca fica vazia: remover só tira a última linha, e só quando há
mais de uma. Todas as funções devolvem uma nova tupla.
"""

from __future__ import annotations

from typing import TypeAlias

import dataclasses
import re

from data_model import ResearchRow

MIN_ROWS_MESSAGE = "Deve haver pelo menos uma linha de pesquisa."

_PASTE_SEPARATORS = re.compile(r"[\n,;]+")

ROW_FIELDS: frozenset[str] = frozenset({"kind", "identifier", "complement"})

Rows: TypeAlias = tuple[ResearchRow, ...]


class LastRowError(ValueError):
    """Tentativa de remover a única linha de pesquisa."""

    def __init__(self) -> None:
        super().__init__(MIN_ROWS_MESSAGE)


def add_row(rows: Rows) -> Rows:
    return (*rows, ResearchRow())


def remove_last_row(rows: Rows) -> Rows:
    if len(rows) <= 1:
        raise LastRowError()
    return rows[:-1]


def update_row(rows: Rows, index: int, field: str, value: str) -> Rows:
    if field not in ROW_FIELDS:
        raise ValueError(f"Campo de pesquisa desconhecido: {field!r}")
    row = dataclasses.replace(rows[index], **{field: value})
    return (*rows[:index], row, *rows[index + 1:])


def toggle_complement(rows: Rows, index: int) -> Rows:
    """Mostra (complemento "") ou esconde (None) o campo complementar."""
    current = rows[index]
    complement = "" if current.complement is None else None
    row = dataclasses.replace(current, complement=complement)
    return (*rows[:index], row, *rows[index + 1:])


def split_pasted(text: str) -> list[str]:
    """Quebra de linha, vírgula e ponto e vírgula separam os valores."""
    return [v.strip() for v in _PASTE_SEPARATORS.split(text) if v.strip()]


def distribute_paste(rows: Rows, index: int, text: str) -> tuple[Rows, int]:
    """
    Distribui valores colados a partir da linha `index`.

    O primeiro valor vai para a linha atual; os seguintes sobrescrevem as
    linhas abaixo ou criam novas. Todas recebem o tipo da linha atual.
    Retorna (linhas, quantidade de valores distribuídos).
    """
    values = split_pasted(text)
    if not values:
        return rows, 0

    kind = rows[index].kind
    out = list(rows)
    for offset, value in enumerate(values):
        target = index + offset
        if target < len(out):
            out[target] = dataclasses.replace(out[target], identifier=value, kind=kind)
        else:
            out.append(ResearchRow(kind=kind, identifier=value))
    return tuple(out), len(values)
