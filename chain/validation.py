"""
chain/validation.py — validação cronológica da cadeia de retificações.

Regra: a partir da data da decisão judicial (âncora), cada decisão
retificadora deve ter data estritamente posterior à anterior e nunca
posterior a hoje. Só é aplicada quando a decisão base está marcada como
retificada. Datas em branco são puladas (o preenchimento é verificado em
outra etapa). Retorna a primeira violação, em ordem de cadeia.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from data_model import RetificationRecord

from .dates import parse_br_date

BASE_LABEL = "decisão judicial"


def ordinal_label(index: int) -> str:
    """1 → "1ª Decisão Retificadora"."""
    return f"{index}ª Decisão Retificadora"


class ChainErrorKind(StrEnum):
    INVALID_DATE       = "invalid_date"
    FUTURE_DATE        = "future_date"
    NOT_AFTER_PREVIOUS = "not_after_previous"


@dataclass(frozen=True, slots=True)
class ChainViolation:
    """
    Primeira violação encontrada.

    - kind:           tipo da violação
    - index:          posição 1-based na cadeia (0 = decisão base)
    - previous_label: rótulo da decisão anterior (só NOT_AFTER_PREVIOUS)
    """
    kind: ChainErrorKind
    index: int
    previous_label: str | None = None

    @property
    def message(self) -> str:
        if self.index == 0:
            match self.kind:
                case ChainErrorKind.INVALID_DATE:
                    return "Data da assinatura inválida"
                case _:
                    return "Data da assinatura não pode ser posterior à data atual"
        label = ordinal_label(self.index)
        match self.kind:
            case ChainErrorKind.INVALID_DATE:
                return f"Data da {label} inválida"
            case ChainErrorKind.FUTURE_DATE:
                return (
                    f"Data de assinatura da {label} não pode ser "
                    f"posterior à data atual."
                )
            case _:
                return (
                    f"Data da assinatura da {label} deve ser posterior "
                    f"à {self.previous_label}"
                )


def validate_signing_date(value: str, today: date) -> ChainViolation | None:
    """Data da decisão base: em branco é aceita; inválida ou futura não."""
    if not value.strip():
        return None
    parsed = parse_br_date(value)
    if parsed is None:
        return ChainViolation(ChainErrorKind.INVALID_DATE, 0)
    if parsed > today:
        return ChainViolation(ChainErrorKind.FUTURE_DATE, 0)
    return None


def validate_chain(
    base_date: str,
    base_was_amended: bool,
    chain: Sequence[RetificationRecord],
    today: date,
) -> ChainViolation | None:
    """None quando a cadeia é válida."""
    if not base_was_amended or not chain:
        return None

    previous = parse_br_date(base_date)
    previous_label = BASE_LABEL

    for index, record in enumerate(chain, start=1):
        if not record.signing_date.strip():
            continue
        current = parse_br_date(record.signing_date)
        if current is None:
            return ChainViolation(ChainErrorKind.INVALID_DATE, index)
        if current > today:
            return ChainViolation(ChainErrorKind.FUTURE_DATE, index)
        if previous is not None and current <= previous:
            return ChainViolation(
                ChainErrorKind.NOT_AFTER_PREVIOUS, index, previous_label
            )
        previous = current
        previous_label = ordinal_label(index)

    return None
