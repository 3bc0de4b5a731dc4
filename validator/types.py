"""
validator/types.py — códigos de erro e resultado da validação do formulário.

ValidationError  — uma falha: código, campo, mensagem, gravidade e dica de foco.
ValidationResult — resultado da validação: ok ou a primeira falha encontrada
                   (a validação nunca agrega várias mensagens).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from data_model import Severity
from search import FieldKey


class ErrorCode(StrEnum):
    """Códigos fixos do validador (fase 1 = erro, fase 2 = preenchimento)."""

    # Fase 1: cronologia da decisão judicial e retificações
    INVALID_DATE           = "E_INVALID_DATE"
    FUTURE_DATE            = "E_FUTURE_DATE"
    NOT_AFTER_PREVIOUS     = "E_NOT_AFTER_PREVIOUS"

    # Fase 2: campos obrigatórios
    MISSING_REQUIRED_FIELD = "E_MISSING_REQUIRED_FIELD"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    Uma falha de validação.

    - code:       ErrorCode
    - field:      caminho do campo, ex. "amendments/2/signing_date"
    - message:    mensagem exibida ao usuário
    - severity:   error (fase 1) ou warning (fase 2)
    - focus_hint: campo que deve receber foco (opcional)
    - details:    dados adicionais (índice na cadeia, rótulo anterior...)
    """

    code: ErrorCode
    field: str
    message: str
    severity: Severity
    focus_hint: FieldKey | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """ok=True sem erro; ok=False com exatamente um erro."""

    ok: bool
    error: ValidationError | None = None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @property
    def severity(self) -> Severity | None:
        return self.error.severity if self.error else None

    @property
    def focus_hint(self) -> FieldKey | None:
        return self.error.focus_hint if self.error else None

    @classmethod
    def passed(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failed(cls, error: ValidationError) -> ValidationResult:
        return cls(ok=False, error=error)
