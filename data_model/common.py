"""
Tipos primitivos compartilhados por sections, chain, search e validator.

  SearchableFieldValue — valor de campo de busca (destinatário, endereçamento,
                         autoridade, órgão judicial, analista)
  Severity             — gravidade de uma notificação ao usuário
"""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass
from enum import StrEnum

# ---------------------------------------------------------------------------
# Aliases
# ---------------------------------------------------------------------------

# Data no formato dd/mm/aaaa, como digitada pelo usuário (pode estar vazia).
BrDate: TypeAlias = str

# id = 0 marca texto livre (não resolvido para uma entidade do cadastro).
FREE_TEXT_ID = 0


# ---------------------------------------------------------------------------
# SearchableFieldValue
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SearchableFieldValue:
    """
    Valor de um campo de busca.

    - id:           identificador no cadastro; 0 = texto livre
    - display_name: nome exibido no campo
    """
    id: int
    display_name: str

    @property
    def is_free_text(self) -> bool:
        return self.id == FREE_TEXT_ID

    @property
    def is_blank(self) -> bool:
        return not self.display_name.strip()

    @classmethod
    def from_text(cls, text: str) -> SearchableFieldValue | None:
        """Texto digitado → valor livre; texto em branco → None."""
        if not text.strip():
            return None
        return cls(id=FREE_TEXT_ID, display_name=text)


def is_filled(value: SearchableFieldValue | None) -> bool:
    """True quando o campo de busca tem um nome não vazio."""
    return value is not None and not value.is_blank


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------

class Severity(StrEnum):
    """Gravidade exibida ao usuário (cor da notificação)."""
    ERROR   = "error"
    WARNING = "warning"
    SUCCESS = "success"
