"""
search/types.py — tipos do controlador de combobox.

  FieldKey       — chave estruturada {base_field, group_id?}
  ComboboxState  — estado de interação de um campo
  Direction      — sentido da navegação por teclado
  FocusIntent / ScrollIntent — pedidos à camada de UI (executados depois)
"""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass, field
from enum import IntEnum


@dataclass(frozen=True, slots=True)
class FieldKey:
    """
    Identifica um campo de busca.

    - base_field: nome do campo ("autoridade", "orgaoJudicial", ...)
    - group_id:   id do grupo (ex.: id da retificação dona do campo);
                  None para campos fixos do formulário

    Comparação sempre por identidade exata; nunca por substring.
    """
    base_field: str
    group_id: str | None = None

    def in_group(self, group_id: str) -> bool:
        return self.group_id is not None and self.group_id == group_id

    def __str__(self) -> str:
        if self.group_id is None:
            return self.base_field
        return f"{self.base_field}[{self.group_id}]"


NO_HIGHLIGHT = -1


@dataclass(slots=True)
class ComboboxState:
    query: str = ""
    results: list[str] = field(default_factory=list)
    is_open: bool = False
    highlighted_index: int = NO_HIGHLIGHT

    @property
    def highlighted(self) -> str | None:
        if 0 <= self.highlighted_index < len(self.results):
            return self.results[self.highlighted_index]
        return None

    def close(self) -> None:
        self.is_open = False
        self.highlighted_index = NO_HIGHLIGHT


class Direction(IntEnum):
    UP   = -1
    DOWN = 1


@dataclass(frozen=True, slots=True)
class FocusIntent:
    """Devolver o foco ao input do campo."""
    key: FieldKey


@dataclass(frozen=True, slots=True)
class ScrollIntent:
    """Rolar a lista do campo até o item `index`."""
    key: FieldKey
    index: int


Intent: TypeAlias = FocusIntent | ScrollIntent
