"""
search/combobox.py — controlador genérico de campos de busca (combobox).

Um único controlador atende todos os campos de busca do formulário,
inclusive os criados em tempo de execução para cada retificação
(FieldKey com group_id = id da retificação).

Invariante: no máximo uma lista aberta em todo o formulário. Abrir uma
lista, ou focar o input de um campo, fecha as listas de todos os outros
campos (comparação exata de FieldKey).

Teclado:
  ArrowDown / ArrowUp  navegação com saturação nas pontas (sem volta)
  Enter                confirma o item destacado
  Escape               fecha a lista
  Tab                  fecha a lista e deixa o foco seguir (não consumido)
"""

from __future__ import annotations

from typing import TypeAlias

import logging
from collections.abc import Callable, Iterable

from .matcher import filter_items
from .types import (
    NO_HIGHLIGHT,
    ComboboxState,
    Direction,
    FieldKey,
    FocusIntent,
    Intent,
    ScrollIntent,
)

logger = logging.getLogger(__name__)

CommitCallback: TypeAlias = Callable[[str], None]


class ComboboxController:
    """
    Estado de interação por FieldKey.

    Uso:
        controller = ComboboxController(schedule=pending.schedule)
        controller.register(FieldKey("autoridade"), on_commit=set_autoridade)
        controller.search(FieldKey("autoridade"), "juiz goiania", autoridades)
        controller.handle_key(FieldKey("autoridade"), "ArrowDown")
        controller.handle_key(FieldKey("autoridade"), "Enter")
    """

    def __init__(self, schedule: Callable[[Intent], None] | None = None) -> None:
        self._states: dict[FieldKey, ComboboxState] = {}
        self._callbacks: dict[FieldKey, CommitCallback] = {}
        self._schedule = schedule or (lambda _intent: None)

    # ------------------------------------------------------------------
    # Registro
    # ------------------------------------------------------------------

    def register(self, key: FieldKey, on_commit: CommitCallback) -> None:
        self._callbacks[key] = on_commit
        self._states.setdefault(key, ComboboxState())

    def dispose(self, key: FieldKey) -> None:
        self._callbacks.pop(key, None)
        self._states.pop(key, None)

    def dispose_group(self, group_id: str) -> list[FieldKey]:
        """Remove todo o sub-estado dos campos do grupo (ex.: retificação removida)."""
        keys = [k for k in self._states.keys() | self._callbacks.keys() if k.in_group(group_id)]
        for key in keys:
            self.dispose(key)
        return keys

    def is_registered(self, key: FieldKey) -> bool:
        return key in self._callbacks

    # ------------------------------------------------------------------
    # Consulta de estado
    # ------------------------------------------------------------------

    def state(self, key: FieldKey) -> ComboboxState:
        return self._states.setdefault(key, ComboboxState())

    @property
    def keys(self) -> list[FieldKey]:
        return list(self._states)

    @property
    def open_keys(self) -> list[FieldKey]:
        return [k for k, s in self._states.items() if s.is_open]

    # ------------------------------------------------------------------
    # Operações
    # ------------------------------------------------------------------

    def search(self, key: FieldKey, query: str, pool: Iterable[str]) -> ComboboxState:
        state = self.state(key)
        state.query = query
        state.results = filter_items(pool, query)
        state.is_open = bool(query.strip()) and bool(state.results)
        state.highlighted_index = NO_HIGHLIGHT
        if state.is_open:
            self._close_others(key)
        return state

    def navigate(self, key: FieldKey, direction: Direction) -> int:
        state = self.state(key)
        if not state.results:
            return state.highlighted_index
        last = len(state.results) - 1
        index = state.highlighted_index + int(direction)
        state.highlighted_index = max(0, min(index, last))
        self._schedule(ScrollIntent(key, state.highlighted_index))
        return state.highlighted_index

    def commit(self, key: FieldKey) -> str | None:
        """Confirma o item destacado; sem destaque não faz nada."""
        state = self.state(key)
        value = state.highlighted
        if value is None:
            return None
        try:
            callback = self._callbacks[key]
        except KeyError:
            raise KeyError(f"Campo de busca não registrado: {key}") from None
        callback(value)
        state.close()
        self._schedule(FocusIntent(key))
        logger.debug("Campo %s confirmado com %r", key, value)
        return value

    def dismiss(self, key: FieldKey) -> None:
        self.state(key).close()

    def focus(self, key: FieldKey) -> None:
        """Input do campo recebeu foco: fecha as demais listas."""
        self._close_others(key)

    def close_all(self) -> None:
        """Clique fora de qualquer container de busca."""
        for state in self._states.values():
            state.close()

    def clear(self, key: FieldKey) -> None:
        state = self.state(key)
        state.query = ""
        state.results = []
        state.close()

    def handle_key(self, key: FieldKey, key_name: str) -> bool:
        """
        Trata uma tecla no input do campo.

        Retorna True quando a tecla foi consumida (o chamador deve
        suprimir o comportamento padrão); Tab nunca é consumido.
        """
        match key_name:
            case "ArrowDown":
                self.navigate(key, Direction.DOWN)
                return True
            case "ArrowUp":
                self.navigate(key, Direction.UP)
                return True
            case "Enter":
                return self.commit(key) is not None
            case "Escape":
                self.dismiss(key)
                return True
            case "Tab":
                self.dismiss(key)
                return False
            case _:
                return False

    # ------------------------------------------------------------------
    # Exclusão mútua
    # ------------------------------------------------------------------

    def _close_others(self, key: FieldKey) -> None:
        for other, state in self._states.items():
            if other != key:
                state.close()
