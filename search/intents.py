"""
search/intents.py — slot único de pedido de foco/rolagem adiado.

Pedidos de foco e rolagem precisam observar o estado pós-atualização da UI,
por isso são guardados e entregues apenas em flush(). Um novo pedido
sobrescreve o pendente (último a escrever vence); não há fila.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .types import FieldKey, FocusIntent, Intent, ScrollIntent

logger = logging.getLogger(__name__)


class InteractionSink(Protocol):
    """Alvo de foco/rolagem fornecido pela camada de UI, por chave de campo."""

    def focus(self, key: FieldKey) -> None: ...

    def scroll_into_view(self, key: FieldKey, index: int) -> None: ...


class PendingIntent:
    """Slot único de pedido adiado."""

    def __init__(self) -> None:
        self._pending: Intent | None = None

    @property
    def pending(self) -> Intent | None:
        return self._pending

    def schedule(self, intent: Intent) -> None:
        if self._pending is not None:
            logger.debug("Pedido %r sobrescrito por %r", self._pending, intent)
        self._pending = intent

    def flush(self, sink: InteractionSink) -> Intent | None:
        """Entrega o pedido pendente (se houver) e esvazia o slot."""
        intent, self._pending = self._pending, None
        match intent:
            case FocusIntent(key=key):
                sink.focus(key)
            case ScrollIntent(key=key, index=index):
                sink.scroll_into_view(key, index)
        return intent
