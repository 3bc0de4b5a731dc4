"""
form_engine/notifications.py — mensagens ao usuário (toasts).

NotificationSink é o contrato consumido pela sessão; NotificationCenter é a
implementação padrão, que guarda as mensagens com prazo de exibição
(3 s por padrão, configurável por SGED_NOTIFICATION_SECONDS).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from data_model import Severity

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 3.0


class NotificationSink(Protocol):
    def notify(self, message: str, severity: Severity) -> None: ...


@dataclass(frozen=True, slots=True)
class Notification:
    message: str
    severity: Severity
    expires_at: float

    def is_active(self, now: float) -> bool:
        return now < self.expires_at


class NotificationCenter:
    """
    Fila de notificações com expiração.

    Uso:
        center = NotificationCenter(duration=3.0)
        center.notify("Documento criado com sucesso!", Severity.SUCCESS)
        center.active()    # mensagens ainda visíveis
    """

    def __init__(
        self,
        duration: float = DEFAULT_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"Duração deve ser positiva: {duration!r}")
        self.duration = duration
        self._clock = clock
        self._items: list[Notification] = []

    def notify(self, message: str, severity: Severity) -> None:
        severity = Severity(severity)
        item = Notification(message, severity, self._clock() + self.duration)
        self._items.append(item)
        log = logger.warning if severity is Severity.ERROR else logger.info
        log("[%s] %s", severity, message)

    @property
    def history(self) -> list[Notification]:
        return list(self._items)

    @property
    def last(self) -> Notification | None:
        return self._items[-1] if self._items else None

    def active(self, now: float | None = None) -> list[Notification]:
        """Mensagens dentro do prazo; as expiradas são descartadas."""
        now = self._clock() if now is None else now
        self._items = [n for n in self._items if n.is_active(now)]
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()
