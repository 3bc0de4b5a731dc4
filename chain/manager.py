"""
chain/manager.py — cadeia de retificações (decisões retificadoras).

A cadeia cresce e encolhe apenas pelos checkboxes:
  - marcar a decisão base como retificada cria a 1ª retificação;
  - marcar a última retificação como retificada acrescenta uma nova ao fim;
  - desmarcar uma retificação remove todas as posteriores a ela;
  - desmarcar a decisão base (ou ocultar a seção 2) descarta a cadeia.

Não existe remoção direta de um registro arbitrário.

Observadores on_created/on_disposed recebem o id de cada registro criado ou
descartado, para que o sub-estado de busca por registro acompanhe a cadeia.
"""

from __future__ import annotations

import dataclasses
import logging
import uuid
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from data_model import RETIFICATION_FIELDS, RetificationRecord

logger = logging.getLogger(__name__)

RecordObserver: TypeAlias = Callable[[str], None]


def _new_id() -> str:
    return uuid.uuid4().hex


class RetificationChain:
    """
    Lista ordenada e imutável (tupla) de RetificationRecord.

    Uso:
        chain = RetificationChain(on_created=..., on_disposed=...)
        chain.set_base_amended(True)            # cria a 1ª retificação
        first = chain.records[0]
        chain.update_field(first.id, "signing_date", "15/01/2024")
        chain.set_further_amended(first.id, True)   # cria a 2ª
        chain.set_further_amended(first.id, False)  # remove a 2ª
    """

    def __init__(
        self,
        records: Iterable[RetificationRecord] = (),
        *,
        id_factory: Callable[[], str] | None = None,
        on_created: RecordObserver | None = None,
        on_disposed: RecordObserver | None = None,
    ) -> None:
        self._id_factory = id_factory or _new_id
        self._on_created: list[RecordObserver] = [on_created] if on_created else []
        self._on_disposed: list[RecordObserver] = [on_disposed] if on_disposed else []
        self._records: tuple[RetificationRecord, ...] = ()
        self.replace_all(records)

    # ------------------------------------------------------------------
    # Consulta
    # ------------------------------------------------------------------

    @property
    def records(self) -> tuple[RetificationRecord, ...]:
        return self._records

    @property
    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def index_of(self, record_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        raise KeyError(f"Retificação inexistente: {record_id!r}")

    def get(self, record_id: str) -> RetificationRecord:
        return self._records[self.index_of(record_id)]

    def is_last(self, record_id: str) -> bool:
        return bool(self._records) and self._records[-1].id == record_id

    # ------------------------------------------------------------------
    # Observadores
    # ------------------------------------------------------------------

    def subscribe(
        self,
        on_created: RecordObserver | None = None,
        on_disposed: RecordObserver | None = None,
    ) -> None:
        if on_created:
            self._on_created.append(on_created)
        if on_disposed:
            self._on_disposed.append(on_disposed)

    def _created(self, record_id: str) -> None:
        for observer in self._on_created:
            observer(record_id)

    def _disposed(self, record_id: str) -> None:
        for observer in self._on_disposed:
            observer(record_id)

    # ------------------------------------------------------------------
    # Mutação
    # ------------------------------------------------------------------

    def append(self) -> RetificationRecord:
        record = RetificationRecord(id=self._id_factory())
        self._records = (*self._records, record)
        logger.debug("Retificação %s criada (posição %d)", record.id, len(self._records))
        self._created(record.id)
        return record

    def set_further_amended(self, record_id: str, flag: bool) -> None:
        index = self.index_of(record_id)
        was_last = index == len(self._records) - 1
        self._replace(index, further_amended=flag)
        if flag:
            if was_last:
                self.append()
        else:
            self._truncate_after(index)

    def update_field(self, record_id: str, field: str, value: Any) -> RetificationRecord:
        if field not in RETIFICATION_FIELDS:
            raise ValueError(f"Campo de retificação desconhecido: {field!r}")
        if field == "further_amended":
            raise ValueError("Use set_further_amended() para alterar further_amended")
        return self._replace(self.index_of(record_id), **{field: value})

    def set_base_amended(self, flag: bool) -> None:
        """Checkbox "Retificada" da decisão judicial base."""
        if flag and not self._records:
            self.append()
        elif not flag:
            self.clear()

    def clear(self) -> None:
        self._truncate_after(-1)

    def replace_all(self, records: Iterable[RetificationRecord]) -> None:
        """Carrega registros existentes (modo edição)."""
        self.clear()
        self._records = tuple(records)
        for record in self._records:
            self._created(record.id)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _replace(self, index: int, **changes: Any) -> RetificationRecord:
        record = dataclasses.replace(self._records[index], **changes)
        self._records = (*self._records[:index], record, *self._records[index + 1:])
        return record

    def _truncate_after(self, index: int) -> None:
        dropped = self._records[index + 1:]
        if not dropped:
            return
        self._records = self._records[:index + 1]
        logger.debug("Retificações descartadas: %s", [r.id for r in dropped])
        for record in dropped:
            self._disposed(record.id)
