"""Shared fixtures for the document form engine tests."""

from __future__ import annotations

import itertools
from datetime import date
from typing import Any

import pytest

from data_model import DocumentForm, ResearchRow, SearchableFieldValue
from form_engine import (
    CandidatePools,
    DocumentFormSession,
    NotificationCenter,
    RepositoryError,
)
from search import FieldKey
from sections import RuleTable

TODAY = date(2024, 6, 1)


class RecordingSink:
    """InteractionSink that records every delivered intent."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def focus(self, key: FieldKey) -> None:
        self.calls.append(("focus", key))

    def scroll_into_view(self, key: FieldKey, index: int) -> None:
        self.calls.append(("scroll", key, index))


class MemoryRepository:
    def __init__(self, *, fail: bool = False) -> None:
        self.created: list[dict[str, Any]] = []
        self.updated: list[tuple[Any, dict[str, Any]]] = []
        self.fail = fail

    def create(self, payload: dict[str, Any]) -> int:
        if self.fail:
            raise RepositoryError("indisponível")
        self.created.append(payload)
        return len(self.created)

    def update(self, document_id: Any, payload: dict[str, Any]) -> None:
        self.updated.append((document_id, payload))


def free(name: str) -> SearchableFieldValue:
    return SearchableFieldValue(id=0, display_name=name)


@pytest.fixture
def table() -> RuleTable:
    return RuleTable.default()


@pytest.fixture
def pools() -> CandidatePools:
    return CandidatePools(
        recipients=["Google Brasil", "Meta Platforms", "Juiz da 1ª Vara Criminal"],
        addressees=["Google Brasil Internet Ltda.", "Facebook Serviços Online do Brasil Ltda."],
        authorities=["Juiz de Direito", "Juíza de Direito Substituta", "Desembargador"],
        courts=[
            "1ª Vara Criminal de Goiânia",
            "11ª Promotoria de Justiça de Goiânia",
            "Tribunal de Justiça de Goiás",
        ],
        analysts=["Ana Souza", "João Pereira"],
        media_types=["Pen drive", "HD externo"],
        identifier_types=["CPF", "E-mail", "Telefone"],
        providers={
            "Google Brasil": "Google Brasil Internet Ltda.",
            "Meta Platforms": "Facebook Serviços Online do Brasil Ltda.",
        },
    )


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter(duration=3.0, clock=lambda: 100.0)


@pytest.fixture
def session(table: RuleTable, pools: CandidatePools, notifications: NotificationCenter) -> DocumentFormSession:
    counter = itertools.count(1)
    return DocumentFormSession(
        table,
        pools,
        notifications=notifications,
        today=lambda: TODAY,
        id_factory=lambda: f"r{next(counter)}",
    )


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def complete_form() -> DocumentForm:
    """Ofício de encaminhamento de decisão judicial, pronto para envio."""
    return DocumentForm(
        document_type="Ofício",
        subject="Encaminhamento de decisão judicial",
        recipient=free("Google Brasil"),
        addressing=free("Google Brasil Internet Ltda."),
        document_number="123",
        document_year="2024",
        analyst=free("Ana Souza"),
        authority=free("Juiz de Direito"),
        court=free("1ª Vara Criminal de Goiânia"),
        signing_date="10/01/2024",
        research=(ResearchRow(kind="E-mail", identifier="alvo@example.com"),),
    )
