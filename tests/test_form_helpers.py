"""Tests for media size formatting, research rows, addressing and candidate pools."""

from __future__ import annotations

import json

import pytest

from data_model import ResearchRow, SearchableFieldValue
from form_engine import (
    FIXED_CIRCULAR_ADDRESSING,
    CandidatePools,
    LastRowError,
    addressing_for,
    distribute_paste,
    format_media_size,
    providers_from_records,
    split_pasted,
)
from form_engine.research import add_row, remove_last_row, toggle_complement, update_row

PROVIDERS = {"Google Brasil": "Google Brasil Internet Ltda."}


# ---------------------------------------------------------------------------
# Media size
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("abc", ""),
        ("123", "123"),
        ("1234", "1.234"),
        ("1234567", "1.234.567"),
        ("1234,5", "1.234,5"),
        ("1234,567", "1.234,56"),
        ("1.234,567", "1.234,56"),
        ("1234.56", "1.234,56"),
        ("1.234", "1.234"),
        ("1.234.567", "1.234.567"),
        ("12,3,4", "12"),
        ("10 GB", "10"),
    ],
)
def test_format_media_size(raw: str, expected: str) -> None:
    assert format_media_size(raw) == expected


# ---------------------------------------------------------------------------
# Research rows
# ---------------------------------------------------------------------------

def test_last_row_cannot_be_removed() -> None:
    rows = (ResearchRow(),)
    with pytest.raises(LastRowError, match="pelo menos uma linha"):
        remove_last_row(rows)
    assert remove_last_row(add_row(rows)) == rows


def test_update_row_rejects_unknown_field() -> None:
    with pytest.raises(ValueError):
        update_row((ResearchRow(),), 0, "nope", "x")


def test_toggle_complement_round_trip() -> None:
    rows = toggle_complement((ResearchRow("CPF", "1"),), 0)
    assert rows[0].complement == ""
    assert toggle_complement(rows, 0)[0].complement is None


def test_split_pasted_ignores_blank_values() -> None:
    assert split_pasted("a\n\n b ;;c,\r\n") == ["a", "b", "c"]


def test_distribute_paste_overwrites_and_extends() -> None:
    rows = (
        ResearchRow("CPF", ""),
        ResearchRow("E-mail", "x@example.com", "obs"),
    )

    out, count = distribute_paste(rows, 0, "111,222,333")

    assert count == 3
    assert out == (
        ResearchRow("CPF", "111"),
        ResearchRow("CPF", "222", "obs"),
        ResearchRow("CPF", "333"),
    )


def test_distribute_paste_from_middle_row() -> None:
    rows = (ResearchRow("CPF", "1"), ResearchRow("Telefone", ""))
    out, count = distribute_paste(rows, 1, "62 9999\n62 8888")
    assert count == 2
    assert out[0] == ResearchRow("CPF", "1")
    assert [r.identifier for r in out[1:]] == ["62 9999", "62 8888"]
    assert {r.kind for r in out[1:]} == {"Telefone"}


def test_distribute_paste_with_nothing_to_paste() -> None:
    rows = (ResearchRow(),)
    assert distribute_paste(rows, 0, " , ") == (rows, 0)


# ---------------------------------------------------------------------------
# Addressing
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("document_type", "recipient", "expected"),
    [
        ("Ofício Circular", "Google Brasil", FIXED_CIRCULAR_ADDRESSING),
        ("Ofício Circular", "Qualquer", FIXED_CIRCULAR_ADDRESSING),
        ("Ofício", "Google Brasil", "Google Brasil Internet Ltda."),
        ("Ofício", "Juiz da 1ª Vara", None),
    ],
)
def test_addressing_for(document_type: str, recipient: str, expected: str | None) -> None:
    value = addressing_for(document_type, recipient, PROVIDERS)
    if expected is None:
        assert value is None
    else:
        assert value == SearchableFieldValue(0, expected)


def test_providers_from_records_skips_incomplete() -> None:
    records = [
        {"nomeFantasia": "Google Brasil", "razaoSocial": "Google Brasil Internet Ltda."},
        {"nomeFantasia": "Sem razão"},
        {"nomeFantasia": "Google Brasil", "razaoSocial": "Outra"},
    ]
    assert providers_from_records(records) == PROVIDERS


# ---------------------------------------------------------------------------
# Candidate pools
# ---------------------------------------------------------------------------

def test_pools_from_dict_merges_providers() -> None:
    pools = CandidatePools.from_dict(
        {
            "destinatarios": ["Juiz da 1ª Vara"],
            "provedores": [
                {"nomeFantasia": "Google Brasil", "razaoSocial": "Google Brasil Internet Ltda."},
            ],
            "autoridades": [{"nome": "Juiz de Direito"}, {"nome": ""}, "Desembargador"],
            "tiposMidia": ["Pen drive"],
        }
    )

    assert pools.recipients == ["Juiz da 1ª Vara", "Google Brasil"]
    assert pools.addressees == ["Google Brasil Internet Ltda."]
    assert pools.authorities == ["Desembargador", "Juiz de Direito"]
    assert pools.media_types == ["Pen drive"]
    assert pools.providers == PROVIDERS
    assert pools.for_field("autoridade") is pools.authorities


def test_pools_from_file(tmp_path) -> None:
    path = tmp_path / "pools.json"
    path.write_text(json.dumps({"analistas": ["Ana Souza"]}), encoding="utf-8")
    assert CandidatePools.from_file(path).analysts == ["Ana Souza"]


def test_unknown_pool_field() -> None:
    with pytest.raises(KeyError):
        CandidatePools().for_field("tipoMidia")
