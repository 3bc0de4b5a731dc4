"""Tests for the accent-insensitive multi-word matcher."""

from __future__ import annotations

import pytest

from search import filter_items, filter_records, matches, normalize, record_label


def test_normalize_strips_accents_and_case() -> None:
    assert normalize("Goiânia") == "goiania"
    assert normalize("ÓRGÃO Judicial") == "orgao judicial"
    assert normalize("11ª") == "11ª"


@pytest.mark.parametrize(
    ("item", "query", "expected"),
    [
        ("11ª Promotoria de Justiça de Goiânia", "11 goiania", True),
        ("11ª Promotoria de Justiça de Goiânia", "goiania 11", True),
        ("11ª Promotoria de Justiça de Goiânia", "justica   promotoria", True),
        ("11ª Promotoria de Justiça de Goiânia", "anapolis", False),
        ("11ª Promotoria de Justiça de Goiânia", "", True),
        ("11ª Promotoria de Justiça de Goiânia", "   ", True),
        ("Juíza de Direito", "JUIZA", True),
        ("Juiz de Direito", "juiza", False),
    ],
)
def test_matches(item: str, query: str, expected: bool) -> None:
    assert matches(item, query) is expected


def test_filter_items_preserves_pool_order() -> None:
    pool = ["Vara Cível", "1ª Vara Criminal", "Tribunal de Justiça", "2ª Vara Criminal"]
    assert filter_items(pool, "vara criminal") == ["1ª Vara Criminal", "2ª Vara Criminal"]


def test_filter_items_blank_query_returns_everything() -> None:
    pool = ["b", "a", "c"]
    assert filter_items(pool, "") == ["b", "a", "c"]


def test_filter_items_accepts_generators() -> None:
    assert filter_items((s for s in ["Ana", "João"]), "joao") == ["João"]


def test_record_label_uses_first_non_empty_field() -> None:
    assert record_label({"nome": "", "nomeFantasia": "Google"}) == "Google"
    assert record_label({"razaoSocial": "Google Ltda."}) == "Google Ltda."
    assert record_label({"outro": "x"}) == ""


def test_filter_records_dedupes_labels_in_order() -> None:
    records = [
        {"nomeFantasia": "Google Brasil"},
        {"nome": "Gol Linhas Aéreas"},
        {"nomeFantasia": "Google Brasil"},
        {"nomeFantasia": ""},
    ]
    assert filter_records(records, "go") == ["Google Brasil", "Gol Linhas Aéreas"]
    assert filter_records(records, "aereas") == ["Gol Linhas Aéreas"]
