"""Tests for the section rule table and document catalog."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from data_model import SectionRule, SectionState
from sections import DocumentCatalog, RuleTable, RuleTableError

VISIBLE = SectionState(visible=True, required=True)
HIDDEN = SectionState()


def test_default_judicial_decision_forwarding(table: RuleTable) -> None:
    rule = table.rule_for("Ofício", "Encaminhamento de decisão judicial")
    assert rule == SectionRule(section2=VISIBLE, section3=HIDDEN, section4=VISIBLE)


def test_default_media_uses_subjectless_key(table: RuleTable) -> None:
    assert table.rule_for("Mídia", "") == SectionRule(section3=VISIBLE)
    assert table.rule_for("Mídia", "qualquer coisa") == SectionRule(section3=VISIBLE)


@pytest.mark.parametrize(
    ("document_type", "subject"),
    [
        ("", ""),
        ("Ofício", ""),
        ("", "Outros"),
        ("Ofício", "Assunto inexistente"),
        ("Tipo inexistente", "Outros"),
        ("Ofício", "Outros"),
    ],
)
def test_unknown_or_incomplete_classification_hides_everything(
    table: RuleTable, document_type: str, subject: str
) -> None:
    assert table.rule_for(document_type, subject) == SectionRule.hidden()


def test_from_dict_accepts_both_entry_forms() -> None:
    table = RuleTable.from_dict(
        {
            "catalog": {"Ofício": ["Outros"], "Mídia": []},
            "sections": {
                "Ofício|Outros": {
                    "section2": {"visible": True, "required": False},
                    "section3": {"visible": False, "required": False},
                    "section4": {"visible": True, "required": True},
                },
                "Mídia|SEM_ASSUNTO": {"section2": False, "section3": True, "section4": False},
            },
        }
    )
    other = table.rule_for("Ofício", "Outros")
    assert other.section2 == SectionState(visible=True, required=False)
    assert other.is_required("section4")
    assert table.rule_for("Mídia", "") == SectionRule(section3=VISIBLE)
    assert table.catalog.document_types == ["Ofício", "Mídia"]


def test_from_dict_without_catalog_uses_default() -> None:
    table = RuleTable.from_dict({"sections": {}})
    assert len(table) == 0
    assert "Ofício" in table.catalog.document_types


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"sections": {"SemSeparador": {"section2": True, "section3": True, "section4": True}}},
        {"sections": {"Ofício|Outros": {"section2": True, "section3": True}}},
        {"sections": {"Ofício|Outros": {"section2": {"visible": True}, "section3": True, "section4": True}}},
        {"sections": {"Ofício|Outros": {"section2": "sim", "section3": True, "section4": True}}},
    ],
)
def test_from_dict_rejects_invalid_tables(data: dict) -> None:
    with pytest.raises(RuleTableError):
        RuleTable.from_dict(data)


def test_to_dict_round_trip(table: RuleTable) -> None:
    again = RuleTable.from_dict(table.to_dict())
    assert dict(again.items()) == dict(table.items())


def test_from_file(tmp_path: Path) -> None:
    path = tmp_path / "regras.json"
    path.write_text(
        json.dumps({"sections": {"Ofício|Outros": {"section2": True, "section3": False, "section4": False}}}),
        encoding="utf-8",
    )
    table = RuleTable.from_file(path)
    assert table.rule_for("Ofício", "Outros").section2 == VISIBLE


def test_from_file_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "regras.json"
    path.write_text("{nope", encoding="utf-8")
    with pytest.raises(RuleTableError):
        RuleTable.from_file(path)


def test_section_rule_state_rejects_unknown_section() -> None:
    with pytest.raises(ValueError):
        SectionRule().state("section9")


def test_catalog_reverse_lookup() -> None:
    catalog = DocumentCatalog.default()
    assert catalog.subjects_for("Mídia") == []
    assert catalog.is_subject_allowed("Ofício Circular", "Outros")
    assert not catalog.is_subject_allowed("Ofício Circular", "Encaminhamento de mídia")
    assert set(catalog.types_for_subject("Encaminhamento de decisão judicial")) == {
        "Ofício",
        "Ofício Circular",
    }
