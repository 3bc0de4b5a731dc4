"""Tests for section visibility resolution and hidden-section clearing."""

from __future__ import annotations

from data_model import ResearchRow, SectionRule
from sections import ClearRequest, RuleTable, SectionResolver, check_consistency, clear_request_for


def test_judicial_decision_scenario_clears_only_media(table: RuleTable) -> None:
    requests: list[ClearRequest] = []
    resolver = SectionResolver(table, on_clear=requests.append)

    resolution = resolver.recompute("Ofício", "Encaminhamento de decisão judicial")

    assert resolution.key == "Ofício|Encaminhamento de decisão judicial"
    assert resolution.rule.section2.visible and resolution.rule.section2.required
    assert not resolution.rule.section3.visible
    assert resolution.rule.section4.visible
    assert resolver.current == resolution.rule
    assert requests == [resolution.cleared]
    assert requests[0].sections == ("section3",)
    assert set(requests[0].fields) == {"media_type", "media_size", "media_hash", "media_password"}
    assert not requests[0].discard_chain


def test_unresolved_classification_clears_all_sections(table: RuleTable) -> None:
    requests: list[ClearRequest] = []
    resolver = SectionResolver(table, on_clear=requests.append)

    resolution = resolver.recompute("Ofício", "")

    assert resolution.key is None
    assert resolution.rule == SectionRule.hidden()
    request = requests[0]
    assert request.sections == ("section2", "section3", "section4")
    assert request.discard_chain
    assert request.fields["authority"] is None
    assert request.fields["signing_date"] == ""
    assert request.fields["amended"] is False
    assert request.fields["research"] == (ResearchRow(),)


def test_loading_suppresses_clearing(table: RuleTable) -> None:
    requests: list[ClearRequest] = []
    resolver = SectionResolver(table, on_clear=requests.append)

    resolution = resolver.recompute("Mídia", "", loading=True)

    assert requests == []
    assert resolution.cleared is None
    assert resolution.rule.section3.visible


def test_request_only_when_something_is_hidden() -> None:
    everything = clear_request_for(SectionRule.hidden())
    assert everything.sections == ("section2", "section3", "section4")

    table = RuleTable.from_dict(
        {"sections": {"Ofício|Outros": {"section2": True, "section3": True, "section4": True}}}
    )
    requests: list[ClearRequest] = []
    resolution = SectionResolver(table, on_clear=requests.append).recompute("Ofício", "Outros")
    assert requests == []
    assert resolution.cleared is None


def test_resolve_does_not_change_current(table: RuleTable) -> None:
    resolver = SectionResolver(table)
    rule = resolver.resolve("Mídia", "")
    assert rule.section3.visible
    assert resolver.current == SectionRule.hidden()


def test_default_table_is_consistent(table: RuleTable) -> None:
    assert check_consistency(table).is_consistent


def test_consistency_report_flags_problems() -> None:
    table = RuleTable.from_dict(
        {
            "catalog": {"Ofício": ["Outros", "Requisição"], "Mídia": []},
            "sections": {
                "Ofício|Outros": {"section2": False, "section3": False, "section4": False},
                "Ofício|SEM_ASSUNTO": {"section2": False, "section3": False, "section4": False},
                "Relatório|Outros": {"section2": False, "section3": False, "section4": False},
            },
        }
    )
    report = check_consistency(table, known_subjects=["Outros"])

    assert not report.is_consistent
    assert report.orphan_sections == ["Ofício|SEM_ASSUNTO", "Relatório|Outros"]
    assert report.missing_sections == ["Ofício|Requisição"]
    assert report.missing_no_subject == ["Mídia|SEM_ASSUNTO"]
    assert report.unknown_subjects == ["Ofício → Requisição"]
