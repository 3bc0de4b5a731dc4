"""Tests for the two-phase form validator."""

from __future__ import annotations

import pytest

from data_model import DocumentForm, ResearchRow, RetificationRecord, SectionRule, SectionState, Severity
from search import FieldKey
from sections import RuleTable
from validator import ErrorCode, FormValidator, ValidationResult

from conftest import TODAY, free


@pytest.fixture
def rule(table: RuleTable) -> SectionRule:
    return table.rule_for("Ofício", "Encaminhamento de decisão judicial")


def _validate(form: DocumentForm, rule: SectionRule) -> ValidationResult:
    return FormValidator().validate(form, rule, TODAY)


def test_complete_form_passes(complete_form: DocumentForm, rule: SectionRule) -> None:
    result = _validate(complete_form, rule)
    assert result.ok
    assert result.error is None
    assert result.message is None


def test_chain_error_reported_before_missing_fields(rule: SectionRule) -> None:
    form = DocumentForm(
        document_type="Ofício",
        subject="Encaminhamento de decisão judicial",
        signing_date="10/01/2024",
        amended=True,
        amendments=(RetificationRecord(id="r1", signing_date="10/01/2024"),),
    )
    result = _validate(form, rule)
    assert not result.ok
    error = result.error
    assert error.code is ErrorCode.NOT_AFTER_PREVIOUS
    assert error.severity is Severity.ERROR
    assert error.field == "amendments/1/signing_date"
    assert error.focus_hint == FieldKey("dataAssinatura", "r1")
    assert error.details == {"index": 1, "previous_label": "decisão judicial"}


def test_invalid_base_date_is_an_error(complete_form: DocumentForm, rule: SectionRule) -> None:
    result = _validate(complete_form.with_changes(signing_date="31/02/2024"), rule)
    assert result.error.code is ErrorCode.INVALID_DATE
    assert result.error.field == "signing_date"
    assert result.message == "Data da assinatura inválida"
    assert result.severity is Severity.ERROR


def test_future_base_date(complete_form: DocumentForm, rule: SectionRule) -> None:
    result = _validate(complete_form.with_changes(signing_date="02/06/2024"), rule)
    assert result.error.code is ErrorCode.FUTURE_DATE


def test_chronology_skipped_when_section2_hidden(complete_form: DocumentForm) -> None:
    rule = SectionRule(section4=SectionState(True, True))
    form = complete_form.with_changes(signing_date="31/02/2024")
    assert _validate(form, rule).ok


@pytest.mark.parametrize(
    ("changes", "field", "message"),
    [
        ({"document_type": ""}, "document_type", "Por favor, selecione o Tipo de Documento"),
        ({"subject": ""}, "subject", "Por favor, selecione o Assunto"),
        ({"recipient": None}, "recipient", "Por favor, selecione o Destinatário"),
        ({"addressing": free("  ")}, "addressing", "Por favor, preencha o Endereçamento"),
        ({"document_number": ""}, "document_number", "Por favor, preencha o Número do Documento"),
        ({"document_year": " "}, "document_year", "Por favor, preencha o Ano"),
        ({"analyst": None}, "analyst", "Por favor, selecione o Analista"),
        ({"authority": None}, "authority", "Por favor, preencha a Autoridade"),
        ({"court": None}, "court", "Por favor, preencha o Órgão Judicial"),
        ({"signing_date": ""}, "signing_date", "Por favor, preencha a Data da Assinatura"),
        ({"research": ()}, "research", "Por favor, adicione pelo menos uma pesquisa"),
    ],
)
def test_missing_required_field(
    complete_form: DocumentForm,
    rule: SectionRule,
    changes: dict,
    field: str,
    message: str,
) -> None:
    result = _validate(complete_form.with_changes(**changes), rule)
    assert not result.ok
    assert result.error.code is ErrorCode.MISSING_REQUIRED_FIELD
    assert result.error.severity is Severity.WARNING
    assert result.error.field == field
    assert result.message == message


def test_fields_checked_in_form_order(complete_form: DocumentForm, rule: SectionRule) -> None:
    form = complete_form.with_changes(document_number="", analyst=None, authority=None)
    assert _validate(form, rule).error.field == "document_number"


def test_media_document_needs_no_subject(table: RuleTable) -> None:
    form = DocumentForm(
        document_type="Mídia",
        recipient=free("Google Brasil"),
        addressing=free("Google Brasil Internet Ltda."),
        document_number="1",
        document_year="2024",
        analyst=free("Ana Souza"),
        media_type="Pen drive",
    )
    rule = table.rule_for("Mídia", "")
    result = _validate(form, rule)
    assert result.error.field == "media_password"
    assert result.message == "Por favor, preencha a Senha de Acesso da Mídia"

    assert _validate(form.with_changes(media_password="s3nha"), rule).ok


def test_other_subject_requires_description(complete_form: DocumentForm) -> None:
    form = complete_form.with_changes(subject="Outros")
    result = _validate(form, SectionRule.hidden())
    assert result.message == 'Por favor, especifique o assunto quando "Outros" é selecionado'
    assert _validate(form.with_changes(subject_other="Pedido"), SectionRule.hidden()).ok


def test_circular_requires_recipient_list(complete_form: DocumentForm) -> None:
    form = complete_form.with_changes(document_type="Ofício Circular", recipient=None)
    result = _validate(form, SectionRule.hidden())
    assert result.error.field == "recipients"
    assert _validate(form.with_changes(recipients=("Google",)), SectionRule.hidden()).ok


def test_amendment_fields_checked_after_sections(complete_form: DocumentForm, rule: SectionRule) -> None:
    form = complete_form.with_changes(
        amended=True,
        amendments=(
            RetificationRecord(id="r1", authority=free("Juíza"), court=free("TJGO"),
                               signing_date="15/01/2024", further_amended=True),
            RetificationRecord(id="r2", authority=free("Juíza"), signing_date="20/01/2024"),
        ),
    )
    result = _validate(form, rule)
    assert result.error.field == "amendments/2/court"
    assert result.message == "Por favor, preencha o Órgão Judicial da 2ª Decisão Retificadora"
    assert result.focus_hint == FieldKey("orgaoJudicial", "r2")


def test_research_rows_checked_last(complete_form: DocumentForm, rule: SectionRule) -> None:
    form = complete_form.with_changes(
        research=(ResearchRow("CPF", "123"), ResearchRow("E-mail", "")),
    )
    result = _validate(form, rule)
    assert result.message == "Por favor, preencha o identificador para a 2ª pesquisa"

    form = complete_form.with_changes(research=(ResearchRow("", "123"),))
    assert _validate(form, rule).message == "Por favor, selecione o tipo para a 1ª pesquisa"


def test_optional_visible_section_is_not_checked(complete_form: DocumentForm) -> None:
    rule = SectionRule(
        section2=SectionState(visible=True, required=False),
        section4=SectionState(visible=True, required=False),
    )
    form = complete_form.with_changes(authority=None, research=(ResearchRow(),))
    assert _validate(form, rule).ok


def test_validation_does_not_mutate_form(complete_form: DocumentForm, rule: SectionRule) -> None:
    form = complete_form.with_changes(analyst=None)
    first = _validate(form, rule)
    second = _validate(form, rule)
    assert first == second
    assert form.analyst is None
