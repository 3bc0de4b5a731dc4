"""
validator/form_validator.py — validação do formulário antes do envio.

FormValidator.validate(form, rule, today) -> ValidationResult

Etapas (fail-fast: a primeira falha interrompe a validação):
  1 — cronologia   (severidade error, só com a seção 2 visível)
        1a  data da assinatura da decisão base
        1b  cadeia de retificações (validate_chain)
  2 — preenchimento (severidade warning, na ordem do formulário)
        2a  campos básicos
        2b  seção 2 obrigatória: autoridade, órgão judicial, data
        2c  seção 3 obrigatória: tipo e senha da mídia
        2d  seção 4 obrigatória: ao menos uma pesquisa
        2e  cada retificação (seção 2 obrigatória)
        2f  cada linha de pesquisa (seção 4 obrigatória)

O formulário nunca é alterado: validar de novo após a correção é idempotente.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from chain import ChainErrorKind, ChainViolation, validate_chain, validate_signing_date
from data_model import (
    MEDIA_DOCUMENT_TYPE,
    OTHER_SUBJECT,
    DocumentForm,
    SectionRule,
    Severity,
    is_filled,
)
from search import FieldKey

from .types import ErrorCode, ValidationError, ValidationResult

_CHAIN_CODES: dict[ChainErrorKind, ErrorCode] = {
    ChainErrorKind.INVALID_DATE:       ErrorCode.INVALID_DATE,
    ChainErrorKind.FUTURE_DATE:        ErrorCode.FUTURE_DATE,
    ChainErrorKind.NOT_AFTER_PREVIOUS: ErrorCode.NOT_AFTER_PREVIOUS,
}


# ---------------------------------------------------------------------------
# Funções auxiliares
# ---------------------------------------------------------------------------

def _blank(value: str) -> bool:
    return not value.strip()


def _missing(field: str, message: str, focus: FieldKey | None = None) -> ValidationError:
    return ValidationError(
        code=ErrorCode.MISSING_REQUIRED_FIELD,
        field=field,
        message=message,
        severity=Severity.WARNING,
        focus_hint=focus,
    )


def _chain_error(violation: ChainViolation, amendment_ids: list[str]) -> ValidationError:
    if violation.index == 0:
        field, focus = "signing_date", FieldKey("dataAssinatura")
    else:
        record_id = amendment_ids[violation.index - 1]
        field = f"amendments/{violation.index}/signing_date"
        focus = FieldKey("dataAssinatura", record_id)
    details: dict[str, object] = {"index": violation.index}
    if violation.previous_label is not None:
        details["previous_label"] = violation.previous_label
    return ValidationError(
        code=_CHAIN_CODES[violation.kind],
        field=field,
        message=violation.message,
        severity=Severity.ERROR,
        focus_hint=focus,
        details=details,
    )


# ---------------------------------------------------------------------------
# FormValidator
# ---------------------------------------------------------------------------

class FormValidator:
    """
    Validador do formulário de documento.

    Uso:
        validator = FormValidator()
        result    = validator.validate(form, resolver.current, date.today())
        if not result.ok:
            notifications.notify(result.message, result.severity)
    """

    def validate(self, form: DocumentForm, rule: SectionRule, today: date) -> ValidationResult:
        error = self._stage_chronology(form, rule, today)
        if error is None:
            error = next(self._stage_completeness(form, rule), None)
        if error is None:
            return ValidationResult.passed()
        return ValidationResult.failed(error)

    # ------------------------------------------------------------------
    # Etapa 1: cronologia
    # ------------------------------------------------------------------

    def _stage_chronology(
        self,
        form: DocumentForm,
        rule: SectionRule,
        today: date,
    ) -> ValidationError | None:
        if not rule.section2.visible:
            return None
        violation = validate_signing_date(form.signing_date, today) or validate_chain(
            form.signing_date, form.amended, form.amendments, today
        )
        if violation is None:
            return None
        return _chain_error(violation, [r.id for r in form.amendments])

    # ------------------------------------------------------------------
    # Etapa 2: preenchimento
    # ------------------------------------------------------------------

    def _stage_completeness(
        self,
        form: DocumentForm,
        rule: SectionRule,
    ) -> Iterator[ValidationError]:
        """Gera as falhas na ordem declarada; validate() usa só a primeira."""
        yield from self._basic(form)
        if rule.section2.required:
            yield from self._judicial_decision(form)
        if rule.section3.required:
            yield from self._media(form)
        if rule.section4.required and not form.research:
            yield _missing("research", "Por favor, adicione pelo menos uma pesquisa")
        if rule.section2.required:
            yield from self._amendments(form)
        if rule.section4.required:
            yield from self._research_rows(form)

    def _basic(self, form: DocumentForm) -> Iterator[ValidationError]:
        if _blank(form.document_type):
            yield _missing(
                "document_type",
                "Por favor, selecione o Tipo de Documento",
                FieldKey("tipoDocumento"),
            )
        if form.document_type != MEDIA_DOCUMENT_TYPE and _blank(form.subject):
            yield _missing("subject", "Por favor, selecione o Assunto", FieldKey("assunto"))
        if form.subject == OTHER_SUBJECT and _blank(form.subject_other):
            yield _missing(
                "subject_other",
                'Por favor, especifique o assunto quando "Outros" é selecionado',
                FieldKey("assuntoOutros"),
            )
        if form.is_circular:
            if not form.recipients:
                yield _missing(
                    "recipients",
                    "Por favor, selecione pelo menos um destinatário para Ofício Circular",
                    FieldKey("destinatarios"),
                )
        elif not is_filled(form.recipient):
            yield _missing(
                "recipient", "Por favor, selecione o Destinatário", FieldKey("destinatario")
            )
        if not is_filled(form.addressing):
            yield _missing(
                "addressing", "Por favor, preencha o Endereçamento", FieldKey("enderecamento")
            )
        if _blank(form.document_number):
            yield _missing(
                "document_number",
                "Por favor, preencha o Número do Documento",
                FieldKey("numeroDocumento"),
            )
        if _blank(form.document_year):
            yield _missing("document_year", "Por favor, preencha o Ano", FieldKey("anoDocumento"))
        if not is_filled(form.analyst):
            yield _missing("analyst", "Por favor, selecione o Analista", FieldKey("analista"))

    def _judicial_decision(self, form: DocumentForm) -> Iterator[ValidationError]:
        if not is_filled(form.authority):
            yield _missing("authority", "Por favor, preencha a Autoridade", FieldKey("autoridade"))
        if not is_filled(form.court):
            yield _missing(
                "court", "Por favor, preencha o Órgão Judicial", FieldKey("orgaoJudicial")
            )
        if _blank(form.signing_date):
            yield _missing(
                "signing_date",
                "Por favor, preencha a Data da Assinatura",
                FieldKey("dataAssinatura"),
            )

    def _media(self, form: DocumentForm) -> Iterator[ValidationError]:
        # Tamanho e hash são preenchidos depois, no envio da mídia.
        if _blank(form.media_type):
            yield _missing(
                "media_type", "Por favor, selecione o Tipo da Mídia", FieldKey("tipoMidia")
            )
        if _blank(form.media_password):
            yield _missing(
                "media_password",
                "Por favor, preencha a Senha de Acesso da Mídia",
                FieldKey("senhaMidia"),
            )

    def _amendments(self, form: DocumentForm) -> Iterator[ValidationError]:
        for number, record in enumerate(form.amendments, start=1):
            label = f"{number}ª Decisão Retificadora"
            path = f"amendments/{number}"
            if not is_filled(record.authority):
                yield _missing(
                    f"{path}/authority",
                    f"Por favor, preencha a Autoridade da {label}",
                    FieldKey("autoridade", record.id),
                )
            if not is_filled(record.court):
                yield _missing(
                    f"{path}/court",
                    f"Por favor, preencha o Órgão Judicial da {label}",
                    FieldKey("orgaoJudicial", record.id),
                )
            if _blank(record.signing_date):
                yield _missing(
                    f"{path}/signing_date",
                    f"Por favor, preencha a Data da Assinatura da {label}",
                    FieldKey("dataAssinatura", record.id),
                )

    def _research_rows(self, form: DocumentForm) -> Iterator[ValidationError]:
        for number, row in enumerate(form.research, start=1):
            group = str(number - 1)
            if _blank(row.kind):
                yield _missing(
                    f"research/{number}/kind",
                    f"Por favor, selecione o tipo para a {number}ª pesquisa",
                    FieldKey("tipoPesquisa", group),
                )
            if _blank(row.identifier):
                yield _missing(
                    f"research/{number}/identifier",
                    f"Por favor, preencha o identificador para a {number}ª pesquisa",
                    FieldKey("identificador", group),
                )


def validate(form: DocumentForm, rule: SectionRule, today: date) -> ValidationResult:
    """Atalho para FormValidator().validate()."""
    return FormValidator().validate(form, rule, today)
