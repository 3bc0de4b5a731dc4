"""
form_engine/session.py — sessão de edição de um documento.

DocumentFormSession liga os eventos da UI (digitação, teclas, cliques,
checkboxes) aos componentes do formulário:

  SectionResolver     — visibilidade das seções e limpeza dos campos ocultos
  RetificationChain   — cadeia de retificações
  ComboboxController  — campos de busca, inclusive os de cada retificação
  FormValidator       — validação antes do envio
  PendingIntent       — foco/rolagem entregues à UI em flush_intents()

A sessão é a única dona do estado; nada é gravado antes de submit().
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from chain import RetificationChain, format_date_mask, from_html_date
from data_model import (
    FORM_FIELDS,
    OTHER_SUBJECT,
    DocumentForm,
    RetificationRecord,
    SearchableFieldValue,
    SectionRule,
    Severity,
)
from search import (
    ComboboxController,
    ComboboxState,
    FieldKey,
    FocusIntent,
    Intent,
    InteractionSink,
    PendingIntent,
)
from sections import ClearRequest, RuleTable, SectionResolver
from validator import FormValidator, ValidationResult, form_to_payload, normalize_snapshot

from . import research
from .addressing import addressing_for, circular_addressing
from .collaborators import CandidatePools, DocumentRepository, RepositoryError
from .formatters import format_media_size
from .notifications import NotificationCenter, NotificationSink

logger = logging.getLogger(__name__)

# Campo de busca (chave da UI) → atributo do DocumentForm
SEARCH_FIELDS: dict[str, str] = {
    "destinatario":  "recipient",
    "enderecamento": "addressing",
    "analista":      "analyst",
    "autoridade":    "authority",
    "orgaoJudicial": "court",
}

# Campos de busca de cada retificação (group_id = id da retificação)
AMENDMENT_SEARCH_FIELDS: dict[str, str] = {
    "autoridade":    "authority",
    "orgaoJudicial": "court",
}

_SEARCHABLE_ATTRS = frozenset(SEARCH_FIELDS.values())

# Campos com operação própria; set_field() não os aceita.
_DEDICATED_FIELDS: dict[str, str] = {
    "amendments": "set_base_amended / set_further_amended / update_amendment",
    "research":   "add_research_row / update_research_row / ...",
    "recipients": "set_recipients",
}

SAVE_ERROR_MESSAGE = "Erro ao salvar o documento. Tente novamente."


@dataclass(frozen=True, slots=True)
class SubmitResult:
    """
    Resultado de submit().

    - validation:  resultado da validação (ok=False aborta o envio)
    - document_id: id do documento gravado
    - saved:       o repositório aceitou a gravação
    """
    validation: ValidationResult
    document_id: Any = None
    saved: bool = False


def _as_searchable(value: SearchableFieldValue | str | None) -> SearchableFieldValue | None:
    if isinstance(value, str):
        return SearchableFieldValue.from_text(value)
    return value


class DocumentFormSession:
    """
    Uso:
        session = DocumentFormSession(RuleTable.default(), pools)
        session.set_document_type("Ofício")
        session.set_subject("Encaminhamento de decisão judicial")
        session.type_in_search(FieldKey("autoridade"), "juiz")
        session.handle_key(FieldKey("autoridade"), "ArrowDown")
        session.handle_key(FieldKey("autoridade"), "Enter")
        session.flush_intents(ui)
        result = session.submit(repository)
    """

    def __init__(
        self,
        table: RuleTable | None = None,
        pools: CandidatePools | None = None,
        *,
        notifications: NotificationSink | None = None,
        today: Callable[[], date] = date.today,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.pools = pools or CandidatePools()
        self.notifications = notifications if notifications is not None else NotificationCenter()
        self.intents = PendingIntent()
        self.combobox = ComboboxController(schedule=self.intents.schedule)
        self.resolver = SectionResolver(table or RuleTable.default(), on_clear=self._apply_clear)
        self.chain = RetificationChain(
            id_factory=id_factory,
            on_created=self._register_amendment,
            on_disposed=self.combobox.dispose_group,
        )
        self.validator = FormValidator()
        self.document_id: Any = None
        self._today = today
        self._form = DocumentForm()

        for base_field in SEARCH_FIELDS:
            self.combobox.register(FieldKey(base_field), self._committer(base_field))

    # ------------------------------------------------------------------
    # Consulta
    # ------------------------------------------------------------------

    @property
    def form(self) -> DocumentForm:
        """Snapshot corrente, com a cadeia de retificações."""
        return self._form.with_changes(amendments=self.chain.records)

    @property
    def sections(self) -> SectionRule:
        return self.resolver.current

    @property
    def is_edit_mode(self) -> bool:
        return self.document_id is not None

    def search_state(self, key: FieldKey) -> ComboboxState:
        return self.combobox.state(key)

    def subjects(self) -> list[str]:
        """Assuntos permitidos para o tipo de documento corrente."""
        return self.resolver.table.catalog.subjects_for(self._form.document_type)

    # ------------------------------------------------------------------
    # Classificação
    # ------------------------------------------------------------------

    def set_document_type(self, value: str) -> SectionRule:
        """Trocar o tipo limpa assunto, destinatário(s) e endereçamento."""
        self._set(
            document_type=value,
            subject="",
            subject_other="",
            recipient=None,
            recipients=(),
            addressing=None,
        )
        return self._recompute()

    def set_subject(self, value: str) -> SectionRule:
        changes: dict[str, Any] = {"subject": value}
        if value != OTHER_SUBJECT:
            changes["subject_other"] = ""
        if self._form.is_circular:
            changes["addressing"] = circular_addressing()
        self._set(**changes)
        return self._recompute()

    def _recompute(self, *, loading: bool = False) -> SectionRule:
        resolution = self.resolver.recompute(
            self._form.document_type, self._form.subject, loading=loading
        )
        return resolution.rule

    def _apply_clear(self, request: ClearRequest) -> None:
        self._set(**request.fields)
        if request.discard_chain:
            self.chain.clear()
        logger.debug("Seções ocultas limpas: %s", ", ".join(request.sections))

    # ------------------------------------------------------------------
    # Campos simples
    # ------------------------------------------------------------------

    def set_field(self, name: str, value: Any) -> None:
        match name:
            case "document_type":
                self.set_document_type(value)
            case "subject":
                self.set_subject(value)
            case "amended":
                self.set_base_amended(bool(value))
            case "media_size":
                self.set_media_size(value)
            case _ if name in _DEDICATED_FIELDS:
                raise ValueError(f"Use {_DEDICATED_FIELDS[name]} para alterar {name!r}")
            case _ if name in _SEARCHABLE_ATTRS:
                self._set(**{name: _as_searchable(value)})
            case _ if name in FORM_FIELDS:
                self._set(**{name: value})
            case _:
                raise ValueError(f"Campo desconhecido: {name!r}")

    def set_recipients(self, names: Iterable[str]) -> None:
        """Destinatários do Ofício Circular (seleção múltipla)."""
        changes: dict[str, Any] = {"recipients": tuple(n for n in names if n)}
        if self._form.is_circular:
            changes["addressing"] = circular_addressing()
        self._set(**changes)

    def set_media_size(self, value: str) -> str:
        formatted = format_media_size(value)
        self._set(media_size=formatted)
        return formatted

    def type_date(self, value: str, record_id: str | None = None) -> str:
        """Data digitada com máscara dd/mm/aaaa (decisão base ou retificação)."""
        return self._set_date(format_date_mask(value), record_id)

    def pick_calendar_date(self, value: str, record_id: str | None = None) -> str:
        """Data escolhida no calendário (aaaa-mm-dd)."""
        return self._set_date(from_html_date(value), record_id)

    def _set_date(self, value: str, record_id: str | None) -> str:
        if record_id is None:
            self._set(signing_date=value)
        else:
            self.chain.update_field(record_id, "signing_date", value)
        return value

    def _set(self, **changes: Any) -> None:
        self._form = self._form.with_changes(**changes)

    # ------------------------------------------------------------------
    # Campos de busca
    # ------------------------------------------------------------------

    def type_in_search(self, key: FieldKey, text: str) -> ComboboxState:
        """
        Texto digitado num campo de busca: o valor vira texto livre (id 0)
        e a lista de candidatos é filtrada.
        """
        if key.group_id is None:
            attr = SEARCH_FIELDS[key.base_field]
            self._set(**{attr: SearchableFieldValue.from_text(text)})
        else:
            attr = AMENDMENT_SEARCH_FIELDS[key.base_field]
            self.chain.update_field(key.group_id, attr, SearchableFieldValue.from_text(text))
        return self.combobox.search(key, text, self.pools.for_field(key.base_field))

    def type_amendment_search(self, record_id: str, base_field: str, text: str) -> ComboboxState:
        return self.type_in_search(FieldKey(base_field, record_id), text)

    def handle_key(self, key: FieldKey, key_name: str) -> bool:
        return self.combobox.handle_key(key, key_name)

    def focus(self, key: FieldKey) -> None:
        self.combobox.focus(key)

    def click_outside(self) -> None:
        self.combobox.close_all()

    def _committer(self, base_field: str) -> Callable[[str], None]:
        attr = SEARCH_FIELDS[base_field]

        def commit(value: str) -> None:
            self._set(**{attr: SearchableFieldValue.from_text(value)})
            if base_field == "destinatario":
                self._set(
                    addressing=addressing_for(
                        self._form.document_type, value, self.pools.providers
                    )
                )

        return commit

    def _amendment_committer(self, record_id: str, attr: str) -> Callable[[str], None]:
        def commit(value: str) -> None:
            self.chain.update_field(record_id, attr, SearchableFieldValue.from_text(value))

        return commit

    def _register_amendment(self, record_id: str) -> None:
        for base_field, attr in AMENDMENT_SEARCH_FIELDS.items():
            self.combobox.register(
                FieldKey(base_field, record_id),
                self._amendment_committer(record_id, attr),
            )

    # ------------------------------------------------------------------
    # Retificações
    # ------------------------------------------------------------------

    def set_base_amended(self, flag: bool) -> None:
        """Checkbox "Retificada" da decisão judicial."""
        self._set(amended=flag)
        self.chain.set_base_amended(flag)

    def set_further_amended(self, record_id: str, flag: bool) -> None:
        self.chain.set_further_amended(record_id, flag)

    def update_amendment(
        self,
        record_id: str,
        field: str,
        value: SearchableFieldValue | str | None,
    ) -> RetificationRecord:
        if field in AMENDMENT_SEARCH_FIELDS.values():
            value = _as_searchable(value)
        return self.chain.update_field(record_id, field, value)

    # ------------------------------------------------------------------
    # Pesquisas
    # ------------------------------------------------------------------

    def add_research_row(self) -> None:
        self._set(research=research.add_row(self._form.research))

    def remove_research_row(self) -> bool:
        """Remove a última linha; a única linha restante nunca é removida."""
        try:
            rows = research.remove_last_row(self._form.research)
        except research.LastRowError as exc:
            self.notifications.notify(str(exc), Severity.ERROR)
            return False
        self._set(research=rows)
        return True

    def update_research_row(self, index: int, field: str, value: str) -> None:
        self._set(research=research.update_row(self._form.research, index, field, value))

    def toggle_research_complement(self, index: int) -> None:
        self._set(research=research.toggle_complement(self._form.research, index))

    def paste_research_values(self, index: int, text: str) -> int:
        rows, count = research.distribute_paste(self._form.research, index, text)
        if count:
            self._set(research=rows)
            self.notifications.notify(
                f"{count} itens foram distribuídos com sucesso!", Severity.SUCCESS
            )
        return count

    # ------------------------------------------------------------------
    # Carregamento / envio
    # ------------------------------------------------------------------

    def load(self, snapshot: DocumentForm | Mapping[str, Any], document_id: Any = None) -> None:
        """
        Carrega um documento existente (modo edição). A recomputação das
        seções não limpa nada durante o carregamento.
        """
        form = snapshot if isinstance(snapshot, DocumentForm) else normalize_snapshot(snapshot)
        self.combobox.close_all()
        self._form = form.with_changes(amendments=())
        self.chain.replace_all(form.amendments)
        self.document_id = document_id
        self._recompute(loading=True)
        logger.info(
            "Documento carregado (id=%s, %d retificações)", document_id, len(self.chain)
        )

    def validate(self) -> ValidationResult:
        return self.validator.validate(self.form, self.resolver.current, self._today())

    def submit(self, repository: DocumentRepository) -> SubmitResult:
        """
        Valida e grava. Uma falha gera uma única notificação (e um pedido
        de foco, quando há dica); o estado do formulário não é alterado.
        """
        result = self.validate()
        if not result.ok:
            error = result.error
            self.notifications.notify(error.message, error.severity)
            if error.focus_hint is not None:
                self.intents.schedule(FocusIntent(error.focus_hint))
            logger.debug("Envio abortado: %s (%s)", error.code, error.field)
            return SubmitResult(result)

        payload = form_to_payload(self.form)
        try:
            if self.is_edit_mode:
                repository.update(self.document_id, payload)
                message = "Documento atualizado com sucesso!"
            else:
                self.document_id = repository.create(payload)
                message = "Documento criado com sucesso!"
        except RepositoryError:
            logger.exception("Falha ao gravar o documento")
            self.notifications.notify(SAVE_ERROR_MESSAGE, Severity.ERROR)
            return SubmitResult(result)

        self.notifications.notify(message, Severity.SUCCESS)
        logger.info("Documento %s gravado", self.document_id)
        return SubmitResult(result, self.document_id, saved=True)

    def flush_intents(self, sink: InteractionSink) -> Intent | None:
        return self.intents.flush(sink)
