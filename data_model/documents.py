"""
data_model/documents.py — snapshot do formulário de documento.

DocumentForm reúne todos os campos editáveis do Documento; a cadeia de
retificações (RetificationRecord) e as linhas de pesquisa (ResearchRow)
fazem parte do snapshot. Todos os tipos são imutáveis: alterações geram
novas instâncias via dataclasses.replace().
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .common import BrDate, SearchableFieldValue

CIRCULAR_DOCUMENT_TYPE = "Ofício Circular"
OTHER_SUBJECT          = "Outros"


@dataclass(frozen=True, slots=True)
class RetificationRecord:
    """
    Uma decisão retificadora na cadeia.

    - id:              identificador único e estável
    - authority:       autoridade que assinou
    - court:           órgão judicial
    - signing_date:    data da assinatura (dd/mm/aaaa)
    - further_amended: esta decisão também foi retificada
    """
    id: str
    authority: SearchableFieldValue | None = None
    court: SearchableFieldValue | None = None
    signing_date: BrDate = ""
    further_amended: bool = False


RETIFICATION_FIELDS: frozenset[str] = frozenset(
    {"authority", "court", "signing_date", "further_amended"}
)


@dataclass(frozen=True, slots=True)
class ResearchRow:
    """Linha de pesquisa: tipo de identificador, identificador e complemento opcional."""
    kind: str = ""
    identifier: str = ""
    complement: str | None = None


@dataclass(frozen=True, slots=True)
class DocumentForm:
    """
    Snapshot completo do formulário.

    Seção 1 (básica): document_type … analyst
    Seção 2 (decisão judicial): authority, court, signing_date, amended, amendments
    Seção 3 (mídia): media_*
    Seção 4 (pesquisa): research
    """
    document_type: str = ""
    subject: str = ""
    subject_other: str = ""
    recipient: SearchableFieldValue | None = None
    recipients: tuple[str, ...] = ()
    addressing: SearchableFieldValue | None = None
    document_number: str = ""
    document_year: str = ""
    analyst: SearchableFieldValue | None = None

    authority: SearchableFieldValue | None = None
    court: SearchableFieldValue | None = None
    signing_date: BrDate = ""
    amended: bool = False
    amendments: tuple[RetificationRecord, ...] = ()

    media_type: str = ""
    media_size: str = ""
    media_hash: str = ""
    media_password: str = ""

    research: tuple[ResearchRow, ...] = field(default_factory=lambda: (ResearchRow(),))

    @property
    def is_circular(self) -> bool:
        return self.document_type == CIRCULAR_DOCUMENT_TYPE

    def with_changes(self, **changes: Any) -> DocumentForm:
        return dataclasses.replace(self, **changes)


FORM_FIELDS: frozenset[str] = frozenset(f.name for f in dataclasses.fields(DocumentForm))
