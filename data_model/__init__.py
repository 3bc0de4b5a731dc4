"""
data_model — estruturas de dados do formulário de documentos.

Uso:
  from data_model import DocumentForm, RetificationRecord, SectionRule, ...

Módulos:
  common    — SearchableFieldValue, Severity, BrDate
  rules     — ClassificationKey, SectionState, SectionRule, classification_key
  documents — DocumentForm, RetificationRecord, ResearchRow
"""

from .common import (
    BrDate,
    FREE_TEXT_ID,
    SearchableFieldValue,
    Severity,
    is_filled,
)
from .rules import (
    ClassificationKey,
    MEDIA_DOCUMENT_TYPE,
    NO_SUBJECT,
    SECTION_NAMES,
    SectionRule,
    SectionState,
    classification_key,
    split_key,
)
from .documents import (
    CIRCULAR_DOCUMENT_TYPE,
    FORM_FIELDS,
    OTHER_SUBJECT,
    RETIFICATION_FIELDS,
    DocumentForm,
    ResearchRow,
    RetificationRecord,
)

__all__ = [
    # common
    "BrDate",
    "FREE_TEXT_ID",
    "SearchableFieldValue",
    "Severity",
    "is_filled",
    # rules
    "ClassificationKey",
    "MEDIA_DOCUMENT_TYPE",
    "NO_SUBJECT",
    "SECTION_NAMES",
    "SectionRule",
    "SectionState",
    "classification_key",
    "split_key",
    # documents
    "CIRCULAR_DOCUMENT_TYPE",
    "FORM_FIELDS",
    "OTHER_SUBJECT",
    "RETIFICATION_FIELDS",
    "DocumentForm",
    "ResearchRow",
    "RetificationRecord",
]
