"""
form_engine — sessão do formulário de documento.

Interface pública:
    DocumentFormSession, SubmitResult          — orquestração dos eventos da UI
    CandidatePools, DocumentRepository         — colaboradores externos
    NotificationCenter, NotificationSink       — mensagens ao usuário
    addressing_for, format_media_size, ...     — regras auxiliares
"""

from .addressing import FIXED_CIRCULAR_ADDRESSING, addressing_for, providers_from_records
from .collaborators import CandidatePools, DocumentRepository, RepositoryError
from .formatters import format_media_size
from .notifications import (
    DEFAULT_DURATION,
    Notification,
    NotificationCenter,
    NotificationSink,
)
from .research import LastRowError, distribute_paste, split_pasted
from .session import (
    AMENDMENT_SEARCH_FIELDS,
    SEARCH_FIELDS,
    DocumentFormSession,
    SubmitResult,
)

__all__ = [
    "FIXED_CIRCULAR_ADDRESSING",
    "addressing_for",
    "providers_from_records",
    "CandidatePools",
    "DocumentRepository",
    "RepositoryError",
    "format_media_size",
    "DEFAULT_DURATION",
    "Notification",
    "NotificationCenter",
    "NotificationSink",
    "LastRowError",
    "distribute_paste",
    "split_pasted",
    "AMENDMENT_SEARCH_FIELDS",
    "SEARCH_FIELDS",
    "DocumentFormSession",
    "SubmitResult",
]
