"""
search — busca por palavras e controlador de combobox.

Interface pública:
    normalize, matches, filter_items, filter_records — matcher
    ComboboxController                               — estado por campo
    FieldKey, ComboboxState, Direction               — tipos
    PendingIntent, InteractionSink                   — foco/rolagem adiados
"""

from .matcher import filter_items, filter_records, matches, normalize, record_label
from .types import (
    NO_HIGHLIGHT,
    ComboboxState,
    Direction,
    FieldKey,
    FocusIntent,
    Intent,
    ScrollIntent,
)
from .intents import InteractionSink, PendingIntent
from .combobox import ComboboxController

__all__ = [
    "normalize",
    "matches",
    "filter_items",
    "filter_records",
    "record_label",
    "NO_HIGHLIGHT",
    "ComboboxState",
    "Direction",
    "FieldKey",
    "FocusIntent",
    "Intent",
    "ScrollIntent",
    "InteractionSink",
    "PendingIntent",
    "ComboboxController",
]
