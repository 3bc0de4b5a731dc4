"""
form_engine/addressing.py — endereçamento derivado do destinatário.

  Ofício Circular            → sempre "Respectivos departamentos jurídicos"
  destinatário é um provedor → razão social do provedor
  demais destinatários       → endereçamento limpo (autoridades não têm)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from data_model import CIRCULAR_DOCUMENT_TYPE, SearchableFieldValue

FIXED_CIRCULAR_ADDRESSING = "Respectivos departamentos jurídicos"

# nome fantasia → razão social
ProviderDirectory: TypeAlias = Mapping[str, str]


def providers_from_records(records: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Monta o diretório a partir de registros {"nomeFantasia", "razaoSocial"}."""
    directory: dict[str, str] = {}
    for record in records:
        name = record.get("nomeFantasia")
        legal_name = record.get("razaoSocial")
        if name and legal_name:
            directory.setdefault(name, legal_name)
    return directory


def circular_addressing() -> SearchableFieldValue:
    return SearchableFieldValue.from_text(FIXED_CIRCULAR_ADDRESSING)


def addressing_for(
    document_type: str,
    recipient: str,
    providers: ProviderDirectory,
) -> SearchableFieldValue | None:
    if document_type == CIRCULAR_DOCUMENT_TYPE:
        return circular_addressing()
    legal_name = providers.get(recipient)
    if legal_name:
        return SearchableFieldValue.from_text(legal_name)
    return None
