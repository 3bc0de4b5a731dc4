"""
sections — classificação do documento e visibilidade das seções.

Interface pública:
    RuleTable, DocumentCatalog, RuleTableError — configuração
    SectionResolver, Resolution, ClearRequest  — recomputação + limpeza
    check_consistency, ConsistencyReport       — auditoria da configuração

Típico uso:
    from sections import RuleTable, SectionResolver

    table    = RuleTable.from_file("regras-secoes.json")
    resolver = SectionResolver(table, on_clear=session.apply_clear)
    rule     = resolver.recompute("Ofício", "Encaminhamento de decisão judicial").rule
"""

from .loader import RULE_TABLE_SCHEMA, DocumentCatalog, RuleTable, RuleTableError
from .resolver import (
    SECTION_FIELDS,
    ClearRequest,
    Resolution,
    SectionResolver,
    clear_request_for,
)
from .consistency import ConsistencyReport, check_consistency

__all__ = [
    "RULE_TABLE_SCHEMA",
    "DocumentCatalog",
    "RuleTable",
    "RuleTableError",
    "SECTION_FIELDS",
    "ClearRequest",
    "Resolution",
    "SectionResolver",
    "clear_request_for",
    "ConsistencyReport",
    "check_consistency",
]
