"""
sections/resolver.py — visibilidade das seções e limpeza de campos ocultos.

A cada recomputação (mudança de tipo de documento ou assunto), as seções
que ficam ocultas têm seus campos limpos:

  seção 2 → autoridade, órgão judicial, data da assinatura, "retificada"
            e toda a cadeia de retificações
  seção 3 → tipo, tamanho, hash e senha da mídia
  seção 4 → pesquisas voltam a exatamente uma linha em branco

No carregamento de um documento existente (loading=True) a limpeza é
suprimida para não destruir os dados carregados.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from data_model import ClassificationKey, ResearchRow, SectionRule, classification_key

from .loader import RuleTable

logger = logging.getLogger(__name__)

SECTION_FIELDS: dict[str, dict[str, Any]] = {
    "section2": {
        "authority": None,
        "court": None,
        "signing_date": "",
        "amended": False,
    },
    "section3": {
        "media_type": "",
        "media_size": "",
        "media_hash": "",
        "media_password": "",
    },
    "section4": {
        "research": (ResearchRow(),),
    },
}


@dataclass(frozen=True, slots=True)
class ClearRequest:
    """
    Pedido de limpeza ao dono do estado do formulário.

    - sections:      seções ocultas
    - fields:        campo → valor vazio
    - discard_chain: descartar a cadeia de retificações (seção 2 oculta)
    """
    sections: tuple[str, ...]
    fields: dict[str, Any] = field(default_factory=dict)
    discard_chain: bool = False


@dataclass(frozen=True, slots=True)
class Resolution:
    key: ClassificationKey | None
    rule: SectionRule
    cleared: ClearRequest | None = None


def clear_request_for(rule: SectionRule) -> ClearRequest:
    hidden = rule.hidden_sections
    fields: dict[str, Any] = {}
    for section in hidden:
        fields.update(SECTION_FIELDS[section])
    return ClearRequest(
        sections=tuple(hidden),
        fields=fields,
        discard_chain="section2" in hidden,
    )


class SectionResolver:
    """
    Resolve a SectionRule corrente e emite pedidos de limpeza.

    Uso:
        resolver = SectionResolver(RuleTable.default(), on_clear=apply_clear)
        resolution = resolver.recompute("Ofício", "Encaminhamento de decisão judicial")
        resolution.rule.section2.visible   # True
    """

    def __init__(
        self,
        table: RuleTable,
        on_clear: Callable[[ClearRequest], None] | None = None,
    ) -> None:
        self._table = table
        self._on_clear = on_clear
        self._current = SectionRule.hidden()

    @property
    def table(self) -> RuleTable:
        return self._table

    @property
    def current(self) -> SectionRule:
        return self._current

    def resolve(self, document_type: str, subject: str) -> SectionRule:
        return self._table.rule_for(document_type, subject)

    def recompute(
        self,
        document_type: str,
        subject: str,
        *,
        loading: bool = False,
    ) -> Resolution:
        key = classification_key(document_type, subject)
        rule = self._table.lookup(key) or SectionRule.hidden()
        self._current = rule
        logger.debug("Classificação %r → %s", key, rule)

        if loading:
            return Resolution(key, rule)

        request = clear_request_for(rule)
        if request.sections and self._on_clear is not None:
            self._on_clear(request)
        return Resolution(key, rule, request if request.sections else None)
