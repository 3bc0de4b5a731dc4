"""
sections/loader.py — tabela de regras de seções e catálogo de documentos.

RuleTable indexa a configuração de seções por chave de classificação:
  _rules: "Tipo|Assunto" -> SectionRule

Formato JSON aceito (validado com jsonschema, Draft 2020-12):

    {
        "catalog": {"Ofício": ["Outros", ...], "Mídia": []},
        "sections": {
            "Ofício|Outros": {
                "section2": {"visible": true, "required": false},
                "section3": {"visible": false, "required": false},
                "section4": {"visible": true, "required": true}
            },
            "Mídia|SEM_ASSUNTO": {"section2": false, "section3": true, "section4": false}
        }
    }

A forma legada (booleanos) é expandida para required = visible.
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Mapping
from typing import Any

import jsonschema

from data_model import (
    SECTION_NAMES,
    ClassificationKey,
    SectionRule,
    SectionState,
    classification_key,
)

from .defaults import DEFAULT_CATALOG, DEFAULT_SECTIONS

logger = logging.getLogger(__name__)


class RuleTableError(ValueError):
    """Arquivo de regras inválido (JSON malformado ou fora do schema)."""


_STATE_SCHEMA: dict[str, Any] = {
    "oneOf": [
        {"type": "boolean"},
        {
            "type": "object",
            "properties": {
                "visible":  {"type": "boolean"},
                "required": {"type": "boolean"},
            },
            "required": ["visible", "required"],
            "additionalProperties": False,
        },
    ]
}

RULE_TABLE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "catalog": {
            "type": "object",
            "additionalProperties": {"type": "array", "items": {"type": "string"}},
        },
        "sections": {
            "type": "object",
            "propertyNames": {"pattern": r"^[^|]+\|[^|]+$"},
            "additionalProperties": {
                "type": "object",
                "properties": {name: _STATE_SCHEMA for name in SECTION_NAMES},
                "required": list(SECTION_NAMES),
                "additionalProperties": False,
            },
        },
    },
    "required": ["sections"],
}


# ---------------------------------------------------------------------------
# DocumentCatalog
# ---------------------------------------------------------------------------

class DocumentCatalog:
    """Catálogo fechado: tipo de documento → assuntos permitidos."""

    def __init__(self, subjects_by_type: Mapping[str, list[str]]) -> None:
        self._subjects: dict[str, tuple[str, ...]] = {
            document_type: tuple(subjects)
            for document_type, subjects in subjects_by_type.items()
        }

    @property
    def document_types(self) -> list[str]:
        return list(self._subjects)

    def subjects_for(self, document_type: str) -> list[str]:
        return list(self._subjects.get(document_type, ()))

    def types_for_subject(self, subject: str) -> list[str]:
        """Mapeamento reverso: tipos que aceitam o assunto."""
        return [t for t, subjects in self._subjects.items() if subject in subjects]

    def is_subject_allowed(self, document_type: str, subject: str) -> bool:
        return subject in self._subjects.get(document_type, ())

    def items(self):
        return self._subjects.items()

    @classmethod
    def default(cls) -> DocumentCatalog:
        return cls(DEFAULT_CATALOG)


# ---------------------------------------------------------------------------
# RuleTable
# ---------------------------------------------------------------------------

def _state_from_json(raw: bool | Mapping[str, bool]) -> SectionState:
    if isinstance(raw, bool):
        return SectionState(visible=raw, required=raw)
    return SectionState(visible=bool(raw["visible"]), required=bool(raw["required"]))


def _rule_from_json(raw: Mapping[str, Any]) -> SectionRule:
    return SectionRule(**{name: _state_from_json(raw[name]) for name in SECTION_NAMES})


def _rule_to_json(rule: SectionRule) -> dict[str, dict[str, bool]]:
    return {
        name: {"visible": rule.state(name).visible, "required": rule.state(name).required}
        for name in SECTION_NAMES
    }


class RuleTable:
    """
    Tabela estática de regras de seções.

    Atributos públicos:
      catalog — DocumentCatalog associado (padrão quando o arquivo não traz)
    """

    def __init__(
        self,
        rules: Mapping[ClassificationKey, SectionRule],
        catalog: DocumentCatalog | None = None,
    ) -> None:
        self._rules: dict[ClassificationKey, SectionRule] = dict(rules)
        self.catalog = catalog or DocumentCatalog.default()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, key: ClassificationKey | None) -> SectionRule | None:
        if key is None:
            return None
        return self._rules.get(key)

    def rule_for(self, document_type: str, subject: str) -> SectionRule:
        """Regra da classificação; todas ocultas quando desconhecida."""
        return self.lookup(classification_key(document_type, subject)) or SectionRule.hidden()

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def items(self):
        return self._rules.items()

    @property
    def keys(self) -> list[ClassificationKey]:
        return list(self._rules)

    def to_dict(self) -> dict[str, Any]:
        return {
            "catalog": {t: list(s) for t, s in self.catalog.items()},
            "sections": {key: _rule_to_json(rule) for key, rule in self._rules.items()},
        }

    # ------------------------------------------------------------------
    # Construtores
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> RuleTable:
        rules = {
            key: SectionRule(
                section2=SectionState(s2, s2),
                section3=SectionState(s3, s3),
                section4=SectionState(s4, s4),
            )
            for key, (s2, s3, s4) in DEFAULT_SECTIONS.items()
        }
        return cls(rules, DocumentCatalog.default())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RuleTable:
        """Valida contra RULE_TABLE_SCHEMA e monta a tabela."""
        validator = jsonschema.Draft202012Validator(RULE_TABLE_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
        if errors:
            first = errors[0]
            path = "/" + "/".join(str(p) for p in first.absolute_path)
            raise RuleTableError(f"Tabela de regras inválida em {path}: {first.message}")

        rules = {key: _rule_from_json(raw) for key, raw in data["sections"].items()}
        catalog = DocumentCatalog(data["catalog"]) if "catalog" in data else None
        logger.debug("Tabela de regras carregada: %d classificações", len(rules))
        return cls(rules, catalog)

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> RuleTable:
        try:
            data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RuleTableError(f"JSON inválido em {path}: {exc}") from exc
        return cls.from_dict(data)
