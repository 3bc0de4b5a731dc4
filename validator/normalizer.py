"""
validator/normalizer.py — conversão entre o registro Documento e o DocumentForm.

normalize_snapshot(data) -> DocumentForm
  - Valida o snapshot contra SNAPSHOT_SCHEMA (jsonschema).
  - Preenche valores padrão para campos ausentes.
  - Campos de busca aceitam texto ou {"id", "nome"}; texto vira valor livre
    (id = 0). Retificações gravadas com autoridade/órgão em texto puro são
    aceitas da mesma forma.
  - Pesquisas vazias viram uma linha em branco.

form_to_payload(form) -> dict
  - Forma de gravação entregue ao repositório (chaves do registro Documento).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

from data_model import DocumentForm, ResearchRow, RetificationRecord, SearchableFieldValue


class SnapshotError(ValueError):
    """Snapshot fora do formato esperado."""


_SEARCHABLE: dict[str, Any] = {
    "oneOf": [
        {"type": "null"},
        {"type": "string"},
        {
            "type": "object",
            "properties": {"id": {"type": "integer"}, "nome": {"type": "string"}},
            "required": ["nome"],
        },
    ]
}

_OPTION: dict[str, Any] = {
    "oneOf": [
        {"type": "string"},
        {
            "type": "object",
            "anyOf": [{"required": ["label"]}, {"required": ["nome"]}],
        },
    ]
}

SNAPSHOT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "tipoDocumento":   {"type": "string"},
        "assunto":         {"type": "string"},
        "assuntoOutros":   {"type": "string"},
        "destinatario":    _SEARCHABLE,
        "destinatarios":   {"type": "array", "items": _OPTION},
        "enderecamento":   _SEARCHABLE,
        "numeroDocumento": {"type": ["string", "integer"]},
        "anoDocumento":    {"type": ["string", "integer"]},
        "analista":        _SEARCHABLE,
        "autoridade":      _SEARCHABLE,
        "orgaoJudicial":   _SEARCHABLE,
        "dataAssinatura":  {"type": "string"},
        "retificada":      {"type": "boolean"},
        "tipoMidia":       {"type": "string"},
        "tamanhoMidia":    {"type": "string"},
        "hashMidia":       {"type": "string"},
        "senhaMidia":      {"type": "string"},
        "pesquisas": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "tipo":          {"type": "string"},
                    "identificador": {"type": "string"},
                    "complementar":  {"type": ["string", "null"]},
                },
            },
        },
        "retificacoes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id":             {"type": ["string", "integer"]},
                    "autoridade":     _SEARCHABLE,
                    "orgaoJudicial":  _SEARCHABLE,
                    "dataAssinatura": {"type": "string"},
                    "retificada":     {"type": "boolean"},
                },
            },
        },
    },
}


# ---------------------------------------------------------------------------
# Leitura
# ---------------------------------------------------------------------------

def _searchable(raw: Any) -> SearchableFieldValue | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return SearchableFieldValue.from_text(raw)
    name = str(raw.get("nome", ""))
    if not name.strip():
        return None
    return SearchableFieldValue(id=int(raw.get("id", 0)), display_name=name)


def _option(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    return str(raw.get("label") or raw.get("nome") or "")


def _research(raw: list[Mapping[str, Any]]) -> tuple[ResearchRow, ...]:
    rows = tuple(
        ResearchRow(
            kind=str(r.get("tipo", "")),
            identifier=str(r.get("identificador", "")),
            complement=r.get("complementar"),
        )
        for r in raw
    )
    return rows or (ResearchRow(),)


def _amendments(raw: list[Mapping[str, Any]]) -> tuple[RetificationRecord, ...]:
    return tuple(
        RetificationRecord(
            id=str(r.get("id") or f"ret-{i}"),
            authority=_searchable(r.get("autoridade")),
            court=_searchable(r.get("orgaoJudicial")),
            signing_date=str(r.get("dataAssinatura", "")),
            further_amended=bool(r.get("retificada", False)),
        )
        for i, r in enumerate(raw, start=1)
    )


def normalize_snapshot(data: Mapping[str, Any]) -> DocumentForm:
    validator = jsonschema.Draft202012Validator(SNAPSHOT_SCHEMA)
    error = best_match(validator.iter_errors(data))
    if error is not None:
        path = "/" + "/".join(str(p) for p in error.absolute_path)
        raise SnapshotError(f"Snapshot inválido em {path}: {error.message}")

    return DocumentForm(
        document_type=data.get("tipoDocumento", ""),
        subject=data.get("assunto", ""),
        subject_other=data.get("assuntoOutros", ""),
        recipient=_searchable(data.get("destinatario")),
        recipients=tuple(o for o in map(_option, data.get("destinatarios", [])) if o),
        addressing=_searchable(data.get("enderecamento")),
        document_number=str(data.get("numeroDocumento", "")),
        document_year=str(data.get("anoDocumento", "")),
        analyst=_searchable(data.get("analista")),
        authority=_searchable(data.get("autoridade")),
        court=_searchable(data.get("orgaoJudicial")),
        signing_date=data.get("dataAssinatura", ""),
        amended=data.get("retificada", False),
        amendments=_amendments(data.get("retificacoes", [])),
        media_type=data.get("tipoMidia", ""),
        media_size=data.get("tamanhoMidia", ""),
        media_hash=data.get("hashMidia", ""),
        media_password=data.get("senhaMidia", ""),
        research=_research(data.get("pesquisas", [])),
    )


# ---------------------------------------------------------------------------
# Gravação
# ---------------------------------------------------------------------------

def _name(value: SearchableFieldValue | None) -> str:
    return value.display_name if value is not None else ""


def form_to_payload(form: DocumentForm) -> dict[str, Any]:
    """Registro Documento pronto para create/update no repositório."""
    payload: dict[str, Any] = {
        "tipoDocumento": form.document_type,
        "assunto": form.subject,
        "assuntoOutros": form.subject_other,
        "destinatario": ", ".join(form.recipients) if form.is_circular else _name(form.recipient),
        "enderecamento": _name(form.addressing),
        "numeroDocumento": form.document_number,
        "anoDocumento": form.document_year,
        "analista": _name(form.analyst),
        "autoridade": _name(form.authority),
        "orgaoJudicial": _name(form.court),
        "dataAssinatura": form.signing_date,
        "retificada": form.amended,
        "retificacoes": [
            {
                "id": r.id,
                "autoridade": _name(r.authority),
                "orgaoJudicial": _name(r.court),
                "dataAssinatura": r.signing_date,
                "retificada": r.further_amended,
            }
            for r in form.amendments
        ],
        "tipoMidia": form.media_type,
        "tamanhoMidia": form.media_size,
        "hashMidia": form.media_hash,
        "senhaMidia": form.media_password,
        "pesquisas": [],
    }
    for row in form.research:
        item: dict[str, Any] = {"tipo": row.kind, "identificador": row.identifier}
        if row.complement is not None:
            item["complementar"] = row.complement
        payload["pesquisas"].append(item)
    return payload
