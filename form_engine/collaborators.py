"""
form_engine/collaborators.py — dependências externas da sessão do formulário.

  CandidatePools     — listas de candidatos de cada campo de busca
  DocumentRepository — persistência do registro Documento (create/update)
  RepositoryError    — falha de gravação reportada pelo repositório
"""

from __future__ import annotations

import json
import pathlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from search import filter_records

from .addressing import providers_from_records

# Campo de busca → atributo de CandidatePools
POOL_BY_FIELD: dict[str, str] = {
    "destinatario":  "recipients",
    "enderecamento": "addressees",
    "analista":      "analysts",
    "autoridade":    "authorities",
    "orgaoJudicial": "courts",
}


@dataclass(slots=True)
class CandidatePools:
    """
    Dados de referência fornecidos pelo chamador.

    - providers: nome fantasia → razão social (autopreenchimento do endereçamento)
    """
    recipients: list[str] = field(default_factory=list)
    addressees: list[str] = field(default_factory=list)
    authorities: list[str] = field(default_factory=list)
    courts: list[str] = field(default_factory=list)
    analysts: list[str] = field(default_factory=list)
    media_types: list[str] = field(default_factory=list)
    identifier_types: list[str] = field(default_factory=list)
    providers: dict[str, str] = field(default_factory=dict)

    def for_field(self, base_field: str) -> list[str]:
        try:
            return getattr(self, POOL_BY_FIELD[base_field])
        except KeyError:
            raise KeyError(f"Campo sem lista de candidatos: {base_field!r}") from None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CandidatePools:
        """
        Aceita listas de nomes ou de registros estruturados; provedores
        ({"nomeFantasia", "razaoSocial"}) entram também nos destinatários
        e, pela razão social, nos endereçamentos.
        """
        def names(key: str) -> list[str]:
            items = data.get(key, [])
            plain = [i for i in items if isinstance(i, str)]
            records = [i for i in items if isinstance(i, Mapping)]
            return plain + [n for n in filter_records(records, "") if n not in plain]

        provider_records = [p for p in data.get("provedores", []) if isinstance(p, Mapping)]
        providers = providers_from_records(provider_records)

        recipients = names("destinatarios")
        recipients += [n for n in providers if n not in recipients]
        addressees = names("enderecamentos")
        addressees += [n for n in providers.values() if n not in addressees]

        return cls(
            recipients=recipients,
            addressees=addressees,
            authorities=names("autoridades"),
            courts=names("orgaosJudiciais"),
            analysts=names("analistas"),
            media_types=names("tiposMidia"),
            identifier_types=names("tiposIdentificador"),
            providers=providers,
        )

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> CandidatePools:
        return cls.from_dict(json.loads(pathlib.Path(path).read_text(encoding="utf-8")))


class RepositoryError(Exception):
    """Falha ao gravar o documento."""


class DocumentRepository(Protocol):
    def create(self, payload: dict[str, Any]) -> Any:
        """Grava um novo documento e devolve o seu id."""
        ...

    def update(self, document_id: Any, payload: dict[str, Any]) -> None: ...
