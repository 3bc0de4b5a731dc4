"""
Regras de visibilidade das seções do formulário de documento.

  ClassificationKey — chave "TipoDocumento|Assunto" (ou "Mídia|SEM_ASSUNTO")
  SectionState      — {visible, required} de uma seção
  SectionRule       — estado das seções 2, 3 e 4 para uma classificação

Seções:
  section2 — Dados da Decisão Judicial (autoridade, órgão, data, retificações)
  section3 — Dados da Mídia
  section4 — Dados da Pesquisa
"""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Constantes
# ---------------------------------------------------------------------------

MEDIA_DOCUMENT_TYPE = "Mídia"
NO_SUBJECT          = "SEM_ASSUNTO"
KEY_SEPARATOR       = "|"

SECTION_NAMES: tuple[str, ...] = ("section2", "section3", "section4")

# Formato: "Ofício|Encaminhamento de decisão judicial"
ClassificationKey: TypeAlias = str


def classification_key(document_type: str, subject: str) -> ClassificationKey | None:
    """
    Deriva a chave de classificação.

    Mídia não tem assunto e usa a chave reservada "Mídia|SEM_ASSUNTO".
    Sem tipo ou sem assunto não há classificação (None).
    """
    if document_type == MEDIA_DOCUMENT_TYPE:
        return f"{MEDIA_DOCUMENT_TYPE}{KEY_SEPARATOR}{NO_SUBJECT}"
    if document_type and subject:
        return f"{document_type}{KEY_SEPARATOR}{subject}"
    return None


def split_key(key: ClassificationKey) -> tuple[str, str]:
    """Separa a chave em (tipo, assunto); assunto "" para SEM_ASSUNTO."""
    document_type, _, subject = key.partition(KEY_SEPARATOR)
    return document_type, "" if subject == NO_SUBJECT else subject


# ---------------------------------------------------------------------------
# SectionState / SectionRule
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SectionState:
    """Visibilidade e obrigatoriedade de uma seção (ambas sempre presentes)."""
    visible: bool = False
    required: bool = False


HIDDEN = SectionState(visible=False, required=False)


@dataclass(frozen=True, slots=True)
class SectionRule:
    """
    Configuração das seções para uma classificação.

    A tabela é configuração externa: `required` pode divergir de `visible`
    (ex.: assuntos "Outros" visíveis mas opcionais).
    """
    section2: SectionState = HIDDEN
    section3: SectionState = HIDDEN
    section4: SectionState = HIDDEN

    @classmethod
    def hidden(cls) -> SectionRule:
        """Todas as seções ocultas e não obrigatórias."""
        return cls()

    def state(self, section: str) -> SectionState:
        if section not in SECTION_NAMES:
            raise ValueError(f"Seção desconhecida: {section!r}")
        return getattr(self, section)

    def is_visible(self, section: str) -> bool:
        return self.state(section).visible

    def is_required(self, section: str) -> bool:
        return self.state(section).required

    @property
    def hidden_sections(self) -> list[str]:
        return [s for s in SECTION_NAMES if not self.state(s).visible]
