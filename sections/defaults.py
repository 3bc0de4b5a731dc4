"""
sections/defaults.py — catálogo e tabela de seções padrão.

DEFAULT_CATALOG: tipo de documento → assuntos permitidos (Mídia não tem assunto).
DEFAULT_SECTIONS: chave de classificação → (seção 2, seção 3, seção 4) visíveis.
Na tabela padrão, obrigatoriedade = visibilidade.
"""

from __future__ import annotations

_REPORT_SUBJECTS: list[str] = [
    "Análise de evidências",
    "Análise de vulnerabilidade",
    "Compilação de evidências",
    "Compilação e análise de evidências",
    "Investigação Cibernética",
    "Levantamentos de dados cadastrais",
    "Preservação de dados",
    "Outros",
]

DEFAULT_CATALOG: dict[str, list[str]] = {
    "Autos Circunstanciados": ["Ações Virtuais Controladas", "Outros"],
    "Mídia": [],
    "Ofício": [
        "Comunicação de não cumprimento de decisão judicial",
        "Encaminhamento de autos circunstanciados",
        "Encaminhamento de decisão judicial",
        "Encaminhamento de mídia",
        "Encaminhamento de relatório de inteligência",
        "Encaminhamento de relatório técnico",
        "Encaminhamento de relatório técnico e mídia",
        "Requisição de dados cadastrais",
        "Requisição de dados cadastrais e preservação de dados",
        "Solicitação de dados cadastrais",
        "Outros",
    ],
    "Ofício Circular": [
        "Encaminhamento de decisão judicial",
        "Requisição de dados cadastrais",
        "Requisição de dados cadastrais e preservação de dados",
        "Solicitação de dados cadastrais",
        "Outros",
    ],
    "Relatório de Inteligência": list(_REPORT_SUBJECTS),
    "Relatório Técnico": list(_REPORT_SUBJECTS),
}

# Combinações com alguma seção visível; as demais do catálogo ficam ocultas.
_VISIBLE: dict[str, tuple[bool, bool, bool]] = {
    "Ofício|Encaminhamento de decisão judicial":                           (True,  False, True),
    "Ofício|Requisição de dados cadastrais":                               (False, False, True),
    "Ofício|Requisição de dados cadastrais e preservação de dados":        (False, False, True),
    "Ofício|Solicitação de dados cadastrais":                              (False, False, True),
    "Ofício Circular|Encaminhamento de decisão judicial":                  (True,  False, True),
    "Ofício Circular|Requisição de dados cadastrais":                      (False, False, True),
    "Ofício Circular|Requisição de dados cadastrais e preservação de dados": (False, False, True),
    "Ofício Circular|Solicitação de dados cadastrais":                     (False, False, True),
    "Mídia|SEM_ASSUNTO":                                                   (False, True,  False),
}


def _build_default_sections() -> dict[str, tuple[bool, bool, bool]]:
    table: dict[str, tuple[bool, bool, bool]] = {}
    for document_type, subjects in DEFAULT_CATALOG.items():
        if not subjects:
            key = f"{document_type}|SEM_ASSUNTO"
            table[key] = _VISIBLE.get(key, (False, False, False))
            continue
        for subject in subjects:
            key = f"{document_type}|{subject}"
            table[key] = _VISIBLE.get(key, (False, False, False))
    return table


DEFAULT_SECTIONS: dict[str, tuple[bool, bool, bool]] = _build_default_sections()
