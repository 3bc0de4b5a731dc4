"""
sections/consistency.py — consistência entre catálogo e tabela de seções.

check_consistency(table) -> ConsistencyReport

  orphan_sections       entradas sem associação no catálogo, ou SEM_ASSUNTO
                        para um tipo que tem assuntos
  missing_sections      pares (tipo, assunto) do catálogo sem entrada
  missing_no_subject    tipos sem assuntos sem entrada "Tipo|SEM_ASSUNTO"
  unknown_subjects      assuntos fora do cadastro de assuntos (opcional)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from data_model import NO_SUBJECT, split_key

from .loader import RuleTable


@dataclass(slots=True)
class ConsistencyReport:
    orphan_sections: list[str] = field(default_factory=list)
    missing_sections: list[str] = field(default_factory=list)
    missing_no_subject: list[str] = field(default_factory=list)
    unknown_subjects: list[str] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not (
            self.orphan_sections
            or self.missing_sections
            or self.missing_no_subject
            or self.unknown_subjects
        )


def check_consistency(
    table: RuleTable,
    known_subjects: Iterable[str] | None = None,
) -> ConsistencyReport:
    report = ConsistencyReport()
    catalog = table.catalog

    for key in table.keys:
        document_type, subject = split_key(key)
        subjects = catalog.subjects_for(document_type)
        if key.endswith(f"|{NO_SUBJECT}"):
            if subjects:
                report.orphan_sections.append(key)
        elif subject not in subjects:
            report.orphan_sections.append(key)

    for document_type, subjects in catalog.items():
        if not subjects:
            key = f"{document_type}|{NO_SUBJECT}"
            if key not in table:
                report.missing_no_subject.append(key)
            continue
        for subject in subjects:
            key = f"{document_type}|{subject}"
            if key not in table:
                report.missing_sections.append(key)

    if known_subjects is not None:
        valid = set(known_subjects)
        for document_type, subjects in catalog.items():
            report.unknown_subjects.extend(
                f"{document_type} → {s}" for s in subjects if s not in valid
            )

    return report
