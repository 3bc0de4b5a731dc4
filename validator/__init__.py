"""
validator — validação do formulário de documento antes do envio.

Interface pública:
    FormValidator, validate                  — validação em duas etapas
    ValidationResult, ValidationError, ErrorCode — resultado
    normalize_snapshot, form_to_payload      — conversão de/para o registro Documento
    SnapshotError                            — snapshot fora do formato

Típico uso:
    from validator import FormValidator, normalize_snapshot

    form   = normalize_snapshot(json.loads(Path("documento.json").read_text()))
    result = FormValidator().validate(form, table.rule_for(form.document_type, form.subject), date.today())
    if not result.ok:
        print(result.error.code, result.message)
"""

from .types import ErrorCode, ValidationError, ValidationResult
from .normalizer import SNAPSHOT_SCHEMA, SnapshotError, form_to_payload, normalize_snapshot
from .form_validator import FormValidator, validate

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValidationResult",
    "SNAPSHOT_SCHEMA",
    "SnapshotError",
    "form_to_payload",
    "normalize_snapshot",
    "FormValidator",
    "validate",
]
