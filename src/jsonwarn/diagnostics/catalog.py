from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from jsonwarn.values import InvalidInputCode

from .models import DiagnosticStage, Severity


class DecodeDiagnosticCode(StrEnum):
    E_DECODE_TYPE_MISMATCH = "E_DECODE_TYPE_MISMATCH"
    E_DECODE_FIELD_MISSING = "E_DECODE_FIELD_MISSING"
    E_DECODE_INDEX_MISSING = "E_DECODE_INDEX_MISSING"
    E_DECODE_ONE_OF_EMPTY = "E_DECODE_ONE_OF_EMPTY"
    E_DECODE_ONE_OF_FAILED = "E_DECODE_ONE_OF_FAILED"
    E_DECODE_CUSTOM = "E_DECODE_CUSTOM"
    W_DECODE_UNUSED_VALUE = "W_DECODE_UNUSED_VALUE"
    W_DECODE_UNUSED_FIELD = "W_DECODE_UNUSED_FIELD"
    W_DECODE_UNUSED_INDEX = "W_DECODE_UNUSED_INDEX"
    W_DECODE_CUSTOM = "W_DECODE_CUSTOM"


@dataclass(frozen=True, slots=True)
class DiagnosticCatalogEntry:
    code: str
    severity: Severity
    stage: DiagnosticStage
    suggested_action: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("diagnostic catalog code must be non-empty")
        if not self.suggested_action:
            raise ValueError(
                f"diagnostic catalog entry '{self.code}' suggested_action must be non-empty"
            )


def _entry(
    code: str,
    severity: Severity,
    stage: DiagnosticStage,
    suggested_action: str,
) -> DiagnosticCatalogEntry:
    return DiagnosticCatalogEntry(
        code=code,
        severity=severity,
        stage=stage,
        suggested_action=suggested_action,
    )


def _build_catalog(
    entries: tuple[DiagnosticCatalogEntry, ...],
) -> Mapping[str, DiagnosticCatalogEntry]:
    catalog: dict[str, DiagnosticCatalogEntry] = {}
    for entry in entries:
        if entry.code in catalog:
            raise ValueError(f"duplicate diagnostic catalog code: {entry.code}")
        catalog[entry.code] = entry
    return MappingProxyType(catalog)


_CATALOG_ENTRIES: tuple[DiagnosticCatalogEntry, ...] = (
    _entry(
        InvalidInputCode.E_INPUT_SYNTAX_INVALID,
        Severity.ERROR,
        DiagnosticStage.INPUT,
        "fix the JSON syntax of the document",
    ),
    _entry(
        InvalidInputCode.E_INPUT_VALUE_UNREPRESENTABLE,
        Severity.ERROR,
        DiagnosticStage.INPUT,
        "pass only null, booleans, numbers, strings, lists and dicts",
    ),
    _entry(
        InvalidInputCode.E_INPUT_NUMBER_NONFINITE,
        Severity.ERROR,
        DiagnosticStage.INPUT,
        "replace NaN and infinite numbers with finite values",
    ),
    _entry(
        InvalidInputCode.E_INPUT_NUMBER_OUT_OF_RANGE,
        Severity.ERROR,
        DiagnosticStage.INPUT,
        "shorten the number or send it as a string",
    ),
    _entry(
        InvalidInputCode.E_INPUT_KEY_INVALID,
        Severity.ERROR,
        DiagnosticStage.INPUT,
        "use string keys for every object",
    ),
    _entry(
        InvalidInputCode.E_INPUT_DEPTH_EXCEEDED,
        Severity.ERROR,
        DiagnosticStage.INPUT,
        "flatten the document or raise max_depth",
    ),
    _entry(
        DecodeDiagnosticCode.E_DECODE_TYPE_MISMATCH,
        Severity.ERROR,
        DiagnosticStage.DECODE,
        "change the value to the expected JSON type",
    ),
    _entry(
        DecodeDiagnosticCode.E_DECODE_FIELD_MISSING,
        Severity.ERROR,
        DiagnosticStage.DECODE,
        "add the missing field to the object",
    ),
    _entry(
        DecodeDiagnosticCode.E_DECODE_INDEX_MISSING,
        Severity.ERROR,
        DiagnosticStage.DECODE,
        "add elements so the array reaches the required index",
    ),
    _entry(
        DecodeDiagnosticCode.E_DECODE_ONE_OF_EMPTY,
        Severity.ERROR,
        DiagnosticStage.DECODE,
        "give one_of at least one alternative decoder",
    ),
    _entry(
        DecodeDiagnosticCode.E_DECODE_ONE_OF_FAILED,
        Severity.ERROR,
        DiagnosticStage.DECODE,
        "make the value match one of the accepted shapes",
    ),
    _entry(
        DecodeDiagnosticCode.E_DECODE_CUSTOM,
        Severity.ERROR,
        DiagnosticStage.DECODE,
        "adjust the value to satisfy the decoder check",
    ),
    _entry(
        DecodeDiagnosticCode.W_DECODE_UNUSED_VALUE,
        Severity.WARNING,
        DiagnosticStage.DECODE,
        "remove the value or decode it",
    ),
    _entry(
        DecodeDiagnosticCode.W_DECODE_UNUSED_FIELD,
        Severity.WARNING,
        DiagnosticStage.DECODE,
        "remove the field or decode it",
    ),
    _entry(
        DecodeDiagnosticCode.W_DECODE_UNUSED_INDEX,
        Severity.WARNING,
        DiagnosticStage.DECODE,
        "remove the element or decode it",
    ),
    _entry(
        DecodeDiagnosticCode.W_DECODE_CUSTOM,
        Severity.WARNING,
        DiagnosticStage.DECODE,
        "review the flagged value",
    ),
)

CANONICAL_DIAGNOSTIC_CATALOG: Mapping[str, DiagnosticCatalogEntry] = _build_catalog(
    _CATALOG_ENTRIES
)
REQUIRED_CATALOG_FIELDS: tuple[str, ...] = ("code", "severity", "stage", "suggested_action")
