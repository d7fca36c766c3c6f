from __future__ import annotations

from collections.abc import Iterable

from jsonwarn.decoder.payloads import (
    AllAlternativesFailed,
    CustomFailure,
    CustomWarning,
    EmptyAlternation,
    ErrorPayload,
    MissingField,
    MissingIndex,
    TypeMismatch,
    UnusedField,
    UnusedIndex,
    UnusedValue,
    WarningPayload,
)
from jsonwarn.located import Located, Path, flatten_located
from jsonwarn.outcome import DecodeErrors, DecodeOutcome, InvalidInput, SuccessWithWarnings
from jsonwarn.report import errors_to_string
from jsonwarn.values import InvalidInputDetail

from .catalog import CANONICAL_DIAGNOSTIC_CATALOG, DecodeDiagnosticCode
from .models import DecodeDiagnostic, DiagnosticStage, Severity
from .sort import sort_diagnostics


def build_diagnostic(  # noqa: PLR0913
    *,
    code: str,
    message: str,
    path: Path = (),
    witness: object | None = None,
    severity: Severity | None = None,
    stage: DiagnosticStage | None = None,
    suggested_action: str | None = None,
) -> DecodeDiagnostic:
    if not code:
        raise ValueError("diagnostic code must be non-empty")
    if not message:
        raise ValueError("diagnostic message must be non-empty")

    catalog_entry = CANONICAL_DIAGNOSTIC_CATALOG.get(code)
    resolved_severity = (
        severity
        if severity is not None
        else _require_catalog_field(
            code=code,
            field_name="severity",
            value=(None if catalog_entry is None else catalog_entry.severity),
        )
    )
    resolved_stage = (
        stage
        if stage is not None
        else _require_catalog_field(
            code=code,
            field_name="stage",
            value=(None if catalog_entry is None else catalog_entry.stage),
        )
    )
    resolved_action = (
        suggested_action
        if suggested_action is not None
        else _require_catalog_field(
            code=code,
            field_name="suggested_action",
            value=(None if catalog_entry is None else catalog_entry.suggested_action),
        )
    )
    if not resolved_action:
        raise ValueError("diagnostic suggested_action must be non-empty")

    return DecodeDiagnostic(
        code=str(code),
        severity=resolved_severity,
        stage=resolved_stage,
        message=message,
        suggested_action=resolved_action,
        path=path,
        witness=witness,
    )


def adapt_error(payload: ErrorPayload, *, path: Path = ()) -> DecodeDiagnostic:
    if isinstance(payload, TypeMismatch):
        return build_diagnostic(
            code=DecodeDiagnosticCode.E_DECODE_TYPE_MISMATCH,
            message=f"expected {payload.expected}",
            path=path,
            witness={"expected": str(payload.expected), "found": payload.found},
        )
    if isinstance(payload, MissingField):
        return build_diagnostic(
            code=DecodeDiagnosticCode.E_DECODE_FIELD_MISSING,
            message=f"missing field '{payload.name}'",
            path=path,
            witness={"field": payload.name},
        )
    if isinstance(payload, MissingIndex):
        return build_diagnostic(
            code=DecodeDiagnosticCode.E_DECODE_INDEX_MISSING,
            message=f"missing index {payload.index}",
            path=path,
            witness={"index": payload.index},
        )
    if isinstance(payload, EmptyAlternation):
        return build_diagnostic(
            code=DecodeDiagnosticCode.E_DECODE_ONE_OF_EMPTY,
            message="one_of was given no alternatives",
            path=path,
        )
    if isinstance(payload, AllAlternativesFailed):
        return build_diagnostic(
            code=DecodeDiagnosticCode.E_DECODE_ONE_OF_FAILED,
            message=f"all {len(payload.alternatives)} alternative(s) failed",
            path=path,
            witness={
                "alternatives": [errors_to_string(errors) for errors in payload.alternatives],
            },
        )
    if isinstance(payload, CustomFailure):
        return build_diagnostic(
            code=DecodeDiagnosticCode.E_DECODE_CUSTOM,
            message=payload.message,
            path=path,
            witness={"value": payload.value},
        )
    raise TypeError(f"unsupported error payload: {type(payload).__name__}")


def adapt_warning(payload: WarningPayload, *, path: Path = ()) -> DecodeDiagnostic:
    if isinstance(payload, UnusedValue):
        return build_diagnostic(
            code=DecodeDiagnosticCode.W_DECODE_UNUSED_VALUE,
            message="unused value",
            path=path,
            witness={"value": payload.value},
        )
    if isinstance(payload, UnusedField):
        return build_diagnostic(
            code=DecodeDiagnosticCode.W_DECODE_UNUSED_FIELD,
            message=f"unused field '{payload.key}'",
            path=path,
            witness={"field": payload.key, "value": payload.value},
        )
    if isinstance(payload, UnusedIndex):
        return build_diagnostic(
            code=DecodeDiagnosticCode.W_DECODE_UNUSED_INDEX,
            message=f"unused index {payload.index}",
            path=path,
            witness={"index": payload.index, "value": payload.value},
        )
    if isinstance(payload, CustomWarning):
        return build_diagnostic(
            code=DecodeDiagnosticCode.W_DECODE_CUSTOM,
            message=payload.message,
            path=path,
            witness={"value": payload.value},
        )
    raise TypeError(f"unsupported warning payload: {type(payload).__name__}")


def adapt_errors(errors: Iterable[Located[ErrorPayload]]) -> tuple[DecodeDiagnostic, ...]:
    mapped = [
        adapt_error(payload, path=path)
        for path, payloads in flatten_located(errors)
        for payload in payloads
    ]
    return tuple(sort_diagnostics(mapped))


def adapt_warnings(warnings: Iterable[Located[WarningPayload]]) -> tuple[DecodeDiagnostic, ...]:
    mapped = [
        adapt_warning(payload, path=path)
        for path, payloads in flatten_located(warnings)
        for payload in payloads
    ]
    return tuple(sort_diagnostics(mapped))


def adapt_invalid_input(detail: InvalidInputDetail) -> DecodeDiagnostic:
    return build_diagnostic(
        code=detail.code,
        message=detail.message,
        path=() if detail.witness is None else detail.witness,
    )


def adapt_outcome[A](outcome: DecodeOutcome[A]) -> tuple[DecodeDiagnostic, ...]:
    if isinstance(outcome, InvalidInput):
        return (adapt_invalid_input(outcome.detail),)
    if isinstance(outcome, DecodeErrors):
        return adapt_errors(outcome.errors)
    if isinstance(outcome, SuccessWithWarnings):
        return adapt_warnings(outcome.warnings)
    return ()


def _require_catalog_field[T](*, code: str, field_name: str, value: T | None) -> T:
    if value is None:
        raise ValueError(
            f"diagnostic code '{code}' is not in canonical catalog; explicit {field_name} is required"
        )
    return value
