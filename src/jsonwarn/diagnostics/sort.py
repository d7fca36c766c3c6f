from __future__ import annotations

import json
from collections.abc import Iterable

from jsonwarn.located import path_sort_key

from .models import DecodeDiagnostic, DiagnosticStage, Severity

_SEVERITY_RANK: dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
}

_STAGE_RANK: dict[DiagnosticStage, int] = {
    DiagnosticStage.INPUT: 0,
    DiagnosticStage.DECODE: 1,
}


def canonical_witness_json(witness: object | None) -> str:
    if witness is None:
        return ""
    return json.dumps(witness, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def diagnostic_sort_key(
    diagnostic: DecodeDiagnostic,
) -> tuple[int, int, tuple[tuple[int, int, str], ...], str, str, str]:
    return (
        _SEVERITY_RANK[diagnostic.severity],
        _STAGE_RANK[diagnostic.stage],
        path_sort_key(diagnostic.path),
        diagnostic.code,
        diagnostic.message,
        canonical_witness_json(diagnostic.witness),
    )


def sort_diagnostics(diagnostics: Iterable[DecodeDiagnostic]) -> list[DecodeDiagnostic]:
    return sorted(diagnostics, key=diagnostic_sort_key)
