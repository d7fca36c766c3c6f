from .adapters import (
    adapt_error,
    adapt_errors,
    adapt_invalid_input,
    adapt_outcome,
    adapt_warning,
    adapt_warnings,
    build_diagnostic,
)
from .catalog import CANONICAL_DIAGNOSTIC_CATALOG, REQUIRED_CATALOG_FIELDS, DecodeDiagnosticCode
from .models import DecodeDiagnostic, DiagnosticStage, Severity
from .sort import canonical_witness_json, diagnostic_sort_key, sort_diagnostics

__all__ = [
    "CANONICAL_DIAGNOSTIC_CATALOG",
    "DecodeDiagnostic",
    "DecodeDiagnosticCode",
    "DiagnosticStage",
    "REQUIRED_CATALOG_FIELDS",
    "Severity",
    "adapt_error",
    "adapt_errors",
    "adapt_invalid_input",
    "adapt_outcome",
    "adapt_warning",
    "adapt_warnings",
    "build_diagnostic",
    "canonical_witness_json",
    "diagnostic_sort_key",
    "sort_diagnostics",
]
