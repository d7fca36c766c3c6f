from .render import (
    error_to_string,
    errors_to_string,
    located_to_string,
    pretty_json,
    warning_to_string,
    warnings_to_string,
)
from .unused import collect_unused_warnings

__all__ = [
    "collect_unused_warnings",
    "error_to_string",
    "errors_to_string",
    "located_to_string",
    "pretty_json",
    "warning_to_string",
    "warnings_to_string",
]
