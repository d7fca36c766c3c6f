"""Human-readable rendering of located errors and warnings.

Rendering is purely presentational: groups are ordered by path and payloads
sharing a path keep their production order.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Final

from jsonwarn.decoder.payloads import (
    AllAlternativesFailed,
    CustomFailure,
    CustomWarning,
    EmptyAlternation,
    ErrorPayload,
    ExpectedKind,
    MissingField,
    MissingIndex,
    TypeMismatch,
    UnusedField,
    UnusedIndex,
    UnusedValue,
    WarningPayload,
)
from jsonwarn.located import Located, flatten_located, render_path
from jsonwarn.values import JsonValue

_PAYLOAD_INDENT: Final[str] = "  "
_VALUE_INDENT: Final[str] = "    "
_EXPECTED_PHRASES: Final[dict[ExpectedKind, str]] = {
    ExpectedKind.STRING: "a string",
    ExpectedKind.BOOLEAN: "a boolean",
    ExpectedKind.INTEGER: "an integer",
    ExpectedKind.NUMBER: "a number",
    ExpectedKind.NULL: "null",
    ExpectedKind.OBJECT: "an object",
    ExpectedKind.ARRAY: "an array",
}


def _indent(text: str, prefix: str) -> str:
    return "\n".join(f"{prefix}{line}" if line else line for line in text.split("\n"))


def pretty_json(value: JsonValue) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _with_value(headline: str, value: JsonValue) -> str:
    return f"{headline}\n{_indent(pretty_json(value), _VALUE_INDENT)}"


def error_to_string(payload: ErrorPayload) -> str:
    if isinstance(payload, TypeMismatch):
        phrase = _EXPECTED_PHRASES[payload.expected]
        return _with_value(f"Expected {phrase} but found this value:", payload.found)
    if isinstance(payload, MissingField):
        return f'Expected a field named "{payload.name}" but it is missing'
    if isinstance(payload, MissingIndex):
        return f"Expected an element at index {payload.index} but the array is too short"
    if isinstance(payload, EmptyAlternation):
        return "Tried to decode with one_of, but no alternatives were given"
    if isinstance(payload, AllAlternativesFailed):
        return _alternatives_to_string(payload)
    if isinstance(payload, CustomFailure):
        return _with_value(payload.message, payload.value)
    raise TypeError(f"unsupported error payload: {type(payload).__name__}")


def _alternatives_to_string(payload: AllAlternativesFailed) -> str:
    count = len(payload.alternatives)
    noun = "alternative" if count == 1 else "alternatives"
    blocks = [f"All {count} {noun} failed:"]
    for number, errors in enumerate(payload.alternatives, start=1):
        marker = f"{_PAYLOAD_INDENT}({number}) "
        first, _, rest = errors_to_string(errors).partition("\n")
        block = f"{marker}{first}"
        if rest:
            block = f"{block}\n{_indent(rest, ' ' * len(marker))}"
        blocks.append(block)
    return "\n\n".join(blocks)


def warning_to_string(payload: WarningPayload) -> str:
    if isinstance(payload, UnusedValue):
        return _with_value("Unused value:", payload.value)
    if isinstance(payload, UnusedField):
        return _with_value(f'Unused field "{payload.key}" with value:', payload.value)
    if isinstance(payload, UnusedIndex):
        return _with_value(f"Unused element at index {payload.index}:", payload.value)
    if isinstance(payload, CustomWarning):
        return _with_value(payload.message, payload.value)
    raise TypeError(f"unsupported warning payload: {type(payload).__name__}")


def located_to_string[T](items: Iterable[Located[T]], render: Callable[[T], str]) -> str:
    groups: list[str] = []
    for path, payloads in flatten_located(items):
        rendered = [render(payload) for payload in payloads]
        if not path:
            groups.append("\n\n".join(rendered))
            continue
        body = "\n\n".join(_indent(text, _PAYLOAD_INDENT) for text in rendered)
        groups.append(f"At path {render_path(path)}\n{body}")
    return "\n\n".join(groups)


def errors_to_string(errors: Iterable[Located[ErrorPayload]]) -> str:
    return located_to_string(errors, error_to_string)


def warnings_to_string(warnings: Iterable[Located[WarningPayload]]) -> str:
    return located_to_string(warnings, warning_to_string)
