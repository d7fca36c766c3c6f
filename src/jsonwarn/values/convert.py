from __future__ import annotations

import json
from math import isfinite
from typing import Final

from .errors import InvalidInputCode, build_invalid_input_error
from .models import (
    AnnotatedArray,
    AnnotatedBool,
    AnnotatedNull,
    AnnotatedNumber,
    AnnotatedObject,
    AnnotatedString,
    AnnotatedValue,
)

DEFAULT_MAX_DEPTH: Final[int] = 128

type _Path = tuple[str | int, ...]


class _NonFiniteConstantError(ValueError):
    def __init__(self, constant: str) -> None:
        super().__init__(constant)
        self.constant = constant


def _reject_nonfinite_constant(constant: str) -> object:
    raise _NonFiniteConstantError(constant)


def parse_json_text(
    text: str | bytes,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> AnnotatedValue:
    """Tokenize ``text`` and build an all-unused annotated tree from it."""
    try:
        payload = json.loads(text, parse_constant=_reject_nonfinite_constant)
    except _NonFiniteConstantError as exc:
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_NUMBER_NONFINITE,
            f"'{exc.constant}' is not a valid JSON number",
        ) from exc
    except json.JSONDecodeError as exc:
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_SYNTAX_INVALID,
            f"invalid JSON text: {exc.msg} (line {exc.lineno} column {exc.colno})",
        ) from exc
    except UnicodeDecodeError as exc:
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_SYNTAX_INVALID,
            f"invalid JSON text encoding: {exc.reason}",
        ) from exc
    except ValueError as exc:
        # Integer literals past the interpreter's digit limit.
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_NUMBER_OUT_OF_RANGE,
            f"JSON number cannot be converted: {exc}",
        ) from exc
    except RecursionError as exc:
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_DEPTH_EXCEEDED,
            "JSON text is nested too deeply to parse",
        ) from exc
    return from_json(payload, max_depth=max_depth)


def from_json(value: object, *, max_depth: int = DEFAULT_MAX_DEPTH) -> AnnotatedValue:
    """Build an all-unused annotated tree from an already parsed JSON value."""
    if isinstance(max_depth, bool) or max_depth < 0:
        raise ValueError("max_depth must be a non-negative integer")
    try:
        return _annotate(value, path=(), depth=0, max_depth=max_depth)
    except RecursionError as exc:
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_DEPTH_EXCEEDED,
            "JSON value is nested too deeply to convert",
        ) from exc


def _annotate(value: object, *, path: _Path, depth: int, max_depth: int) -> AnnotatedValue:
    if depth > max_depth:
        raise build_invalid_input_error(
            InvalidInputCode.E_INPUT_DEPTH_EXCEEDED,
            f"JSON value is nested deeper than {max_depth} levels",
            witness=path,
        )
    if value is None:
        return AnnotatedNull()
    if isinstance(value, bool):
        return AnnotatedBool(value=bool(value))
    if isinstance(value, int):
        return AnnotatedNumber(value=int(value))
    if isinstance(value, float):
        if not isfinite(value):
            raise build_invalid_input_error(
                InvalidInputCode.E_INPUT_NUMBER_NONFINITE,
                f"{value!r} is not a valid JSON number",
                witness=path,
            )
        return AnnotatedNumber(value=float(value))
    if isinstance(value, str):
        return AnnotatedString(value=str(value))
    if isinstance(value, list | tuple):
        return AnnotatedArray(
            items=tuple(
                _annotate(item, path=(*path, position), depth=depth + 1, max_depth=max_depth)
                for position, item in enumerate(value)
            )
        )
    if isinstance(value, dict):
        entries: list[tuple[str, AnnotatedValue]] = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise build_invalid_input_error(
                    InvalidInputCode.E_INPUT_KEY_INVALID,
                    f"object key {key!r} is not a string",
                    witness=path,
                )
            entries.append(
                (str(key), _annotate(item, path=(*path, key), depth=depth + 1, max_depth=max_depth))
            )
        return AnnotatedObject(entries=tuple(entries))
    raise build_invalid_input_error(
        InvalidInputCode.E_INPUT_VALUE_UNREPRESENTABLE,
        f"{type(value).__name__} value is not representable as JSON",
        witness=path,
    )
