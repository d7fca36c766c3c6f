from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from jsonwarn.located import Located
from jsonwarn.values import JsonValue


class ExpectedKind(StrEnum):
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    expected: ExpectedKind
    found: JsonValue


@dataclass(frozen=True, slots=True)
class MissingField:
    name: str


@dataclass(frozen=True, slots=True)
class MissingIndex:
    index: int


@dataclass(frozen=True, slots=True)
class EmptyAlternation:
    pass


@dataclass(frozen=True, slots=True)
class AllAlternativesFailed:
    alternatives: tuple[Errors, ...]

    def __post_init__(self) -> None:
        if not self.alternatives:
            raise ValueError("AllAlternativesFailed requires at least one alternative")


@dataclass(frozen=True, slots=True)
class CustomFailure:
    message: str
    value: JsonValue


type ErrorPayload = (
    TypeMismatch
    | MissingField
    | MissingIndex
    | EmptyAlternation
    | AllAlternativesFailed
    | CustomFailure
)
type Errors = tuple[Located[ErrorPayload], ...]


@dataclass(frozen=True, slots=True)
class UnusedValue:
    value: JsonValue


@dataclass(frozen=True, slots=True)
class UnusedField:
    key: str
    value: JsonValue


@dataclass(frozen=True, slots=True)
class UnusedIndex:
    index: int
    value: JsonValue


@dataclass(frozen=True, slots=True)
class CustomWarning:
    message: str
    value: JsonValue


type WarningPayload = UnusedValue | UnusedField | UnusedIndex | CustomWarning
type Warnings = tuple[Located[WarningPayload], ...]


def warning_to_error(warning: WarningPayload) -> ErrorPayload:
    """Error counterpart of a warning, used when warnings are promoted."""
    if isinstance(warning, UnusedValue):
        return CustomFailure(message="Unused value", value=warning.value)
    if isinstance(warning, UnusedField):
        return CustomFailure(message=f'Unused field "{warning.key}"', value=warning.value)
    if isinstance(warning, UnusedIndex):
        return CustomFailure(message=f"Unused index {warning.index}", value=warning.value)
    return CustomFailure(message=warning.message, value=warning.value)
