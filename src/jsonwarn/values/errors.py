from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class InvalidInputCode(StrEnum):
    E_INPUT_SYNTAX_INVALID = "E_INPUT_SYNTAX_INVALID"
    E_INPUT_VALUE_UNREPRESENTABLE = "E_INPUT_VALUE_UNREPRESENTABLE"
    E_INPUT_NUMBER_NONFINITE = "E_INPUT_NUMBER_NONFINITE"
    E_INPUT_NUMBER_OUT_OF_RANGE = "E_INPUT_NUMBER_OUT_OF_RANGE"
    E_INPUT_KEY_INVALID = "E_INPUT_KEY_INVALID"
    E_INPUT_DEPTH_EXCEEDED = "E_INPUT_DEPTH_EXCEEDED"


@dataclass(frozen=True, slots=True)
class InvalidInputDetail:
    code: str
    message: str
    witness: tuple[str | int, ...] | None = None


class InvalidInputError(ValueError):
    def __init__(self, detail: InvalidInputDetail) -> None:
        super().__init__(f"{detail.code}: {detail.message}")
        self.detail = detail


def build_invalid_input_error(
    code: InvalidInputCode,
    message: str,
    witness: tuple[str | int, ...] | None = None,
) -> InvalidInputError:
    return InvalidInputError(
        InvalidInputDetail(
            code=code.value,
            message=message,
            witness=witness,
        )
    )
