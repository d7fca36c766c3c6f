from __future__ import annotations

from enum import StrEnum
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class DiagnosticStage(StrEnum):
    INPUT = "input"
    DECODE = "decode"


def _normalize_json(value: object) -> object:
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, list | tuple):
        return [_normalize_json(item) for item in value]
    if isinstance(value, dict):
        raw_dict = cast(dict[object, object], value)
        string_keys: list[str] = []
        for key in raw_dict:
            if not isinstance(key, str):
                raise ValueError("witness object keys must be strings")
            string_keys.append(key)
        normalized: dict[str, object] = {}
        for key in sorted(string_keys):
            normalized[key] = _normalize_json(raw_dict[key])
        return normalized
    raise ValueError("witness must be JSON-serializable")


class DecodeDiagnostic(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(min_length=1)
    severity: Severity
    stage: DiagnosticStage
    message: str = Field(min_length=1)
    suggested_action: str = Field(min_length=1)

    path: tuple[str | int, ...] = ()

    witness: object | None = None

    @field_validator("path")
    @classmethod
    def _validate_path(cls, path: tuple[str | int, ...]) -> tuple[str | int, ...]:
        for segment in path:
            if isinstance(segment, int) and segment < 0:
                raise ValueError("path indices must be non-negative")
        return path

    @field_validator("witness", mode="before")
    @classmethod
    def _validate_and_normalize_witness(cls, witness: object) -> object:
        if witness is None:
            return None
        return _normalize_json(witness)
