from __future__ import annotations

from dataclasses import dataclass

from jsonwarn.decoder.payloads import Errors, Warnings
from jsonwarn.values import InvalidInputDetail


@dataclass(frozen=True, slots=True)
class InvalidInput:
    detail: InvalidInputDetail


@dataclass(frozen=True, slots=True)
class DecodeErrors:
    errors: Errors

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("DecodeErrors requires at least one error")


@dataclass(frozen=True, slots=True)
class SuccessWithWarnings[A]:
    warnings: Warnings
    value: A

    def __post_init__(self) -> None:
        if not self.warnings:
            raise ValueError("SuccessWithWarnings requires at least one warning")


@dataclass(frozen=True, slots=True)
class Success[A]:
    value: A


type DecodeOutcome[A] = InvalidInput | DecodeErrors | SuccessWithWarnings[A] | Success[A]


@dataclass(frozen=True, slots=True)
class Ok[A]:
    value: A


@dataclass(frozen=True, slots=True)
class Err:
    message: str


type ClassicResult[A] = Ok[A] | Err
