from __future__ import annotations

from dataclasses import dataclass

type PathSegment = str | int
type Path = tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class Here[T]:
    payload: T


@dataclass(frozen=True, slots=True)
class InField[T]:
    key: str
    children: tuple[Located[T], ...]

    def __post_init__(self) -> None:
        if not self.children:
            raise ValueError(f"InField '{self.key}' requires at least one nested entry")


@dataclass(frozen=True, slots=True)
class AtIndex[T]:
    index: int
    children: tuple[Located[T], ...]

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or self.index < 0:
            raise ValueError("AtIndex index must be a non-negative integer")
        if not self.children:
            raise ValueError(f"AtIndex {self.index} requires at least one nested entry")


type Located[T] = Here[T] | InField[T] | AtIndex[T]
