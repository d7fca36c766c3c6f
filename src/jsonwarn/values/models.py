from __future__ import annotations

from dataclasses import dataclass, replace

type JsonValue = None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]


@dataclass(frozen=True, slots=True)
class AnnotatedNull:
    used: bool = False


@dataclass(frozen=True, slots=True)
class AnnotatedBool:
    value: bool
    used: bool = False


@dataclass(frozen=True, slots=True)
class AnnotatedNumber:
    value: int | float
    used: bool = False


@dataclass(frozen=True, slots=True)
class AnnotatedString:
    value: str
    used: bool = False


@dataclass(frozen=True, slots=True)
class AnnotatedArray:
    items: tuple[AnnotatedValue, ...]
    used: bool = False

    def with_item(self, position: int, item: AnnotatedValue) -> AnnotatedArray:
        items = list(self.items)
        items[position] = item
        return AnnotatedArray(items=tuple(items), used=self.used)


@dataclass(frozen=True, slots=True)
class AnnotatedObject:
    entries: tuple[tuple[str, AnnotatedValue], ...]
    used: bool = False

    def get(self, key: str) -> AnnotatedValue | None:
        for entry_key, entry_value in self.entries:
            if entry_key == key:
                return entry_value
        return None

    def with_entry(self, key: str, item: AnnotatedValue) -> AnnotatedObject:
        entries = tuple(
            (entry_key, item if entry_key == key else entry_value)
            for entry_key, entry_value in self.entries
        )
        return AnnotatedObject(entries=entries, used=self.used)


type AnnotatedValue = (
    AnnotatedNull
    | AnnotatedBool
    | AnnotatedNumber
    | AnnotatedString
    | AnnotatedArray
    | AnnotatedObject
)


def mark_used[N: AnnotatedValue](node: N) -> N:
    """Flag ``node`` itself as consulted; children keep their own flags."""
    if node.used:
        return node
    return replace(node, used=True)


def mark_used_deep(node: AnnotatedValue) -> AnnotatedValue:
    """Flag ``node`` and every descendant as consulted."""
    if isinstance(node, AnnotatedArray):
        return AnnotatedArray(
            items=tuple(mark_used_deep(item) for item in node.items),
            used=True,
        )
    if isinstance(node, AnnotatedObject):
        return AnnotatedObject(
            entries=tuple((key, mark_used_deep(item)) for key, item in node.entries),
            used=True,
        )
    return mark_used(node)


def to_json(node: AnnotatedValue) -> JsonValue:
    """Plain JSON rendering of ``node``; usage flags are ignored."""
    if isinstance(node, AnnotatedNull):
        return None
    if isinstance(node, AnnotatedArray):
        return [to_json(item) for item in node.items]
    if isinstance(node, AnnotatedObject):
        return {key: to_json(item) for key, item in node.entries}
    return node.value
