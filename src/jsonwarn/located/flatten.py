from __future__ import annotations

from collections.abc import Callable, Iterable

from .models import AtIndex, Here, InField, Located, Path, PathSegment


def in_field[T](key: str, items: Iterable[Located[T]]) -> tuple[Located[T], ...]:
    children = tuple(items)
    if not children:
        return ()
    return (InField(key=key, children=children),)


def at_index[T](index: int, items: Iterable[Located[T]]) -> tuple[Located[T], ...]:
    children = tuple(items)
    if not children:
        return ()
    return (AtIndex(index=index, children=children),)


def map_located[T, U](fn: Callable[[T], U], item: Located[T]) -> Located[U]:
    if isinstance(item, Here):
        return Here(payload=fn(item.payload))
    if isinstance(item, InField):
        return InField(key=item.key, children=tuple(map_located(fn, c) for c in item.children))
    return AtIndex(index=item.index, children=tuple(map_located(fn, c) for c in item.children))


def _segment_sort_key(segment: PathSegment) -> tuple[int, int, str]:
    if isinstance(segment, int):
        return (0, segment, "")
    return (1, 0, segment)


def path_sort_key(path: Path) -> tuple[tuple[int, int, str], ...]:
    return tuple(_segment_sort_key(segment) for segment in path)


def render_path(path: Path) -> str:
    return "".join(f"/{segment}" for segment in path)


def flatten_located[T](items: Iterable[Located[T]]) -> list[tuple[Path, list[T]]]:
    """Group payloads by structural path.

    Paths are ordered with ``path_sort_key``; payloads sharing a path keep the
    order in which they were produced.
    """
    grouped: dict[Path, list[T]] = {}
    for item in items:
        _gather(item, (), grouped)
    return sorted(grouped.items(), key=lambda group: path_sort_key(group[0]))


def _gather[T](item: Located[T], prefix: Path, grouped: dict[Path, list[T]]) -> None:
    if isinstance(item, Here):
        grouped.setdefault(prefix, []).append(item.payload)
        return
    segment: PathSegment = item.key if isinstance(item, InField) else item.index
    for child in item.children:
        _gather(child, (*prefix, segment), grouped)
