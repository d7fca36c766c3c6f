from __future__ import annotations

from collections.abc import Sequence
from functools import reduce

from jsonwarn.located import Here, Located, at_index, in_field
from jsonwarn.values import (
    AnnotatedArray,
    AnnotatedNull,
    AnnotatedObject,
    AnnotatedValue,
    mark_used,
)

from .engine import Decoded, Decoder, Rejected, Step, UsageTracking, type_mismatch
from .payloads import ErrorPayload, ExpectedKind, MissingField, MissingIndex, WarningPayload


def field[A](name: str, inner: Decoder[A]) -> Decoder[A]:
    """Decode the value under ``name``; sibling entries pass through untouched."""

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        if not isinstance(node, AnnotatedObject):
            return type_mismatch(node, tracking, ExpectedKind.OBJECT)
        container = mark_used(node)
        child = container.get(name)
        if child is None:
            return Rejected(tree=container, errors=(Here(payload=MissingField(name=name)),))
        result = inner.run(child, tracking)
        rebuilt = container.with_entry(name, result.tree)
        if isinstance(result, Rejected):
            return Rejected(tree=rebuilt, errors=in_field(name, result.errors))
        return Decoded(tree=rebuilt, value=result.value, warnings=in_field(name, result.warnings))

    return Decoder(step)


def index[A](position: int, inner: Decoder[A]) -> Decoder[A]:
    """Decode the array element at ``position``; other elements pass through untouched."""

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        if not isinstance(node, AnnotatedArray):
            return type_mismatch(node, tracking, ExpectedKind.ARRAY)
        container = mark_used(node)
        if position < 0 or position >= len(container.items):
            return Rejected(tree=container, errors=(Here(payload=MissingIndex(index=position)),))
        result = inner.run(container.items[position], tracking)
        rebuilt = container.with_item(position, result.tree)
        if isinstance(result, Rejected):
            return Rejected(tree=rebuilt, errors=at_index(position, result.errors))
        return Decoded(
            tree=rebuilt,
            value=result.value,
            warnings=at_index(position, result.warnings),
        )

    return Decoder(step)


def at[A](path: Sequence[str], inner: Decoder[A]) -> Decoder[A]:
    return reduce(lambda acc, name: field(name, acc), reversed(tuple(path)), inner)


def list_of[A](inner: Decoder[A]) -> Decoder[list[A]]:
    """Decode every element; failures from all elements are reported together."""

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[list[A]]:
        if not isinstance(node, AnnotatedArray):
            return type_mismatch(node, tracking, ExpectedKind.ARRAY)
        items: list[AnnotatedValue] = []
        values: list[A] = []
        errors: list[Located[ErrorPayload]] = []
        warnings: list[Located[WarningPayload]] = []
        for position, item in enumerate(node.items):
            result = inner.run(item, tracking)
            items.append(result.tree)
            if isinstance(result, Rejected):
                errors.extend(at_index(position, result.errors))
                continue
            values.append(result.value)
            warnings.extend(at_index(position, result.warnings))
        rebuilt = AnnotatedArray(items=tuple(items), used=True)
        if errors:
            return Rejected(tree=rebuilt, errors=tuple(errors))
        return Decoded(tree=rebuilt, value=values, warnings=tuple(warnings))

    return Decoder(step)


def key_value_pairs[A](inner: Decoder[A]) -> Decoder[list[tuple[str, A]]]:
    """Decode every object value; failures from all keys are reported together."""

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[list[tuple[str, A]]]:
        if not isinstance(node, AnnotatedObject):
            return type_mismatch(node, tracking, ExpectedKind.OBJECT)
        entries: list[tuple[str, AnnotatedValue]] = []
        pairs: list[tuple[str, A]] = []
        errors: list[Located[ErrorPayload]] = []
        warnings: list[Located[WarningPayload]] = []
        for key, item in node.entries:
            result = inner.run(item, tracking)
            entries.append((key, result.tree))
            if isinstance(result, Rejected):
                errors.extend(in_field(key, result.errors))
                continue
            pairs.append((key, result.value))
            warnings.extend(in_field(key, result.warnings))
        rebuilt = AnnotatedObject(entries=tuple(entries), used=True)
        if errors:
            return Rejected(tree=rebuilt, errors=tuple(errors))
        return Decoded(tree=rebuilt, value=pairs, warnings=tuple(warnings))

    return Decoder(step)


def dict_of[A](inner: Decoder[A]) -> Decoder[dict[str, A]]:
    return key_value_pairs(inner).map(dict)


def optional[A, D](name: str, inner: Decoder[A], default: D = None) -> Decoder[A | D]:
    """Decode ``name`` when present; a missing or null field yields ``default``.

    A present ``null`` short-circuits to ``default`` without running ``inner``,
    so ``optional(name, nullable(inner), default)`` never yields ``None`` for it.
    The container must still be an object. A present, non-null value that
    ``inner`` rejects is an error, not a fallback.
    """

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A | D]:
        if not isinstance(node, AnnotatedObject):
            return type_mismatch(node, tracking, ExpectedKind.OBJECT)
        child = node.get(name)
        if child is None:
            return Decoded(tree=mark_used(node), value=default)
        if isinstance(child, AnnotatedNull):
            return Decoded(tree=mark_used(node).with_entry(name, mark_used(child)), value=default)
        if tracking is UsageTracking.ALL_BRANCHES:
            # Non-null-ness picked this branch even when inner never reads the child.
            node = node.with_entry(name, mark_used(child))
        return field(name, inner).run(node, tracking)

    return Decoder(step)
