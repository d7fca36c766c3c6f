from __future__ import annotations

from jsonwarn.values import (
    AnnotatedArray,
    AnnotatedBool,
    AnnotatedNull,
    AnnotatedNumber,
    AnnotatedObject,
    AnnotatedString,
    AnnotatedValue,
    JsonValue,
    mark_used,
    mark_used_deep,
    to_json,
)

from .engine import Decoded, Decoder, Step, UsageTracking, reject_here, type_mismatch
from .payloads import CustomFailure, ExpectedKind


def _string_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[str]:
    if isinstance(node, AnnotatedString):
        return Decoded(tree=mark_used(node), value=node.value)
    return type_mismatch(node, tracking, ExpectedKind.STRING)


def _boolean_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[bool]:
    if isinstance(node, AnnotatedBool):
        return Decoded(tree=mark_used(node), value=node.value)
    return type_mismatch(node, tracking, ExpectedKind.BOOLEAN)


def _integer_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[int]:
    if isinstance(node, AnnotatedNumber):
        if isinstance(node.value, int):
            return Decoded(tree=mark_used(node), value=node.value)
        if node.value.is_integer():
            return Decoded(tree=mark_used(node), value=int(node.value))
    return type_mismatch(node, tracking, ExpectedKind.INTEGER)


def _number_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[float]:
    if isinstance(node, AnnotatedNumber):
        try:
            converted = float(node.value)
        except OverflowError:
            # Integers past float range are still readable with ``integer``.
            return type_mismatch(node, tracking, ExpectedKind.NUMBER)
        return Decoded(tree=mark_used(node), value=converted)
    return type_mismatch(node, tracking, ExpectedKind.NUMBER)


def _value_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[JsonValue]:
    del tracking
    return Decoded(tree=mark_used_deep(node), value=to_json(node))


def _is_object_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[None]:
    if isinstance(node, AnnotatedObject):
        return Decoded(tree=mark_used(node), value=None)
    return type_mismatch(node, tracking, ExpectedKind.OBJECT)


def _is_array_step(node: AnnotatedValue, tracking: UsageTracking) -> Step[None]:
    if isinstance(node, AnnotatedArray):
        return Decoded(tree=mark_used(node), value=None)
    return type_mismatch(node, tracking, ExpectedKind.ARRAY)


string: Decoder[str] = Decoder(_string_step)
boolean: Decoder[bool] = Decoder(_boolean_step)
integer: Decoder[int] = Decoder(_integer_step)
number: Decoder[float] = Decoder(_number_step)

# Extracts without decoding; the whole subtree counts as consumed.
value: Decoder[JsonValue] = Decoder(_value_step)

is_object: Decoder[None] = Decoder(_is_object_step)
is_array: Decoder[None] = Decoder(_is_array_step)


def null[A](replacement: A) -> Decoder[A]:
    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        if isinstance(node, AnnotatedNull):
            return Decoded(tree=mark_used(node), value=replacement)
        return type_mismatch(node, tracking, ExpectedKind.NULL)

    return Decoder(step)


def succeed[A](result: A) -> Decoder[A]:
    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        del tracking
        return Decoded(tree=node, value=result)

    return Decoder(step)


def fail[A](message: str) -> Decoder[A]:
    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        return reject_here(node, tracking, CustomFailure(message=message, value=to_json(node)))

    return Decoder(step)
