from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial

from jsonwarn.located import Here
from jsonwarn.values import AnnotatedValue, to_json

from .engine import Decoded, Decoder, Rejected, Step, UsageTracking, sibling_input
from .payloads import AllAlternativesFailed, CustomWarning, EmptyAlternation, Errors
from .primitives import fail, null, succeed
from .structure import list_of


def one_of[A](decoders: Iterable[Decoder[A]]) -> Decoder[A]:
    """Try each decoder against the same node; the first success wins.

    Only the winning branch's rewrites reach the returned tree during ordinary
    decoding. When every branch is tracked, the tree of each failed attempt
    feeds the next one so the winner's tree also covers what the losers read.
    """
    alternatives = tuple(decoders)

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        if not alternatives:
            return Rejected(tree=node, errors=(Here(payload=EmptyAlternation()),))
        attempt_input = node
        failures: list[Errors] = []
        for alternative in alternatives:
            result = alternative.run(attempt_input, tracking)
            if isinstance(result, Decoded):
                return result
            failures.append(result.errors)
            if tracking is UsageTracking.ALL_BRANCHES:
                attempt_input = result.tree
        return Rejected(
            tree=attempt_input,
            errors=(Here(payload=AllAlternativesFailed(alternatives=tuple(failures))),),
        )

    return Decoder(step)


def maybe[A](inner: Decoder[A]) -> Decoder[A | None]:
    return one_of((inner, succeed(None)))


def nullable[A](inner: Decoder[A]) -> Decoder[A | None]:
    # null is tried first, otherwise inner would report a type mismatch for it.
    return one_of((null(None), inner))


def map_value[A, B](fn: Callable[[A], B], decoder: Decoder[A]) -> Decoder[B]:
    return decoder.map(fn)


def map2[A, B, C](
    fn: Callable[[A, B], C],
    first: Decoder[A],
    second: Decoder[B],
) -> Decoder[C]:
    """Run both decoders against one node; when both fail, both error sets survive."""

    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[C]:
        left = first.run(node, tracking)
        right = second.run(sibling_input(left, node, tracking), tracking)
        if isinstance(left, Decoded) and isinstance(right, Decoded):
            return Decoded(
                tree=right.tree,
                value=fn(left.value, right.value),
                warnings=left.warnings + right.warnings,
            )
        errors: Errors = ()
        if isinstance(left, Rejected):
            errors += left.errors
        if isinstance(right, Rejected):
            errors += right.errors
        return Rejected(tree=right.tree, errors=errors)

    return Decoder(step)


def map_n[R](fn: Callable[..., R], *decoders: Decoder[object]) -> Decoder[R]:
    """N-ary ``map2``: each decoder's value is applied to a growing ``partial`` of ``fn``."""
    applied: Decoder[Callable[..., R]] = succeed(partial(fn))
    for decoder in decoders:
        applied = map2(partial, applied, decoder)
    return applied.map(lambda call: call())


def and_map[A, B](decoder_fn: Decoder[Callable[[A], B]], decoder: Decoder[A]) -> Decoder[B]:
    return map2(lambda fn, arg: fn(arg), decoder_fn, decoder)


def and_then[A, B](fn: Callable[[A], Decoder[B]], decoder: Decoder[A]) -> Decoder[B]:
    return decoder.and_then(fn)


def combine[A](decoders: Iterable[Decoder[A]]) -> Decoder[list[A]]:
    return map_n(lambda *values: list(values), *decoders)


def lazy[A](thunk: Callable[[], Decoder[A]]) -> Decoder[A]:
    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        return thunk().run(node, tracking)

    return Decoder(step)


def check[A, B](probe: Decoder[A], expected: A, then: Decoder[B]) -> Decoder[B]:
    """Continue with ``then`` only when ``probe`` decodes to ``expected``."""

    def verify(actual: A) -> Decoder[B]:
        if actual == expected:
            return then
        return fail(f"Verification failed, expected {expected!r}")

    return probe.and_then(verify)


def warn[A](message: str, inner: Decoder[A]) -> Decoder[A]:
    def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[A]:
        result = inner.run(node, tracking)
        if isinstance(result, Rejected):
            return result
        warning = Here(payload=CustomWarning(message=message, value=to_json(node)))
        return Decoded(tree=result.tree, value=result.value, warnings=(*result.warnings, warning))

    return Decoder(step)


def one_or_more[A, R](fn: Callable[[A, list[A]], R], inner: Decoder[A]) -> Decoder[R]:
    def split(values: list[A]) -> Decoder[R]:
        if not values:
            return fail("Expected an array with at least one element")
        return succeed(fn(values[0], values[1:]))

    return list_of(inner).and_then(split)
