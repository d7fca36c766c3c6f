"""Decoder contract shared by every primitive and combinator.

A decoder is a pure function from an annotated node to a step: either a
``Decoded`` value paired with the rewritten tree, or a ``Rejected`` error
collection. Rejected steps also carry a tree; it is only meaningful under
``UsageTracking.ALL_BRANCHES``, where it records everything the failing
decoder inspected so that minimisation can keep it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from jsonwarn.located import Here
from jsonwarn.values import AnnotatedValue, mark_used_deep, to_json

from .payloads import ErrorPayload, Errors, ExpectedKind, TypeMismatch, Warnings


class UsageTracking(StrEnum):
    WINNING_BRANCH = "winning_branch"
    ALL_BRANCHES = "all_branches"


@dataclass(frozen=True, slots=True)
class Decoded[A]:
    tree: AnnotatedValue
    value: A
    warnings: Warnings = ()


@dataclass(frozen=True, slots=True)
class Rejected:
    tree: AnnotatedValue
    errors: Errors

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("rejected step requires at least one error")


type Step[A] = Decoded[A] | Rejected
type StepFn[A] = Callable[[AnnotatedValue, UsageTracking], Step[A]]


@dataclass(frozen=True, slots=True)
class Decoder[A]:
    step: StepFn[A]

    def run(
        self,
        node: AnnotatedValue,
        tracking: UsageTracking = UsageTracking.WINNING_BRANCH,
    ) -> Step[A]:
        return self.step(node, tracking)

    def map[B](self, fn: Callable[[A], B]) -> Decoder[B]:
        def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[B]:
            result = self.run(node, tracking)
            if isinstance(result, Rejected):
                return result
            return Decoded(tree=result.tree, value=fn(result.value), warnings=result.warnings)

        return Decoder(step)

    def and_then[B](self, fn: Callable[[A], Decoder[B]]) -> Decoder[B]:
        def step(node: AnnotatedValue, tracking: UsageTracking) -> Step[B]:
            first = self.run(node, tracking)
            if isinstance(first, Rejected):
                return first
            second = fn(first.value).run(first.tree, tracking)
            if isinstance(second, Rejected):
                return second
            return Decoded(
                tree=second.tree,
                value=second.value,
                warnings=first.warnings + second.warnings,
            )

        return Decoder(step)


def error_site(node: AnnotatedValue, tracking: UsageTracking) -> AnnotatedValue:
    # The offending value is rendered into the error, so minimisation must keep all of it.
    if tracking is UsageTracking.ALL_BRANCHES:
        return mark_used_deep(node)
    return node


def reject_here(node: AnnotatedValue, tracking: UsageTracking, payload: ErrorPayload) -> Rejected:
    return Rejected(tree=error_site(node, tracking), errors=(Here(payload=payload),))


def type_mismatch(node: AnnotatedValue, tracking: UsageTracking, expected: ExpectedKind) -> Rejected:
    return reject_here(node, tracking, TypeMismatch(expected=expected, found=to_json(node)))


def sibling_input[A](
    previous: Step[A],
    node: AnnotatedValue,
    tracking: UsageTracking,
) -> AnnotatedValue:
    """Tree the next sibling decoder runs against.

    A failed sibling never leaks its rewrites into the next one during ordinary
    decoding; when every branch is tracked the tree is threaded regardless.
    """
    if isinstance(previous, Decoded) or tracking is UsageTracking.ALL_BRANCHES:
        return previous.tree
    return node
