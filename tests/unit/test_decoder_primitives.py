from __future__ import annotations

import pytest

from jsonwarn.decoder import (
    CustomFailure,
    Decoded,
    Decoder,
    ExpectedKind,
    Rejected,
    TypeMismatch,
    UsageTracking,
    boolean,
    fail,
    integer,
    is_array,
    is_object,
    null,
    number,
    string,
    succeed,
    value,
)
from jsonwarn.located import Here
from jsonwarn.values import AnnotatedArray, AnnotatedObject, from_json, mark_used_deep

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("decoder", "payload", "expected"),
    [
        (string, "hi", "hi"),
        (boolean, False, False),
        (integer, 7, 7),
        (integer, 3.0, 3),
        (number, 2, 2.0),
        (number, 2.5, 2.5),
        (null("fallback"), None, "fallback"),
    ],
)
def test_scalar_primitives_decode_and_mark_node(
    decoder: Decoder[object], payload: object, expected: object
) -> None:
    result = decoder.run(from_json(payload))

    assert isinstance(result, Decoded)
    assert result.value == expected
    assert type(result.value) is type(expected)
    assert result.tree.used
    assert result.warnings == ()


@pytest.mark.parametrize(
    ("decoder", "payload", "kind"),
    [
        (string, 1, ExpectedKind.STRING),
        (boolean, "true", ExpectedKind.BOOLEAN),
        (integer, "1", ExpectedKind.INTEGER),
        (integer, True, ExpectedKind.INTEGER),
        (number, None, ExpectedKind.NUMBER),
        (null(0), 0, ExpectedKind.NULL),
        (is_object, [1], ExpectedKind.OBJECT),
        (is_array, {"a": 1}, ExpectedKind.ARRAY),
    ],
)
def test_type_mismatch_carries_original_value(
    decoder: Decoder[object], payload: object, kind: ExpectedKind
) -> None:
    tree = from_json(payload)
    result = decoder.run(tree)

    assert isinstance(result, Rejected)
    assert result.errors == (Here(payload=TypeMismatch(expected=kind, found=payload)),)
    assert result.tree == tree


def test_integer_rejects_fractional_numbers_instead_of_truncating() -> None:
    result = integer.run(from_json(1.5))
    assert isinstance(result, Rejected)
    assert result.errors == (
        Here(payload=TypeMismatch(expected=ExpectedKind.INTEGER, found=1.5)),
    )


def test_number_rejects_integers_beyond_float_range() -> None:
    huge = 10**400
    as_number = number.run(from_json(huge))
    as_integer = integer.run(from_json(huge))

    assert isinstance(as_number, Rejected)
    assert as_number.errors == (
        Here(payload=TypeMismatch(expected=ExpectedKind.NUMBER, found=huge)),
    )
    assert isinstance(as_integer, Decoded)
    assert as_integer.value == huge


def test_value_marks_whole_subtree_and_returns_json() -> None:
    document = {"a": [1, {"b": None}]}
    tree = from_json(document)
    result = value.run(tree)

    assert isinstance(result, Decoded)
    assert result.value == document
    assert result.tree == mark_used_deep(tree)


def test_shape_checks_mark_container_only() -> None:
    obj = is_object.run(from_json({"a": 1}))
    arr = is_array.run(from_json([1, 2]))

    assert isinstance(obj, Decoded)
    assert isinstance(obj.tree, AnnotatedObject)
    assert obj.tree.used
    assert not obj.tree.entries[0][1].used

    assert isinstance(arr, Decoded)
    assert isinstance(arr.tree, AnnotatedArray)
    assert arr.tree.used
    assert not any(item.used for item in arr.tree.items)


def test_succeed_leaves_tree_untouched() -> None:
    tree = from_json([1])
    result = succeed("x").run(tree)
    assert result == Decoded(tree=tree, value="x")


def test_fail_attaches_message_and_value() -> None:
    result = fail("nope").run(from_json({"a": 1}))
    assert isinstance(result, Rejected)
    assert result.errors == (Here(payload=CustomFailure(message="nope", value={"a": 1})),)


def test_failures_mark_offending_value_when_tracking_all_branches() -> None:
    tree = from_json({"a": [1]})
    result = string.run(tree, UsageTracking.ALL_BRANCHES)

    assert isinstance(result, Rejected)
    assert result.tree == mark_used_deep(tree)
