from __future__ import annotations

import sys

import pytest

from jsonwarn.decoder import (
    CustomFailure,
    CustomWarning,
    ExpectedKind,
    MissingField,
    TypeMismatch,
    UnusedField,
    UnusedIndex,
    UnusedValue,
    field,
    index,
    integer,
    is_array,
    is_object,
    list_of,
    number,
    string,
    succeed,
    value,
    warn,
)
from jsonwarn.located import AtIndex, Here, InField
from jsonwarn.outcome import (
    DecodeErrors,
    Err,
    InvalidInput,
    Ok,
    Success,
    SuccessWithWarnings,
    decode_string,
    decode_value,
    strict,
    to_classic,
)
from jsonwarn.values import InvalidInputCode

pytestmark = pytest.mark.unit


def test_fully_consumed_document_is_plain_success() -> None:
    assert decode_value(field("a", integer), {"a": 1}) == Success(value=1)


def test_unconsumed_root_produces_single_unused_value_warning() -> None:
    assert decode_value(succeed("x"), []) == SuccessWithWarnings(
        warnings=(Here(payload=UnusedValue(value=[])),),
        value="x",
    )


def test_unread_fields_and_indices_are_reported_at_their_paths() -> None:
    outcome = decode_value(field("a", index(0, integer)), {"a": [1, [2, 3]], "b": {"c": 1}})

    assert outcome == SuccessWithWarnings(
        warnings=(
            InField(
                key="a",
                children=(
                    AtIndex(index=1, children=(Here(payload=UnusedIndex(index=1, value=[2, 3])),)),
                ),
            ),
            InField(key="b", children=(Here(payload=UnusedField(key="b", value={"c": 1})),)),
        ),
        value=1,
    )


def test_shape_check_leaves_children_to_be_reported() -> None:
    outcome = decode_value(is_object, {"a": 1})
    assert isinstance(outcome, SuccessWithWarnings)
    assert outcome.warnings == (
        InField(key="a", children=(Here(payload=UnusedField(key="a", value=1)),)),
    )
    assert decode_value(is_array, []) == Success(value=None)


def test_value_suppresses_warnings_for_its_subtree() -> None:
    assert decode_value(value, {"a": [1, {"b": 2}]}) == Success(value={"a": [1, {"b": 2}]})


def test_custom_warnings_come_before_unused_warnings() -> None:
    outcome = decode_value(field("a", warn("old", integer)), {"a": 1, "b": 2})
    assert isinstance(outcome, SuccessWithWarnings)
    assert outcome.warnings == (
        InField(key="a", children=(Here(payload=CustomWarning(message="old", value=1)),)),
        InField(key="b", children=(Here(payload=UnusedField(key="b", value=2)),)),
    )


def test_decoder_failure_reports_errors() -> None:
    assert decode_value(field("a", integer), {}) == DecodeErrors(
        errors=(Here(payload=MissingField(name="a")),)
    )


def test_decode_string_separates_invalid_input_from_decode_errors() -> None:
    outcome = decode_string(string, "{")
    assert isinstance(outcome, InvalidInput)
    assert outcome.detail.code == InvalidInputCode.E_INPUT_SYNTAX_INVALID

    assert decode_string(string, "1") == DecodeErrors(
        errors=(Here(payload=TypeMismatch(expected=ExpectedKind.STRING, found=1)),)
    )


def test_decode_value_reports_unrepresentable_values_as_invalid_input() -> None:
    outcome = decode_value(value, {"callback": print})
    assert isinstance(outcome, InvalidInput)
    assert outcome.detail.code == InvalidInputCode.E_INPUT_VALUE_UNREPRESENTABLE


def test_decode_string_honours_max_depth() -> None:
    outcome = decode_string(list_of(list_of(integer)), "[[1]]", max_depth=1)
    assert isinstance(outcome, InvalidInput)
    assert outcome.detail.code == InvalidInputCode.E_INPUT_DEPTH_EXCEEDED


def test_strict_promotes_warnings_to_errors_at_the_same_path() -> None:
    outcome = strict(decode_value(field("a", integer), {"a": 1, "b": [2]}))
    assert outcome == DecodeErrors(
        errors=(
            InField(
                key="b",
                children=(Here(payload=CustomFailure(message='Unused field "b"', value=[2])),),
            ),
        )
    )


def test_strict_leaves_other_outcomes_alone() -> None:
    success = decode_value(integer, 1)
    failure = decode_value(integer, "x")
    invalid = decode_string(integer, "[")
    assert strict(success) == success
    assert strict(failure) == failure
    assert strict(invalid) == invalid


def test_to_classic_collapses_outcomes() -> None:
    assert to_classic(decode_value(integer, 1)) == Ok(value=1)
    assert to_classic(decode_value(succeed(2), [])) == Ok(value=2)
    assert to_classic(decode_string(integer, "{")) == Err(
        message="Invalid JSON input: invalid JSON text: Expecting property name enclosed in "
        "double quotes (line 1 column 2)"
    )
    assert to_classic(decode_value(field("a", integer), {})) == Err(
        message='Expected a field named "a" but it is missing'
    )


def test_huge_integers_are_decode_errors_for_number() -> None:
    outcome = decode_value(number, 10**400)

    assert outcome == DecodeErrors(
        errors=(Here(payload=TypeMismatch(expected=ExpectedKind.NUMBER, found=10**400)),)
    )


@pytest.mark.skipif(
    sys.get_int_max_str_digits() == 0,
    reason="integer string conversion limit disabled",
)
def test_overlong_integer_literal_is_invalid_input() -> None:
    outcome = decode_string(integer, "1" + "0" * 5000)

    assert isinstance(outcome, InvalidInput)
    assert outcome.detail.code == InvalidInputCode.E_INPUT_NUMBER_OUT_OF_RANGE
