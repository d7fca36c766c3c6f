from __future__ import annotations

import pytest

import jsonwarn.decoder as decoder_api
import jsonwarn.outcome as outcome_api
import jsonwarn.report as report_api
import jsonwarn.strip as strip_api

pytestmark = pytest.mark.unit


def test_decoder_public_api_surface_is_explicit_and_stable() -> None:
    assert decoder_api.__all__ == sorted(
        decoder_api.__all__,
        key=lambda name: (name[0].islower(), name),
    )
    for name in (
        "string",
        "boolean",
        "integer",
        "number",
        "null",
        "value",
        "is_object",
        "is_array",
        "field",
        "index",
        "at",
        "list_of",
        "key_value_pairs",
        "dict_of",
        "one_of",
        "maybe",
        "nullable",
        "optional",
        "map_value",
        "map2",
        "map_n",
        "and_map",
        "and_then",
        "succeed",
        "fail",
        "warn",
        "check",
        "lazy",
        "combine",
        "one_or_more",
    ):
        assert name in decoder_api.__all__
    assert not hasattr(decoder_api, "error_site")
    assert not hasattr(decoder_api, "sibling_input")


def test_outcome_public_api_surface_is_explicit_and_stable() -> None:
    assert outcome_api.__all__ == [
        "ClassicResult",
        "DecodeErrors",
        "DecodeOutcome",
        "Err",
        "InvalidInput",
        "Ok",
        "Success",
        "SuccessWithWarnings",
        "decode_string",
        "decode_tree",
        "decode_value",
        "strict",
        "to_classic",
    ]


def test_report_and_strip_public_api_surfaces() -> None:
    assert report_api.__all__ == [
        "collect_unused_warnings",
        "error_to_string",
        "errors_to_string",
        "located_to_string",
        "pretty_json",
        "warning_to_string",
        "warnings_to_string",
    ]
    assert strip_api.__all__ == [
        "minimize",
        "strip_string",
        "strip_tree",
        "strip_value",
        "usage_tree",
    ]
