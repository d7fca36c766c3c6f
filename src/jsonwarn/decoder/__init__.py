from .combinators import (
    and_map,
    and_then,
    check,
    combine,
    lazy,
    map2,
    map_n,
    map_value,
    maybe,
    nullable,
    one_of,
    one_or_more,
    warn,
)
from .engine import Decoded, Decoder, Rejected, Step, UsageTracking
from .payloads import (
    AllAlternativesFailed,
    CustomFailure,
    CustomWarning,
    EmptyAlternation,
    ErrorPayload,
    Errors,
    ExpectedKind,
    MissingField,
    MissingIndex,
    TypeMismatch,
    UnusedField,
    UnusedIndex,
    UnusedValue,
    WarningPayload,
    Warnings,
    warning_to_error,
)
from .primitives import (
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
from .structure import at, dict_of, field, index, key_value_pairs, list_of, optional

__all__ = [
    "AllAlternativesFailed",
    "CustomFailure",
    "CustomWarning",
    "Decoded",
    "Decoder",
    "EmptyAlternation",
    "ErrorPayload",
    "Errors",
    "ExpectedKind",
    "MissingField",
    "MissingIndex",
    "Rejected",
    "Step",
    "TypeMismatch",
    "UnusedField",
    "UnusedIndex",
    "UnusedValue",
    "UsageTracking",
    "WarningPayload",
    "Warnings",
    "and_map",
    "and_then",
    "at",
    "boolean",
    "check",
    "combine",
    "dict_of",
    "fail",
    "field",
    "index",
    "integer",
    "is_array",
    "is_object",
    "key_value_pairs",
    "lazy",
    "list_of",
    "map2",
    "map_n",
    "map_value",
    "maybe",
    "null",
    "nullable",
    "number",
    "one_of",
    "one_or_more",
    "optional",
    "string",
    "succeed",
    "value",
    "warn",
    "warning_to_error",
]
