from .convert import DEFAULT_MAX_DEPTH, from_json, parse_json_text
from .errors import InvalidInputCode, InvalidInputDetail, InvalidInputError
from .models import (
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

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "AnnotatedArray",
    "AnnotatedBool",
    "AnnotatedNull",
    "AnnotatedNumber",
    "AnnotatedObject",
    "AnnotatedString",
    "AnnotatedValue",
    "InvalidInputCode",
    "InvalidInputDetail",
    "InvalidInputError",
    "JsonValue",
    "from_json",
    "mark_used",
    "mark_used_deep",
    "parse_json_text",
    "to_json",
]
