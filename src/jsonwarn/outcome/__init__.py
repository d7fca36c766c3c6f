from .models import (
    ClassicResult,
    DecodeErrors,
    DecodeOutcome,
    Err,
    InvalidInput,
    Ok,
    Success,
    SuccessWithWarnings,
)
from .run import decode_string, decode_tree, decode_value, strict, to_classic

__all__ = [
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
