from __future__ import annotations

import logging

from jsonwarn.decoder import Decoder, Rejected, UsageTracking, warning_to_error
from jsonwarn.located import map_located
from jsonwarn.report import collect_unused_warnings, errors_to_string
from jsonwarn.values import (
    DEFAULT_MAX_DEPTH,
    AnnotatedValue,
    InvalidInputError,
    from_json,
    parse_json_text,
)

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

logger = logging.getLogger(__name__)


def decode_tree[A](decoder: Decoder[A], tree: AnnotatedValue) -> DecodeOutcome[A]:
    result = decoder.run(tree, UsageTracking.WINNING_BRANCH)
    if isinstance(result, Rejected):
        logger.debug("decode rejected with %d located error(s)", len(result.errors))
        return DecodeErrors(errors=result.errors)
    warnings = result.warnings + collect_unused_warnings(result.tree)
    if not warnings:
        logger.debug("decode succeeded without warnings")
        return Success(value=result.value)
    logger.debug("decode succeeded with %d located warning(s)", len(warnings))
    return SuccessWithWarnings(warnings=warnings, value=result.value)


def decode_value[A](
    decoder: Decoder[A],
    payload: object,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> DecodeOutcome[A]:
    """Decode an already parsed JSON value."""
    try:
        tree = from_json(payload, max_depth=max_depth)
    except InvalidInputError as exc:
        logger.debug("invalid input: %s", exc)
        return InvalidInput(detail=exc.detail)
    return decode_tree(decoder, tree)


def decode_string[A](
    decoder: Decoder[A],
    text: str | bytes,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> DecodeOutcome[A]:
    """Decode raw JSON text; malformed text is an ``InvalidInput`` outcome."""
    try:
        tree = parse_json_text(text, max_depth=max_depth)
    except InvalidInputError as exc:
        logger.debug("invalid input: %s", exc)
        return InvalidInput(detail=exc.detail)
    return decode_tree(decoder, tree)


def strict[A](outcome: DecodeOutcome[A]) -> DecodeOutcome[A]:
    """Promote warnings to errors at the same paths."""
    if isinstance(outcome, SuccessWithWarnings):
        return DecodeErrors(
            errors=tuple(map_located(warning_to_error, warning) for warning in outcome.warnings)
        )
    return outcome


def to_classic[A](outcome: DecodeOutcome[A]) -> ClassicResult[A]:
    """Collapse an outcome into a plain value-or-message result; warnings are dropped."""
    if isinstance(outcome, InvalidInput):
        return Err(message=f"Invalid JSON input: {outcome.detail.message}")
    if isinstance(outcome, DecodeErrors):
        return Err(message=errors_to_string(outcome.errors))
    return Ok(value=outcome.value)
