"""Minimal reproduction of a document for a given decoder.

The decoder is re-run with every branch tracked, so nodes read by failed
``one_of`` attempts and by failing decoders survive alongside the nodes the
winning branch read. Everything else collapses to ``null`` while containers
that were consulted keep their key set and length.
"""

from __future__ import annotations

import json
import logging

from jsonwarn.decoder import Decoder, Rejected, UsageTracking
from jsonwarn.values import (
    DEFAULT_MAX_DEPTH,
    AnnotatedArray,
    AnnotatedObject,
    AnnotatedValue,
    JsonValue,
    from_json,
    parse_json_text,
    to_json,
)

logger = logging.getLogger(__name__)


def usage_tree(decoder: Decoder[object], tree: AnnotatedValue) -> AnnotatedValue:
    result = decoder.run(tree, UsageTracking.ALL_BRANCHES)
    logger.debug(
        "strip usage pass %s",
        "rejected" if isinstance(result, Rejected) else "decoded",
    )
    return result.tree


def minimize(node: AnnotatedValue) -> JsonValue:
    if not node.used:
        return None
    if isinstance(node, AnnotatedArray):
        return [minimize(item) for item in node.items]
    if isinstance(node, AnnotatedObject):
        return {key: minimize(item) for key, item in node.entries}
    return to_json(node)


def strip_tree(decoder: Decoder[object], tree: AnnotatedValue) -> JsonValue:
    return minimize(usage_tree(decoder, tree))


def strip_value(
    decoder: Decoder[object],
    payload: object,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> JsonValue:
    """Smallest JSON value that decodes like ``payload``.

    Raises ``InvalidInputError`` when ``payload`` is not representable as JSON.
    """
    return strip_tree(decoder, from_json(payload, max_depth=max_depth))


def strip_string(
    decoder: Decoder[object],
    text: str | bytes,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    indent: int | None = None,
) -> str:
    stripped = strip_tree(decoder, parse_json_text(text, max_depth=max_depth))
    if indent is None:
        return json.dumps(stripped, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(stripped, ensure_ascii=False, indent=indent)
