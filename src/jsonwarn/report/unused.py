from __future__ import annotations

from jsonwarn.decoder.payloads import (
    UnusedField,
    UnusedIndex,
    UnusedValue,
    WarningPayload,
    Warnings,
)
from jsonwarn.located import Here, Located, at_index, in_field
from jsonwarn.values import AnnotatedArray, AnnotatedObject, AnnotatedValue, to_json


def collect_unused_warnings(tree: AnnotatedValue) -> Warnings:
    """One warning per node still unused after decoding, tagged with its path.

    Scanning stops at an unused node; its warning stands for its whole subtree.
    """
    if not tree.used:
        return (Here(payload=UnusedValue(value=to_json(tree))),)
    return _child_warnings(tree)


def _child_warnings(node: AnnotatedValue) -> Warnings:
    warnings: list[Located[WarningPayload]] = []
    if isinstance(node, AnnotatedArray):
        for position, item in enumerate(node.items):
            if item.used:
                warnings.extend(at_index(position, _child_warnings(item)))
                continue
            unused = Here(payload=UnusedIndex(index=position, value=to_json(item)))
            warnings.extend(at_index(position, (unused,)))
    elif isinstance(node, AnnotatedObject):
        for key, item in node.entries:
            if item.used:
                warnings.extend(in_field(key, _child_warnings(item)))
                continue
            unused_field = Here(payload=UnusedField(key=key, value=to_json(item)))
            warnings.extend(in_field(key, (unused_field,)))
    return tuple(warnings)
