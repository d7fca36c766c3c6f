from __future__ import annotations

import pytest

from jsonwarn.located import (
    AtIndex,
    Here,
    InField,
    at_index,
    flatten_located,
    in_field,
    map_located,
    path_sort_key,
    render_path,
)

pytestmark = pytest.mark.unit


def test_nested_frames_reject_empty_children() -> None:
    with pytest.raises(ValueError):
        InField(key="a", children=())
    with pytest.raises(ValueError):
        AtIndex(index=0, children=())
    with pytest.raises(ValueError):
        AtIndex(index=-1, children=(Here(payload="x"),))


def test_frame_helpers_skip_empty_collections() -> None:
    assert in_field("a", ()) == ()
    assert at_index(3, []) == ()
    assert in_field("a", [Here(payload=1)]) == (InField(key="a", children=(Here(payload=1),)),)
    assert at_index(2, [Here(payload=1)]) == (AtIndex(index=2, children=(Here(payload=1),)),)


def test_flatten_groups_sibling_payloads_without_losing_any() -> None:
    items = (
        InField(key="a", children=(Here(payload="first"),)),
        Here(payload="root"),
        InField(key="a", children=(Here(payload="second"), AtIndex(index=0, children=(Here(payload="deep"),)))),
    )

    assert flatten_located(items) == [
        ((), ["root"]),
        (("a",), ["first", "second"]),
        (("a", 0), ["deep"]),
    ]


def test_flatten_orders_indices_numerically() -> None:
    items = (
        AtIndex(index=10, children=(Here(payload="ten"),)),
        AtIndex(index=2, children=(Here(payload="two"),)),
    )
    assert [path for path, _ in flatten_located(items)] == [(2,), (10,)]


def test_path_sort_key_places_indices_before_keys() -> None:
    assert path_sort_key((0,)) < path_sort_key(("a",))
    assert path_sort_key(("a",)) < path_sort_key(("a", 0))


def test_render_path() -> None:
    assert render_path(()) == ""
    assert render_path(("a", 0, "b")) == "/a/0/b"


def test_map_located_keeps_structure() -> None:
    item = InField(key="a", children=(AtIndex(index=1, children=(Here(payload=2),)),))
    assert map_located(lambda value: value * 10, item) == InField(
        key="a", children=(AtIndex(index=1, children=(Here(payload=20),)),)
    )
