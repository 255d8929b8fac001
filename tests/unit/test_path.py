from __future__ import annotations

import pytest

from jsondelta.core.path import ROOT, JsonPath


def test_root_path_renders_empty_string() -> None:
    assert ROOT.canonical() == ""
    assert ROOT.is_root
    assert len(ROOT) == 0


def test_child_appends_segments_without_mutating_parent() -> None:
    parent = JsonPath.of("items")
    child = parent.child(2).child("name")

    assert parent.parts == ("items",)
    assert child.parts == ("items", 2, "name")
    assert str(child) == "items.2.name"


def test_index_and_numeric_key_share_canonical_form() -> None:
    by_index = ROOT.child("a").child(2)
    by_key = ROOT.child("a").child("2")

    assert by_index != by_key
    assert by_index.canonical() == by_key.canonical() == "a.2"


def test_paths_are_hashable_and_compare_structurally() -> None:
    assert {JsonPath.of("a", 0), JsonPath.of("a", 0)} == {JsonPath.of("a", 0)}
    assert list(JsonPath.of("x", 1)) == ["x", 1]


@pytest.mark.parametrize("segment", [-1, True, 1.5, None])
def test_child_rejects_invalid_segments(segment: object) -> None:
    with pytest.raises((TypeError, ValueError)):
        ROOT.child(segment)  # type: ignore[arg-type]
