from __future__ import annotations

from typing import Any

from jsondelta.core.diff.models import Change
from jsondelta.core.path import ROOT, JsonPath
from jsondelta.core.values import json_shape


def structural_diff(a: Any, b: Any, path: JsonPath = ROOT) -> list[Change]:
    """Compare two JSON values and list every difference, depth first.

    Object keys are visited in sorted order and arrays are compared by
    position. A shape mismatch or a differing scalar yields one ``changed``
    record for the whole subtree.
    """
    changes: list[Change] = []
    _walk(a, b, path, changes)
    return changes


def _walk(a: Any, b: Any, path: JsonPath, changes: list[Change]) -> None:
    shape_a = json_shape(a)
    shape_b = json_shape(b)

    if shape_a != shape_b:
        changes.append(Change.changed(path, a, b))
        return

    if shape_a == "object":
        for key in sorted(set(a.keys()) | set(b.keys())):
            key_path = path.child(key)
            if key not in a:
                changes.append(Change.added(key_path, b[key]))
            elif key not in b:
                changes.append(Change.removed(key_path, a[key]))
            else:
                _walk(a[key], b[key], key_path, changes)
        return

    if shape_a == "array":
        shared = min(len(a), len(b))
        for idx in range(shared):
            _walk(a[idx], b[idx], path.child(idx), changes)
        for idx in range(shared, len(b)):
            changes.append(Change.added(path.child(idx), b[idx]))
        for idx in range(shared, len(a)):
            changes.append(Change.removed(path.child(idx), a[idx]))
        return

    if a != b:
        changes.append(Change.changed(path, a, b))


diff = structural_diff


__all__ = ["diff", "structural_diff"]
