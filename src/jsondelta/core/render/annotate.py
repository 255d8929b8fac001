from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from jsondelta.core.index import ChangeIndex
from jsondelta.core.path import ROOT, JsonPath
from jsondelta.core.render.nodes import ContainerNode, EntryNode, LeafNode, Node
from jsondelta.core.values import JsonShape, json_shape


def render(value: Any, index: ChangeIndex, path: JsonPath = ROOT) -> Node:
    """Build an annotated node tree for ``value``.

    Every node carries the status the index reports for its own path. Object
    entries come out in sorted key order, array entries in positional order.
    """
    shape = json_shape(value)
    status = index.lookup(path)

    if shape == "object":
        entries = []
        for key in sorted(value.keys()):
            key_path = path.child(key)
            child = render(value[key], index, key_path)
            entries.append(EntryNode(label=key, status=index.lookup(key_path), value=child))
        return ContainerNode(shape=shape, status=status, entries=tuple(entries))

    if shape == "array":
        entries = []
        for idx, item in enumerate(value):
            idx_path = path.child(idx)
            child = render(item, index, idx_path)
            entries.append(EntryNode(label=None, status=index.lookup(idx_path), value=child))
        return ContainerNode(shape=shape, status=status, entries=tuple(entries))

    return LeafNode(shape=shape, text=_scalar_text(shape, value), status=status)


def _scalar_text(shape: JsonShape, value: Any) -> str:
    if shape == "string":
        return value
    # null, bool and number use their JSON spelling
    return json.dumps(value)


def walk_paths(value: Any, path: JsonPath = ROOT) -> Iterator[tuple[JsonPath, JsonShape]]:
    """Yield each path ``render`` visits, in the same order."""
    shape = json_shape(value)
    yield path, shape
    if shape == "object":
        for key in sorted(value.keys()):
            yield from walk_paths(value[key], path.child(key))
    elif shape == "array":
        for idx, item in enumerate(value):
            yield from walk_paths(item, path.child(idx))


__all__ = ["render", "walk_paths"]
