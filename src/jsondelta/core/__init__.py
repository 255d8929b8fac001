from __future__ import annotations

from jsondelta.core.diff import Change, ChangeKind, ChangeStatus, DiffResult, structural_diff
from jsondelta.core.index import ChangeIndex, build_index, lookup
from jsondelta.core.path import ROOT, JsonPath
from jsondelta.core.render import ContainerNode, EntryNode, LeafNode, Node, walk_paths
from jsondelta.core.values import JsonValue, json_depth, json_shape, sort_json

__all__ = [
    "ROOT",
    "Change",
    "ChangeIndex",
    "ChangeKind",
    "ChangeStatus",
    "ContainerNode",
    "DiffResult",
    "EntryNode",
    "JsonPath",
    "JsonValue",
    "LeafNode",
    "Node",
    "build_index",
    "json_depth",
    "json_shape",
    "lookup",
    "sort_json",
    "structural_diff",
    "walk_paths",
]
