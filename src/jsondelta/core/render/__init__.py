from __future__ import annotations

from jsondelta.core.render.annotate import render, walk_paths
from jsondelta.core.render.nodes import ContainerNode, EntryNode, LeafNode, Node

__all__ = ["ContainerNode", "EntryNode", "LeafNode", "Node", "render", "walk_paths"]
