from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsondelta.core.diff.models import ChangeStatus
from jsondelta.core.values import JsonShape


@dataclass(slots=True, frozen=True)
class LeafNode:
    shape: JsonShape
    text: str
    status: ChangeStatus

    def to_dict(self) -> dict[str, Any]:
        return {"shape": self.shape, "text": self.text, "status": self.status}


@dataclass(slots=True, frozen=True)
class EntryNode:
    label: str | None
    status: ChangeStatus
    value: Node

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "status": self.status, "value": self.value.to_dict()}


@dataclass(slots=True, frozen=True)
class ContainerNode:
    shape: JsonShape
    status: ChangeStatus
    entries: tuple[EntryNode, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape,
            "status": self.status,
            "entries": [entry.to_dict() for entry in self.entries],
        }


Node = LeafNode | ContainerNode


__all__ = ["ContainerNode", "EntryNode", "LeafNode", "Node"]
