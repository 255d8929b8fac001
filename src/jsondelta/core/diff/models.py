from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Literal

from jsondelta.constants import CHANGE_ADDED, CHANGE_CHANGED, CHANGE_KINDS, CHANGE_REMOVED
from jsondelta.core.path import JsonPath

ChangeKind = Literal["added", "removed", "changed"]
ChangeStatus = Literal["added", "removed", "changed", "unchanged"]


@dataclass(slots=True, frozen=True)
class Change:
    path: JsonPath
    kind: ChangeKind
    before: Any = None
    after: Any = None

    @classmethod
    def added(cls, path: JsonPath, value: Any) -> Change:
        return cls(path=path, kind=CHANGE_ADDED, after=value)

    @classmethod
    def removed(cls, path: JsonPath, value: Any) -> Change:
        return cls(path=path, kind=CHANGE_REMOVED, before=value)

    @classmethod
    def changed(cls, path: JsonPath, before: Any, after: Any) -> Change:
        return cls(path=path, kind=CHANGE_CHANGED, before=before, after=after)

    @property
    def has_before(self) -> bool:
        return self.kind != CHANGE_ADDED

    @property
    def has_after(self) -> bool:
        return self.kind != CHANGE_REMOVED

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"path": self.path.canonical(), "kind": self.kind}
        if self.has_before:
            payload["from"] = self.before
        if self.has_after:
            payload["to"] = self.after
        return payload


def summarize(changes: list[Change]) -> dict[str, Any]:
    counts = Counter(change.kind for change in changes)
    return {
        "identical": not changes,
        "change_count": len(changes),
        "kinds": {kind: counts.get(kind, 0) for kind in CHANGE_KINDS},
        "first_change": changes[0].path.canonical() if changes else None,
    }


@dataclass(slots=True)
class DiffResult:
    summary: dict[str, Any]
    changes: list[Change]

    @classmethod
    def from_changes(cls, changes: list[Change]) -> DiffResult:
        return cls(summary=summarize(changes), changes=list(changes))

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "changes": [change.to_dict() for change in self.changes],
        }


__all__ = ["Change", "ChangeKind", "ChangeStatus", "DiffResult", "summarize"]
