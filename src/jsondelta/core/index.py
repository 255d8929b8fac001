from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from jsondelta.constants import CHANGE_UNCHANGED
from jsondelta.core.diff.models import Change, ChangeKind, ChangeStatus
from jsondelta.core.path import JsonPath


class ChangeIndex:
    """Read-only mapping from canonical path string to change kind.

    Paths that never appear are reported as ``unchanged``.
    """

    __slots__ = ("_kinds",)

    def __init__(self, kinds: dict[str, ChangeKind] | None = None) -> None:
        self._kinds = MappingProxyType(dict(kinds or {}))

    @classmethod
    def from_changes(cls, changes: Iterable[Change]) -> ChangeIndex:
        kinds: dict[str, ChangeKind] = {}
        for change in changes:
            kinds.setdefault(change.path.canonical(), change.kind)
        return cls(kinds)

    def lookup(self, path: JsonPath | str) -> ChangeStatus:
        key = path if isinstance(path, str) else path.canonical()
        return self._kinds.get(key, CHANGE_UNCHANGED)

    def paths_with(self, kind: ChangeKind) -> list[str]:
        return sorted(key for key, value in self._kinds.items() if value == kind)

    def as_dict(self) -> dict[str, ChangeKind]:
        return dict(self._kinds)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, JsonPath):
            return path.canonical() in self._kinds
        return path in self._kinds

    def __iter__(self) -> Iterator[str]:
        return iter(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        return f"ChangeIndex({dict(self._kinds)!r})"


def build_index(changes: Iterable[Change]) -> ChangeIndex:
    return ChangeIndex.from_changes(changes)


def lookup(index: ChangeIndex, path: JsonPath | str) -> ChangeStatus:
    return index.lookup(path)


__all__ = ["ChangeIndex", "build_index", "lookup"]
