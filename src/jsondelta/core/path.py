from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from jsondelta.constants import PATH_SEPARATOR

Segment = str | int


@dataclass(slots=True, frozen=True)
class JsonPath:
    """Location inside a JSON document, one segment per object key or array index.

    The canonical string joins segments with ``.`` and renders indices as plain
    digits, so ``["items", 2]`` and ``["items", "2"]`` share the key ``items.2``.
    """

    parts: tuple[Segment, ...] = ()

    @classmethod
    def root(cls) -> JsonPath:
        return cls()

    @classmethod
    def of(cls, *segments: Segment) -> JsonPath:
        return cls(tuple(segments))

    def child(self, segment: Segment) -> JsonPath:
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise TypeError(f"Path segment must be str or int, got {type(segment).__name__}")
        if isinstance(segment, int) and segment < 0:
            raise ValueError(f"Array index must be non-negative: {segment}")
        return JsonPath((*self.parts, segment))

    def canonical(self) -> str:
        return PATH_SEPARATOR.join(str(segment) for segment in self.parts)

    @property
    def is_root(self) -> bool:
        return not self.parts

    def __str__(self) -> str:
        return self.canonical()

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.parts)


ROOT = JsonPath.root()


__all__ = ["ROOT", "JsonPath", "Segment"]
