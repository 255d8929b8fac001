from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

JsonValue = None | bool | int | float | str | list[Any] | dict[str, Any]
JsonShape = Literal["null", "bool", "number", "string", "array", "object"]

SCALAR_SHAPES = frozenset({"null", "bool", "number", "string"})


def json_shape(value: Any) -> JsonShape:
    # bool is an int subclass; check it first so True never compares as a number
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return "array"
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def is_scalar(value: Any) -> bool:
    return json_shape(value) in SCALAR_SHAPES


def sort_json(value: Any) -> JsonValue:
    """Return a copy of ``value`` with every object's keys in lexicographic order.

    Arrays keep their positional order. The input is never mutated.
    """
    shape = json_shape(value)
    if shape == "object":
        return {key: sort_json(value[key]) for key in sorted(value.keys())}
    if shape == "array":
        return [sort_json(item) for item in value]
    return value


def json_depth(value: Any) -> int:
    """Return the deepest array/object nesting in ``value``; scalars are depth 0."""
    deepest = 0
    pending = [(value, 0)]
    while pending:
        current, depth = pending.pop()
        shape = json_shape(current)
        if shape == "object":
            pending.extend((item, depth + 1) for item in current.values())
        elif shape == "array":
            pending.extend((item, depth + 1) for item in current)
        else:
            continue
        deepest = max(deepest, depth + 1)
    return deepest


__all__ = ["SCALAR_SHAPES", "JsonShape", "JsonValue", "is_scalar", "json_depth", "json_shape", "sort_json"]
