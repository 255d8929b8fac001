from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsondelta.constants import MAX_DEPTH
from jsondelta.core.values import json_depth
from jsondelta.errors import MalformedInputError


def _reject_constant(name: str) -> Any:
    # NaN never equals itself, so a document holding one would differ from its own copy
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json_text(text: str, source: str = "<string>", max_depth: int = MAX_DEPTH) -> Any:
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(source, exc.msg, line=exc.lineno, column=exc.colno) from exc
    except ValueError as exc:
        raise MalformedInputError(source, str(exc)) from exc
    except RecursionError as exc:
        raise MalformedInputError(source, f"nesting deeper than {max_depth} levels") from exc

    depth = json_depth(value)
    if depth > max_depth:
        raise MalformedInputError(source, f"nesting deeper than {max_depth} levels", depth=depth)
    return value


def load_json_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(str(path), str(exc), message=f"Failed to read file {path}: {exc}") from exc
    return parse_json_text(text, source=str(path))


__all__ = ["load_json_document", "parse_json_text"]
