from __future__ import annotations

from pathlib import Path

SCHEMA_VERSION = "v1"

CHANGE_ADDED = "added"
CHANGE_REMOVED = "removed"
CHANGE_CHANGED = "changed"
CHANGE_UNCHANGED = "unchanged"

CHANGE_KINDS = (CHANGE_ADDED, CHANGE_REMOVED, CHANGE_CHANGED)

PATH_SEPARATOR = "."

# Deepest array/object nesting accepted from input; the core walks recurse once per level
MAX_DEPTH = 200

DEFAULT_OUTPUT = Path("diff.html")
DEFAULT_TITLE = "JSON Diff"
DEFAULT_CONFIG_FILE = Path(".jsondelta.yaml")
CONFIG_ENV_VAR = "JSONDELTA_CONFIG"

OUTPUT_FORMATS = {"html", "text"}

EXIT_SUCCESS = 0
EXIT_DIFFERENCES = 1
EXIT_INTERNAL_ERROR = 2
