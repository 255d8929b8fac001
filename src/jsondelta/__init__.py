from __future__ import annotations

from jsondelta.core.diff import Change, diff, structural_diff
from jsondelta.core.index import ChangeIndex, build_index, lookup
from jsondelta.core.path import ROOT, JsonPath
from jsondelta.core.render import render

__version__ = "0.1.0"

__all__ = [
    "ROOT",
    "Change",
    "ChangeIndex",
    "JsonPath",
    "__version__",
    "build_index",
    "diff",
    "lookup",
    "render",
    "structural_diff",
]
