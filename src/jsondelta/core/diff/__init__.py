from __future__ import annotations

from jsondelta.core.diff.models import Change, ChangeKind, ChangeStatus, DiffResult, summarize
from jsondelta.core.diff.structural import diff, structural_diff

__all__ = [
    "Change",
    "ChangeKind",
    "ChangeStatus",
    "DiffResult",
    "diff",
    "structural_diff",
    "summarize",
]
