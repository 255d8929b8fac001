from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsondelta.config import Settings
from jsondelta.constants import EXIT_DIFFERENCES, EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from jsondelta.core.diff import DiffResult, structural_diff
from jsondelta.core.index import ChangeIndex, build_index
from jsondelta.core.render import Node, render
from jsondelta.core.values import sort_json
from jsondelta.errors import JsonDeltaError, MalformedInputError, OutputWriteError
from jsondelta.io import load_json_document
from jsondelta.report import to_text, write_reports


@dataclass(slots=True)
class Comparison:
    result: DiffResult
    index: ChangeIndex
    left: Any
    right: Any
    left_tree: Node
    right_tree: Node

    @property
    def identical(self) -> bool:
        return not self.result.changes


@dataclass(slots=True)
class CommandOutcome:
    exit_code: int
    comparison: Comparison | None = None
    written: list[Path] = field(default_factory=list)
    text: str | None = None
    errors: list[JsonDeltaError] = field(default_factory=list)


def compare_documents(left: Any, right: Any) -> Comparison:
    """Diff two parsed documents and annotate key-sorted copies of both."""
    changes = structural_diff(left, right)
    index = build_index(changes)
    left_sorted = sort_json(left)
    right_sorted = sort_json(right)
    return Comparison(
        result=DiffResult.from_changes(changes),
        index=index,
        left=left_sorted,
        right=right_sorted,
        left_tree=render(left_sorted, index),
        right_tree=render(right_sorted, index),
    )


def render_text(comparison: Comparison, left_label: str, right_label: str) -> str:
    sections = [
        f"--- {left_label}",
        to_text(comparison.left_tree),
        f"+++ {right_label}",
        to_text(comparison.right_tree),
    ]
    return "\n".join(sections)


def compare_files(left_path: Path, right_path: Path, settings: Settings) -> CommandOutcome:
    try:
        left = load_json_document(left_path)
        right = load_json_document(right_path)
    except MalformedInputError as exc:
        return CommandOutcome(exit_code=EXIT_INTERNAL_ERROR, errors=[exc.error])

    comparison = compare_documents(left, right)
    left_label = str(left_path)
    right_label = str(right_path)

    text = render_text(comparison, left_label, right_label) if settings.format == "text" else None

    try:
        written = write_reports(
            settings.title,
            comparison.result,
            comparison.left_tree,
            comparison.right_tree,
            left_label=left_label,
            right_label=right_label,
            html_path=settings.output,
            json_path=settings.json_output,
            md_path=settings.markdown_output,
        )
    except OutputWriteError as exc:
        return CommandOutcome(
            exit_code=EXIT_INTERNAL_ERROR,
            comparison=comparison,
            text=text,
            errors=[exc.error],
        )

    exit_code = EXIT_DIFFERENCES if settings.exit_code and not comparison.identical else EXIT_SUCCESS
    return CommandOutcome(exit_code=exit_code, comparison=comparison, written=written, text=text)


__all__ = ["CommandOutcome", "Comparison", "compare_documents", "compare_files", "render_text"]
