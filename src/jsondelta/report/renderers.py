from __future__ import annotations

import json
from html import escape
from pathlib import Path
from typing import Any

from jsondelta.constants import CHANGE_KINDS, SCHEMA_VERSION
from jsondelta.core.diff.models import Change, DiffResult
from jsondelta.core.render.nodes import Node
from jsondelta.errors import OutputWriteError
from jsondelta.report.markup import to_html

_STYLE = """
body { font-family: sans-serif; margin: 1.5em; color: #222; }
.panes { display: flex; gap: 1em; }
.pane { flex: 1; overflow-x: auto; border: 1px solid #ddd; padding: 0.5em; }
.pane h2 { font-size: 1.1em; margin-top: 0; }
.json-list { list-style: none; margin: 0; padding-left: 1.5em; font-family: monospace; }
.key { color: #7a3e9d; }
.json-string { color: #2a7a2a; }
.json-number { color: #1f5fa8; }
.json-bool, .json-null { color: #a85a1f; }
li.added { background: #e6ffed; }
li.removed { background: #ffeef0; }
li.changed { background: #fff5b1; }
table.changes { border-collapse: collapse; margin-top: 1.5em; width: 100%; }
table.changes th, table.changes td { border: 1px solid #ddd; padding: 0.3em 0.6em; font-family: monospace; }
tr.added td.kind { color: #22863a; }
tr.removed td.kind { color: #cb2431; }
tr.changed td.kind { color: #b08800; }
""".strip()


def format_value(value: Any) -> str:
    return json.dumps(value, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def _change_cells(change: Change) -> tuple[str, str]:
    before = format_value(change.before) if change.has_before else ""
    after = format_value(change.after) if change.has_after else ""
    return before, after


def render_markdown(title: str, result: DiffResult, left_label: str = "original", right_label: str = "modified") -> str:
    lines: list[str] = []
    lines.append(f"## {title}")
    lines.append("")
    summary = result.summary
    status = "Identical" if summary.get("identical") else "Differences found"
    lines.append(f"- Compared: `{left_label}` → `{right_label}`")
    lines.append(f"- Status: **{status}**")
    lines.append(f"- Changes: **{summary.get('change_count', 0)}**")
    kinds = summary.get("kinds", {})
    lines.append("- " + ", ".join(f"{kind}: {kinds.get(kind, 0)}" for kind in CHANGE_KINDS))

    lines.append("")
    lines.append("### Changes")
    lines.append("")
    if not result.changes:
        lines.append("No changes.")
    else:
        lines.append("| Path | Kind | From | To |")
        lines.append("|---|---|---|---|")
        for change in result.changes:
            before, after = _change_cells(change)
            path = change.path.canonical() or "(root)"
            lines.append(f"| `{path}` | {change.kind} | {_md_cell(before)} | {_md_cell(after)} |")

    lines.append("")
    return "\n".join(lines)


def _md_cell(text: str) -> str:
    if not text:
        return ""
    return "`" + text.replace("|", "\\|").replace("`", "'") + "`"


def render_html(
    title: str,
    result: DiffResult,
    left: Node,
    right: Node,
    left_label: str = "Original",
    right_label: str = "Modified",
) -> str:
    lines: list[str] = []
    lines.append("<!DOCTYPE html>")
    lines.append('<html lang="en">')
    lines.append("<head>")
    lines.append('<meta charset="utf-8">')
    lines.append(f"<title>{escape(title)}</title>")
    lines.append(f"<style>\n{_STYLE}\n</style>")
    lines.append("</head>")
    lines.append("<body>")
    lines.append(f"<h1>{escape(title)}</h1>")
    change_count = result.summary.get("change_count", 0)
    lines.append(f'<p class="summary">{change_count} change(s)</p>')
    lines.append('<div class="panes">')
    lines.append(f'<div class="pane original"><h2>{escape(left_label)}</h2>{to_html(left)}</div>')
    lines.append(f'<div class="pane modified"><h2>{escape(right_label)}</h2>{to_html(right)}</div>')
    lines.append("</div>")
    lines.append('<table class="changes">')
    lines.append("<tr><th>Path</th><th>Type</th><th>From</th><th>To</th></tr>")
    for change in result.changes:
        before, after = _change_cells(change)
        lines.append(
            f'<tr class="{change.kind}"><td>{escape(change.path.canonical())}</td>'
            f'<td class="kind">{change.kind}</td><td>{escape(before)}</td><td>{escape(after)}</td></tr>'
        )
    lines.append("</table>")
    lines.append("</body>")
    lines.append("</html>")
    lines.append("")
    return "\n".join(lines)


def report_payload(result: DiffResult, left_label: str, right_label: str) -> dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "left": left_label,
        "right": right_label,
        **result.to_dict(),
    }


def _write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(str(path), exc.strerror or str(exc)) from exc


def write_reports(
    title: str,
    result: DiffResult,
    left: Node,
    right: Node,
    *,
    left_label: str,
    right_label: str,
    html_path: Path | None = None,
    json_path: Path | None = None,
    md_path: Path | None = None,
) -> list[Path]:
    written: list[Path] = []
    if html_path is not None:
        _write_text(html_path, render_html(title, result, left, right, left_label, right_label))
        written.append(html_path)
    if json_path is not None:
        payload = report_payload(result, left_label, right_label)
        _write_text(json_path, json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))
        written.append(json_path)
    if md_path is not None:
        _write_text(md_path, render_markdown(title, result, left_label, right_label))
        written.append(md_path)
    return written


__all__ = ["format_value", "render_html", "render_markdown", "report_payload", "write_reports"]
