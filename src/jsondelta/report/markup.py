from __future__ import annotations

import json
from html import escape

from jsondelta.constants import CHANGE_UNCHANGED
from jsondelta.core.diff.models import ChangeStatus
from jsondelta.core.render.nodes import LeafNode, Node

_BRACKETS = {"object": ("{", "}"), "array": ("[", "]")}
_TEXT_MARKERS: dict[str, str] = {
    "added": "+",
    "removed": "-",
    "changed": "~",
    "unchanged": " ",
}


def to_html(node: Node) -> str:
    """Serialize an annotated node tree to nested HTML lists."""
    if isinstance(node, LeafNode):
        return _html_leaf(node)
    opening, closing = _BRACKETS[node.shape]
    parts = [f'<div class="json-{node.shape} {node.status}">{opening}<ul class="json-list">']
    last = len(node.entries) - 1
    for position, entry in enumerate(node.entries):
        parts.append(f'<li class="json-key {entry.status}">')
        if entry.label is not None:
            parts.append(f'<span class="key">"{escape(entry.label)}"</span>: ')
        parts.append(to_html(entry.value))
        if position < last:
            parts.append(",")
        parts.append("</li>")
    parts.append(f"</ul>{closing}</div>")
    return "".join(parts)


def _html_leaf(node: LeafNode) -> str:
    text = escape(node.text)
    if node.shape == "string":
        text = f'"{text}"'
    return f'<span class="json-{node.shape} {node.status}">{text}</span>'


def to_text(node: Node, indent: str = "  ") -> str:
    """Serialize an annotated node tree to diff-style indented text.

    Each line starts with ``+``, ``-`` or ``~`` when it falls inside an added,
    removed or changed region, and a blank column otherwise.
    """
    lines: list[str] = []
    _text_lines(node, "", 0, "", CHANGE_UNCHANGED, indent, lines)
    return "\n".join(lines)


def _text_lines(
    node: Node,
    label: str,
    depth: int,
    trailing: str,
    inherited: ChangeStatus,
    indent: str,
    lines: list[str],
) -> None:
    status = node.status if node.status != CHANGE_UNCHANGED else inherited
    prefix = f"{_TEXT_MARKERS[status]} {indent * depth}{label}"

    if isinstance(node, LeafNode):
        text = json.dumps(node.text, ensure_ascii=False) if node.shape == "string" else node.text
        lines.append(f"{prefix}{text}{trailing}")
        return

    opening, closing = _BRACKETS[node.shape]
    if not node.entries:
        lines.append(f"{prefix}{opening}{closing}{trailing}")
        return

    lines.append(f"{prefix}{opening}")
    last = len(node.entries) - 1
    for position, entry in enumerate(node.entries):
        entry_label = f"{json.dumps(entry.label, ensure_ascii=False)}: " if entry.label is not None else ""
        comma = "," if position < last else ""
        _text_lines(entry.value, entry_label, depth + 1, comma, status, indent, lines)
    lines.append(f"{_TEXT_MARKERS[status]} {indent * depth}{closing}{trailing}")


__all__ = ["to_html", "to_text"]
