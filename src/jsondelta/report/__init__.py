from __future__ import annotations

from jsondelta.report.markup import to_html, to_text
from jsondelta.report.renderers import render_html, render_markdown, report_payload, write_reports

__all__ = ["render_html", "render_markdown", "report_payload", "to_html", "to_text", "write_reports"]
