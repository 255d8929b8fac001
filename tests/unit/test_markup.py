from __future__ import annotations

from jsondelta.core.diff import diff
from jsondelta.core.index import build_index
from jsondelta.core.render import render
from jsondelta.report.markup import to_html, to_text


def test_to_html_uses_json_list_markup() -> None:
    tree = render({"x": 1, "y": [True, None]}, build_index([]))

    html = to_html(tree)

    assert html == (
        '<div class="json-object unchanged">{<ul class="json-list">'
        '<li class="json-key unchanged"><span class="key">"x"</span>: '
        '<span class="json-number unchanged">1</span>,</li>'
        '<li class="json-key unchanged"><span class="key">"y"</span>: '
        '<div class="json-array unchanged">[<ul class="json-list">'
        '<li class="json-key unchanged"><span class="json-bool unchanged">true</span>,</li>'
        '<li class="json-key unchanged"><span class="json-null unchanged">null</span></li>'
        "</ul>]</div></li>"
        "</ul>}</div>"
    )


def test_to_html_escapes_keys_and_strings() -> None:
    tree = render({"<k>": "a & \"b\""}, build_index([]))

    html = to_html(tree)

    assert '<span class="key">"&lt;k&gt;"</span>' in html
    assert '"a &amp; &quot;b&quot;"' in html
    assert "<k>" not in html


def test_to_html_marks_changed_entries() -> None:
    index = build_index(diff({"x": 1}, {"x": 2, "z": "new"}))

    html = to_html(render({"x": 2, "z": "new"}, index))

    assert '<li class="json-key changed">' in html
    assert '<li class="json-key added">' in html
    assert '<span class="json-string added">"new"</span>' in html


def test_to_text_prefixes_changed_lines() -> None:
    index = build_index(diff({"x": 1}, {"x": 2}))

    assert to_text(render({"x": 2}, index)) == '  {\n~   "x": 2\n  }'


def test_to_text_marks_whole_added_subtree() -> None:
    index = build_index(diff({}, {"y": [1, 2]}))

    assert to_text(render({"y": [1, 2]}, index)).splitlines() == [
        "  {",
        '+   "y": [',
        "+     1,",
        "+     2",
        "+   ]",
        "  }",
    ]


def test_to_text_renders_empty_containers_inline() -> None:
    text = to_text(render({"a": [], "b": {}}, build_index([])))

    assert text.splitlines() == ["  {", '    "a": [],', '    "b": {}', "  }"]
