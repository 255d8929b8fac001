from __future__ import annotations

from pathlib import Path

import pytest

from jsondelta.constants import MAX_DEPTH
from jsondelta.core.values import json_depth
from jsondelta.errors import MalformedInputError
from jsondelta.io import load_json_document, parse_json_text


def test_load_json_document_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"name": "café", "n": [1, 2.5, null]}', encoding="utf-8")

    assert load_json_document(path) == {"name": "café", "n": [1, 2.5, None]}


def test_invalid_json_raises_malformed_input(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"a": ', encoding="utf-8")

    with pytest.raises(MalformedInputError) as excinfo:
        load_json_document(path)

    assert str(path) in str(excinfo.value)
    assert excinfo.value.error.details["line"] == 1


def test_missing_file_raises_malformed_input(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"

    with pytest.raises(MalformedInputError) as excinfo:
        load_json_document(missing)

    assert excinfo.value.error.source == str(missing)
    assert excinfo.value.error.code == "MALFORMED_INPUT"
    assert str(excinfo.value).startswith(f"Failed to read file {missing}")
    assert "Invalid JSON" not in str(excinfo.value)


def test_parse_json_text_default_source() -> None:
    with pytest.raises(MalformedInputError, match="<string>"):
        parse_json_text("nope")

    assert parse_json_text("[true]") == [True]


def test_non_standard_constants_are_rejected() -> None:
    with pytest.raises(MalformedInputError, match="NaN"):
        parse_json_text('{"x": NaN}')
    with pytest.raises(MalformedInputError, match="Infinity"):
        parse_json_text("[-Infinity]")


def test_nesting_at_the_limit_is_accepted() -> None:
    text = "[" * MAX_DEPTH + "]" * MAX_DEPTH

    assert json_depth(parse_json_text(text)) == MAX_DEPTH


def test_nesting_past_the_limit_is_rejected() -> None:
    text = "[" * (MAX_DEPTH + 1) + "]" * (MAX_DEPTH + 1)

    with pytest.raises(MalformedInputError, match="nesting deeper than") as excinfo:
        parse_json_text(text, source="deep.json")

    assert excinfo.value.error.source == "deep.json"
    assert excinfo.value.error.details["depth"] == MAX_DEPTH + 1


def test_decoder_recursion_overflow_is_reported_as_malformed_input() -> None:
    text = "[" * 200_000 + "]" * 200_000

    with pytest.raises(MalformedInputError, match="nesting deeper than"):
        parse_json_text(text, source="huge.json")
