from __future__ import annotations

from jsondelta.errors import (
    ERROR_CODE_INVALID_CONFIG,
    ERROR_CODE_MALFORMED_INPUT,
    ERROR_CODE_OUTPUT_WRITE_FAILURE,
    ConfigError,
    JsonDeltaError,
    MalformedInputError,
    OutputWriteError,
)


def test_error_codes_are_stable() -> None:
    assert ERROR_CODE_MALFORMED_INPUT == "MALFORMED_INPUT"
    assert ERROR_CODE_OUTPUT_WRITE_FAILURE == "OUTPUT_WRITE_FAILURE"
    assert ERROR_CODE_INVALID_CONFIG == "INVALID_CONFIG"


def test_error_to_dict_omits_missing_source() -> None:
    payload = JsonDeltaError(code="X", message="boom").to_dict()

    assert payload == {"code": "X", "message": "boom", "details": {}}


def test_malformed_input_names_source_and_reason() -> None:
    exc = MalformedInputError("a.json", "Expecting value", line=1, column=2)

    assert isinstance(exc, ValueError)
    assert str(exc) == "Invalid JSON in a.json: Expecting value"
    payload = exc.error.to_dict()
    assert payload["code"] == "MALFORMED_INPUT"
    assert payload["source"] == "a.json"
    assert payload["details"] == {"line": 1, "column": 2}


def test_output_write_error_is_an_os_error() -> None:
    exc = OutputWriteError("out/diff.html", "Permission denied")

    assert isinstance(exc, OSError)
    assert exc.error.code == "OUTPUT_WRITE_FAILURE"
    assert exc.error.source == "out/diff.html"


def test_config_error_prefixes_source() -> None:
    exc = ConfigError("title must be a string", source="cfg.yaml")

    assert str(exc) == "cfg.yaml: title must be a string"
    assert exc.error.code == "INVALID_CONFIG"


def test_malformed_input_accepts_explicit_message() -> None:
    exc = MalformedInputError("a.json", "No such file", message="Failed to read file a.json: No such file")

    assert str(exc) == "Failed to read file a.json: No such file"
    assert exc.error.code == "MALFORMED_INPUT"
