from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ERROR_CODE_MALFORMED_INPUT = "MALFORMED_INPUT"
ERROR_CODE_OUTPUT_WRITE_FAILURE = "OUTPUT_WRITE_FAILURE"
ERROR_CODE_INVALID_CONFIG = "INVALID_CONFIG"


@dataclass(slots=True, frozen=True)
class JsonDeltaError:
    code: str
    message: str
    source: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
        if self.source is not None:
            payload["source"] = self.source
        return payload


class MalformedInputError(ValueError):
    """Input could not be read or is not valid JSON."""

    def __init__(self, source: str, reason: str, message: str | None = None, **details: Any) -> None:
        super().__init__(message or f"Invalid JSON in {source}: {reason}")
        self.error = JsonDeltaError(
            code=ERROR_CODE_MALFORMED_INPUT,
            message=str(self),
            source=source,
            details=dict(details),
        )


class OutputWriteError(OSError):
    """A report destination could not be written."""

    def __init__(self, destination: str, reason: str) -> None:
        super().__init__(f"Failed to write {destination}: {reason}")
        self.error = JsonDeltaError(
            code=ERROR_CODE_OUTPUT_WRITE_FAILURE,
            message=str(self),
            source=destination,
        )


class ConfigError(ValueError):
    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message if source is None else f"{source}: {message}")
        self.error = JsonDeltaError(code=ERROR_CODE_INVALID_CONFIG, message=str(self), source=source)


__all__ = [
    "ERROR_CODE_INVALID_CONFIG",
    "ERROR_CODE_MALFORMED_INPUT",
    "ERROR_CODE_OUTPUT_WRITE_FAILURE",
    "ConfigError",
    "JsonDeltaError",
    "MalformedInputError",
    "OutputWriteError",
]
