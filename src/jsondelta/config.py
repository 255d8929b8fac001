from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from jsondelta.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    DEFAULT_OUTPUT,
    DEFAULT_TITLE,
    OUTPUT_FORMATS,
)
from jsondelta.errors import ConfigError

_KNOWN_KEYS = {"output", "json_output", "markdown_output", "title", "exit_code", "format"}


@dataclass(slots=True, frozen=True)
class Settings:
    output: Path = DEFAULT_OUTPUT
    json_output: Path | None = None
    markdown_output: Path | None = None
    title: str = DEFAULT_TITLE
    exit_code: bool = False
    format: str = "html"

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        applied = {key: value for key, value in overrides.items() if value is not None}
        if "format" in applied:
            _check_format(applied["format"], source=None)
        return replace(self, **applied)


def _check_format(value: Any, source: str | None) -> str:
    if not isinstance(value, str) or value not in OUTPUT_FORMATS:
        supported = ", ".join(sorted(OUTPUT_FORMATS))
        raise ConfigError(f"format must be one of: {supported}", source=source)
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config ({exc})", source=str(path)) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML ({exc})", source=str(path)) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError("config file must be a mapping", source=str(path))
    return loaded


def _parse_path(raw: Any, *, field_name: str, base: Path, source: str) -> Path | None:
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise ConfigError(f"{field_name} must be a non-empty string", source=source)
    candidate = Path(raw)
    if candidate.is_absolute():
        return candidate
    return base / candidate


def parse_settings(data: dict[str, Any], *, source_path: Path) -> Settings:
    source = str(source_path)
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}", source=source)

    base = source_path.parent
    settings = Settings()

    output = _parse_path(data.get("output"), field_name="output", base=base, source=source)
    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise ConfigError("title must be a string", source=source)
    exit_code = data.get("exit_code")
    if exit_code is not None and not isinstance(exit_code, bool):
        raise ConfigError("exit_code must be a boolean", source=source)
    output_format = data.get("format")
    if output_format is not None:
        _check_format(output_format, source=source)

    return replace(
        settings,
        output=output or settings.output,
        json_output=_parse_path(data.get("json_output"), field_name="json_output", base=base, source=source),
        markdown_output=_parse_path(
            data.get("markdown_output"), field_name="markdown_output", base=base, source=source
        ),
        title=title if title is not None else settings.title,
        exit_code=exit_code if exit_code is not None else settings.exit_code,
        format=output_format or settings.format,
    )


def resolve_config_path(explicit: Path | None, cwd: Path | None = None) -> Path | None:
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_settings(explicit: Path | None = None, cwd: Path | None = None) -> Settings:
    path = resolve_config_path(explicit, cwd)
    if path is None:
        return Settings()
    return parse_settings(_load_yaml(path), source_path=path.resolve())


__all__ = ["Settings", "load_settings", "parse_settings", "resolve_config_path"]
