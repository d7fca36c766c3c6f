from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import cast

import yaml  # type: ignore[import-untyped]

from jsonwarn.values import DEFAULT_MAX_DEPTH

_KNOWN_KEYS: frozenset[str] = frozenset({"strict", "output_format", "max_depth", "indent"})


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class ConfigError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True)
class ReportConfig:
    strict: bool = False
    output_format: OutputFormat = OutputFormat.TEXT
    max_depth: int = DEFAULT_MAX_DEPTH
    indent: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or self.max_depth < 0:
            raise ConfigError("E_CONFIG_INVALID", "max_depth must be a non-negative integer")
        if isinstance(self.indent, bool) or self.indent < 0:
            raise ConfigError("E_CONFIG_INVALID", "indent must be a non-negative integer")


def load_report_config(path: Path | None) -> ReportConfig:
    if path is None:
        return ReportConfig()
    data = _read_yaml_file(path)
    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError("E_CONFIG_INVALID", f"unknown config key(s): {', '.join(unknown)}")
    defaults = ReportConfig()
    return ReportConfig(
        strict=_optional_bool(data, "strict", defaults.strict),
        output_format=_optional_format(data, "output_format", defaults.output_format),
        max_depth=_optional_int(data, "max_depth", defaults.max_depth),
        indent=_optional_int(data, "indent", defaults.indent),
    )


def _read_yaml_file(path: Path) -> dict[str, object]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(
            "E_CONFIG_READ_FAILED",
            f"unable to read config file '{path}': {exc}",
        ) from exc
    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigError(
            "E_CONFIG_PARSE_FAILED",
            f"invalid config yaml in '{path}': {exc}",
        ) from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError("E_CONFIG_INVALID", "config root must be a mapping")
    return cast(dict[str, object], payload)


def _optional_bool(data: dict[str, object], key: str, default: bool) -> bool:
    if key not in data:
        return default
    value = data[key]
    if isinstance(value, bool):
        return value
    raise ConfigError("E_CONFIG_INVALID", f"invalid bool for key '{key}'")


def _optional_int(data: dict[str, object], key: str, default: int) -> int:
    if key not in data:
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("E_CONFIG_INVALID", f"invalid integer for key '{key}'")
    return value


def _optional_format(data: dict[str, object], key: str, default: OutputFormat) -> OutputFormat:
    if key not in data:
        return default
    value = data[key]
    choices = tuple(fmt.value for fmt in OutputFormat)
    if isinstance(value, str) and value.strip().lower() in choices:
        return OutputFormat(value.strip().lower())
    raise ConfigError(
        "E_CONFIG_INVALID",
        f"invalid output format for key '{key}'; choose from: {','.join(choices)}",
    )
