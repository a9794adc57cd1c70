"""Configuration loading for tsvnbrowser (.tsvnbrowser.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".tsvnbrowser.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class BrowserConfig:
    """Settings controlling how command links are rendered."""

    scheme: str = "tsvncmd"
    diff_command: str = "diff"
    log_command: str = "log"


def load_config(config_path: Path) -> BrowserConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return BrowserConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = BrowserConfig()
    commands = _as_dict(data.get("commands"))
    return BrowserConfig(
        scheme=_as_name(data.get("scheme")) or defaults.scheme,
        diff_command=_as_name(commands.get("diff")) or defaults.diff_command,
        log_command=_as_name(commands.get("log")) or defaults.log_command,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_name(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    # Scheme and command names end up verbatim inside the link.
    if not stripped or any(ch in stripped for ch in ":?/ "):
        return None
    return stripped


__all__ = ["BrowserConfig", "ConfigError", "load_config", "CONFIG_FILENAME"]
