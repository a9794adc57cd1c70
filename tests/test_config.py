"""Tests for tsvnbrowser.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from tsvnbrowser.config import BrowserConfig, ConfigError, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == BrowserConfig()
    assert config.scheme == "tsvncmd"
    assert config.diff_command == "diff"
    assert config.log_command == "log"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".tsvnbrowser.yml"
    config_file.write_text(
        """
scheme: "tsvncmd"
commands:
  diff: showcompare
  log: repobrowser
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.scheme == "tsvncmd"
    assert config.diff_command == "showcompare"
    assert config.log_command == "repobrowser"


def test_load_config_from_directory(tmp_path: Path) -> None:
    (tmp_path / ".tsvnbrowser.yml").write_text("commands:\n  log: repobrowser\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.log_command == "repobrowser"
    assert config.diff_command == "diff"


def test_load_config_ignores_invalid_values(tmp_path: Path) -> None:
    config_file = tmp_path / ".tsvnbrowser.yml"
    config_file.write_text(
        """
scheme: "bad:scheme"
commands:
  diff: 42
  log: ""
""",
        encoding="utf-8",
    )

    assert load_config(config_file) == BrowserConfig()


def test_load_config_empty_file(tmp_path: Path) -> None:
    config_file = tmp_path / ".tsvnbrowser.yml"
    config_file.write_text("\n", encoding="utf-8")

    assert load_config(config_file) == BrowserConfig()


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_file = tmp_path / ".tsvnbrowser.yml"
    config_file.write_text("- diff\n- log\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_file)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / ".tsvnbrowser.yml"
    config_file.write_text("commands: [diff\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_file)


def test_load_config_rejects_undecodable_file(tmp_path: Path) -> None:
    config_file = tmp_path / ".tsvnbrowser.yml"
    config_file.write_bytes(b"scheme: \xff\xfe\n")

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(config_file)
