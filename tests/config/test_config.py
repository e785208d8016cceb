"""Tests for loading and saving the TOML configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from fileparts.config.config import Config


def test_load_without_file_returns_defaults(fresh_config: Path) -> None:
    config = Config.load()

    assert config.separator is None
    assert config.dotfile_policy == "extension"
    assert config.log_file is None
    assert not (fresh_config / "config" / "config.toml").exists()


def test_load_reads_toml_values(fresh_config: Path) -> None:
    config_file = fresh_config / "config" / "config.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text(
        'separator = "\\\\"\ndotfile_policy = "name"\nlog_file = "logs/custom.log"\n',
        encoding="utf-8",
    )

    config = Config.load()

    assert config.separator == "\\"
    assert config.dotfile_policy == "name"
    assert config.log_file == Path("logs/custom.log")


def test_load_caches_instance(fresh_config: Path) -> None:
    _ = fresh_config
    assert Config.load() is Config.load()


def test_load_ignores_unknown_keys(fresh_config: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_file = fresh_config / "custom.toml"
    _ = config_file.write_text('colour = "blue"\ndotfile_policy = "name"\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.dotfile_policy == "name"
    assert "colour" in caplog.text


def test_load_invalid_toml_raises(fresh_config: Path) -> None:
    config_file = fresh_config / "broken.toml"
    _ = config_file.write_text("separator = ", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(config_file)


def test_save_round_trips_through_load(fresh_config: Path) -> None:
    target = fresh_config / "saved" / "config.toml"
    original = Config(separator="\\", dotfile_policy="name", log_file=Path("/var/log/fp.log"))

    written = original.save(target)
    reloaded = Config.load(target)

    assert written == target
    assert reloaded == original
    assert "# fileparts Configuration File" in target.read_text(encoding="utf-8")


def test_blank_log_file_becomes_none() -> None:
    assert Config(log_file="  ").log_file is None  # pyright: ignore[reportArgumentType]
