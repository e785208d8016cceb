"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def console_only_logging(mocker: MockerFixture, tmp_path: Path) -> None:
    """Keep CLI runs from writing log files into the repository."""

    from fileparts.config.config import Config

    _ = mocker.patch.object(Config, "load", return_value=Config(log_file=tmp_path / "cli.log"))


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside a scratch directory holding ``path/dog.txt``."""

    (tmp_path / "path").mkdir()
    _ = (tmp_path / "path" / "dog.txt").write_text("woof", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
