"""Shared fixtures for path decomposition tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def posix_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the configured separator and dotfile policy for the test."""

    from fileparts.config import settings
    from fileparts.features.parts.domain import DotfilePolicy

    monkeypatch.setattr(settings, "PATH_SEPARATOR", "/")
    monkeypatch.setattr(settings, "DOTFILE_POLICY", DotfilePolicy.EXTENSION)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside a scratch directory holding ``path/dog.txt``, ``path/dog`` and ``dog.txt``."""

    (tmp_path / "path").mkdir()
    _ = (tmp_path / "path" / "dog.txt").write_text("woof", encoding="utf-8")
    _ = (tmp_path / "path" / "dog").write_text("woof", encoding="utf-8")
    _ = (tmp_path / "dog.txt").write_text("woof", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
