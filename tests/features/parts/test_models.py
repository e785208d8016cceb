"""Tests for path part value objects and policies."""

from __future__ import annotations

import dataclasses

import pytest

from fileparts.features.parts.domain import (
    DotfilePolicy,
    FilePartsError,
    InvalidArgumentError,
    PathParts,
    platform_separator,
    validate_separator,
)


def test_path_parts_is_immutable() -> None:
    parts = PathParts(directory="a/", base_name="b", extension=".c", full_path="a/b.c")

    with pytest.raises(dataclasses.FrozenInstanceError):
        parts.directory = "z/"  # pyright: ignore[reportAttributeAccessIssue]


def test_path_parts_name_and_directory_flag() -> None:
    parts = PathParts(directory="a/", base_name="b", extension=".c", full_path="a/b.c")

    assert parts.name == "b.c"
    assert parts.has_directory


@pytest.mark.parametrize("raw", ["extension", " NAME ", "Name"])
def test_dotfile_policy_from_user_input(raw: str) -> None:
    assert DotfilePolicy.from_user_input(raw) in set(DotfilePolicy)


def test_dotfile_policy_rejects_unknown_values() -> None:
    with pytest.raises(InvalidArgumentError, match="Valid options"):
        _ = DotfilePolicy.from_user_input("stem")


@pytest.mark.parametrize("separator", ["/", "\\"])
def test_validate_separator_accepts_supported(separator: str) -> None:
    assert validate_separator(separator) == separator


@pytest.mark.parametrize("separator", ["", ":", "//", "a"])
def test_validate_separator_rejects_others(separator: str) -> None:
    with pytest.raises(InvalidArgumentError):
        _ = validate_separator(separator)


def test_invalid_argument_error_is_value_error() -> None:
    assert issubclass(InvalidArgumentError, FilePartsError)
    assert issubclass(InvalidArgumentError, ValueError)


def test_platform_separator_is_supported() -> None:
    assert platform_separator() in {"/", "\\"}


@pytest.mark.parametrize("raw", [1, None, ["name"]])
def test_dotfile_policy_rejects_non_strings(raw: object) -> None:
    with pytest.raises(InvalidArgumentError, match="Unsupported dotfile policy"):
        _ = DotfilePolicy.from_user_input(raw)
