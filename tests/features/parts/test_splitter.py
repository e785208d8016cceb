"""
Summary: Tests for splitting path strings into directory, base name and extension.
Why: Lock down separator, extension and dotfile edge cases without filesystem access.
"""

from __future__ import annotations

import pytest

from fileparts.features.parts.domain import DotfilePolicy, PathParts, split_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("dog.txt", ("", "dog", ".txt")),
        ("path/dog.txt", ("path/", "dog", ".txt")),
        ("path/dog", ("path/", "dog", "")),
        ("/abs/path/archive.tar.gz", ("/abs/path/", "archive.tar", ".gz")),
        ("path/name.", ("path/", "name", ".")),
        ("/root.txt", ("/", "root", ".txt")),
    ],
)
def test_split_path_posix(path: str, expected: tuple[str, str, str]) -> None:
    """Directory keeps its trailing separator; extension keeps its dot."""

    parts = split_path(path, separator="/")

    assert (parts.directory, parts.base_name, parts.extension) == expected
    assert parts.full_path == path


def test_split_path_without_directory_uses_empty_string() -> None:
    """A bare file name has an empty, not missing, directory."""

    parts = split_path("dog.txt", separator="/")

    assert parts.directory == ""
    assert not parts.has_directory
    assert parts.name == "dog.txt"


def test_split_path_ignores_dots_in_directory_names() -> None:
    """Only a dot inside the file name can start an extension."""

    parts = split_path("conf.d/settings", separator="/")

    assert parts == PathParts(
        directory="conf.d/", base_name="settings", extension="", full_path="conf.d/settings"
    )


def test_split_path_with_windows_separator() -> None:
    """An injected backslash separator splits Windows style paths."""

    parts = split_path("C:\\Users\\dog\\notes.md", separator="\\")

    assert parts.directory == "C:\\Users\\dog\\"
    assert parts.base_name == "notes"
    assert parts.extension == ".md"


def test_split_path_posix_separator_leaves_backslashes_in_name() -> None:
    """A separator that does not occur leaves the whole path as the file name."""

    parts = split_path("dir\\dog.txt", separator="/")

    assert parts.directory == ""
    assert parts.base_name == "dir\\dog"
    assert parts.extension == ".txt"


@pytest.mark.parametrize(
    ("name", "extension_policy", "name_policy"),
    [
        (".bashrc", ("", ".bashrc"), (".bashrc", "")),
        ("..hidden", (".", ".hidden"), ("..hidden", "")),
        (".config.yml", (".config", ".yml"), (".config", ".yml")),
        ("README", ("README", ""), ("README", "")),
    ],
)
def test_split_path_dotfile_policies(
    name: str,
    extension_policy: tuple[str, str],
    name_policy: tuple[str, str],
) -> None:
    """Leading dots start an extension only under the EXTENSION policy."""

    as_extension = split_path(f"home/{name}", separator="/", dotfile_policy=DotfilePolicy.EXTENSION)
    as_name = split_path(f"home/{name}", separator="/", dotfile_policy=DotfilePolicy.NAME)

    assert (as_extension.base_name, as_extension.extension) == extension_policy
    assert (as_name.base_name, as_name.extension) == name_policy


@pytest.mark.parametrize("path", ["a/b/c.d.e", "x", ".x", "dir/", "a.b/c.d/e"])
def test_split_path_parts_concatenate_to_input(path: str) -> None:
    """Directory, base name and extension always rebuild the input exactly."""

    for policy in DotfilePolicy:
        parts = split_path(path, separator="/", dotfile_policy=policy)
        assert parts.directory + parts.base_name + parts.extension == path
