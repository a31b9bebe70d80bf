"""Tests for lexical path helpers."""

import os
from pathlib import Path

import pytest

from handlefs.core.errors import InvalidName
from handlefs.fs.paths import clean_path, join_path, must_name, split_path


class TestCleanPath:
    """Test lexical normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("a/b/../c", "a/c"),
            ("a//b/./c/", "a/b/c"),
            ("./a", "a"),
            ("", "."),
            ("/../x", "/x"),
            ("//srv/data", "/srv/data"),
            ("../up", "../up"),
        ],
    )
    def test_clean(self, raw: str, expected: str) -> None:
        """Test that redundant segments are collapsed."""
        assert clean_path(raw) == expected

    def test_accepts_pathlike(self, tmp_path: Path) -> None:
        """Test that os.PathLike values are accepted."""
        assert clean_path(tmp_path / "x" / "..") == str(tmp_path)


class TestSplitPath:
    """Test (parent, name) decomposition."""

    def test_nested(self) -> None:
        assert split_path("/var/log/syslog") == ("/var/log", "syslog")

    def test_bare_name_has_dot_parent(self) -> None:
        """Test that a bare name is rooted at the current directory."""
        assert split_path("notes.txt") == (".", "notes.txt")

    def test_root(self) -> None:
        """Test that the root splits into a pair that joins back to root."""
        parent, name = split_path("/")
        assert join_path(parent, name) == "/"

    def test_trailing_separator_is_ignored(self) -> None:
        assert split_path("/tmp/dir/") == ("/tmp", "dir")


class TestMustName:
    """Test bare-name contract checks."""

    def test_plain_name_passes(self) -> None:
        must_name("report.pdf")

    def test_separator_is_contract_violation(self) -> None:
        """Test that a name with a separator raises InvalidName."""
        with pytest.raises(InvalidName) as exc_info:
            must_name(f"a{os.sep}b")

        assert exc_info.value.name == f"a{os.sep}b"
        assert not isinstance(exc_info.value, OSError)


def test_join_path_cleans() -> None:
    assert join_path("/a", "b", "..", "c") == "/a/c"


@pytest.mark.parametrize(
    ("segments", "expected"),
    [
        (("/a", "/b"), "/a/b"),
        (("a", "/b", "//c"), "a/b/c"),
        (("", "/abs"), "/abs"),
        (("x", ""), "x"),
        (("", ""), "."),
        ((), "."),
    ],
)
def test_join_path_never_restarts_at_absolute_segment(
    segments: tuple[str, ...], expected: str
) -> None:
    """Test that later absolute segments are concatenated."""
    assert join_path(*segments) == expected
