"""Pytest configuration and fixtures for handlefs tests."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for listing and walk tests.

    Structure:
        root/
            a.txt
            b.bin
            sub/
                c.txt
                deeper/
                    d.md
            empty/

    4 files and 3 subdirectories below root.
    """
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()

    (root / "a.txt").write_text("alpha")
    (root / "b.bin").write_bytes(b"\x00\x01\x02")
    (root / "sub" / "c.txt").write_text("gamma")
    (root / "sub" / "deeper" / "d.md").write_text("# delta")

    return root
