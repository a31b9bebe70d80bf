"""Smoke tests for the public package surface."""

from pathlib import Path

import handlefs


def test_public_exports() -> None:
    for name in handlefs.__all__:
        assert hasattr(handlefs, name), name


def test_round_trip_through_handles(tmp_path: Path) -> None:
    """Test a typical create/write/list/rename/remove sequence."""
    root = handlefs.new_dir(tmp_path / "work" / "area")
    root.create_all()

    f = handlefs.new_file(root.join("draft.txt"))
    f.write(lambda w: w.write(b"v1"))
    f.rename("final.txt")

    assert [x.name() for x in root.files()] == ["final.txt"]
    assert f.mime_type() == "text/plain"
    assert f.parent().up(1).path() == str(tmp_path / "work")

    root.up(1).remove_all()
    assert root.exists() == (False, None)
