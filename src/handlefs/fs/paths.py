"""Path utilities for file and directory handles.

All helpers here are lexical: they never touch the filesystem. Handles store
a path as a ``(parent, name)`` pair produced by ``split_path`` and rebuild
the full path on demand.
"""

import os

from handlefs.core.errors import InvalidName

__all__ = ["clean_path", "join_path", "must_name", "split_path"]


def clean_path(path: str | os.PathLike[str]) -> str:
    """Normalize a path lexically.

    Collapses redundant separators, ``.`` segments and ``..`` segments that
    follow a named segment. An empty path cleans to ``"."``.

    Args:
        path: Path to normalize

    Returns:
        Cleaned path string
    """
    raw = os.fspath(path)
    if not raw:
        return "."
    cleaned = os.path.normpath(raw)
    # POSIX normpath keeps a leading "//"
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def split_path(path: str | os.PathLike[str]) -> tuple[str, str]:
    """Split a path into its parent directory and final component.

    Args:
        path: Path to split; cleaned first

    Returns:
        Tuple of (parent, name). A bare name has parent ``"."``; a
        filesystem root splits into (root, root).
    """
    cleaned = clean_path(path)
    parent, name = os.path.split(cleaned)
    if not name:
        # Only a root ends with a separator once cleaned
        return parent, parent
    return parent or ".", name


def join_path(*segments: str | os.PathLike[str]) -> str:
    """Join path segments and clean the result.

    Every segment is appended to the ones before it, even one that starts
    with a separator, so the result never escapes the first segment by way
    of an absolute component. Empty segments are ignored.

    Args:
        *segments: Path segments, the first one anchoring the result

    Returns:
        Cleaned joined path, or ``"."`` if every segment is empty
    """
    seps = os.sep + (os.altsep or "")
    parts = [p for p in (os.fspath(s) for s in segments) if p]
    if not parts:
        return "."
    parts[1:] = [p.lstrip(seps) for p in parts[1:]]
    return clean_path(os.sep.join(parts))


def must_name(name: str) -> None:
    """Assert that a bare name contains no path separator.

    Args:
        name: Name to validate

    Raises:
        InvalidName: If the name contains a separator
    """
    if os.sep in name or (os.altsep is not None and os.altsep in name):
        raise InvalidName(name)
