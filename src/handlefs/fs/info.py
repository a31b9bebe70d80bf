"""Metadata snapshots for file and directory handles.

``FileInfo`` is the cached result of a stat call. Handles hold at most one
snapshot and never refresh it on their own; callers reload explicitly.
"""

import os
import stat
from datetime import UTC, datetime
from typing import Any, NamedTuple

from pydantic import BaseModel, field_serializer


class FileInfo(BaseModel):
    """Snapshot of filesystem metadata for one entry.

    Attributes:
        name: Base name of the entry
        size: Size in bytes
        mtime: Modification time (UTC)
        permissions: Permission bits, as returned by ``stat.S_IMODE``
        is_dir: True if the entry is a directory
        is_regular: True if the entry is a regular file
    """

    name: str
    size: int
    mtime: datetime
    permissions: int
    is_dir: bool
    is_regular: bool

    model_config = {"frozen": True}

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "FileInfo":
        """Build a snapshot from an ``os.stat_result``.

        Args:
            name: Base name to record
            st: Result of ``os.stat``/``os.lstat``

        Returns:
            FileInfo describing the entry
        """
        return cls(
            name=name,
            size=st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime, tz=UTC),
            permissions=stat.S_IMODE(st.st_mode),
            is_dir=stat.S_ISDIR(st.st_mode),
            is_regular=stat.S_ISREG(st.st_mode),
        )

    @field_serializer("mtime")
    def serialize_mtime(self, mtime: datetime) -> str:
        """Serialize mtime as ISO-8601 for JSON."""
        return mtime.isoformat()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dictionary of the snapshot."""
        return self.model_dump()


class ExistsResult(NamedTuple):
    """Outcome of an existence check.

    Unpacks as ``found, error``. ``error`` is set when the lookup failed or
    when something exists at the path but is the wrong kind, in which case
    ``found`` is still True.
    """

    found: bool
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.found
