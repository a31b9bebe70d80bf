"""Path-oriented handles over the local filesystem.

``new_file`` and ``new_dir`` return lightweight handles that reference a path,
load metadata lazily, roll back their in-memory state when a rename or move
fails, and (for directories) list and walk trees.
"""

from handlefs.core.constants import DEFAULT_DIR_MODE
from handlefs.core.errors import (
    HandleFSError,
    InvalidName,
    IsDirectory,
    IsFile,
    IsNotRegular,
    KindMismatch,
    NotFound,
)
from handlefs.fs import (
    DirHandle,
    ExistsResult,
    FileHandle,
    FileInfo,
    new_dir,
    new_file,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DIR_MODE",
    "DirHandle",
    "ExistsResult",
    "FileHandle",
    "FileInfo",
    "HandleFSError",
    "InvalidName",
    "IsDirectory",
    "IsFile",
    "IsNotRegular",
    "KindMismatch",
    "NotFound",
    "new_dir",
    "new_file",
]
