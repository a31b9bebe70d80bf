"""File and directory handles.

This package provides the handle types, their metadata snapshot, and the
lexical path helpers they are built on.
"""

from handlefs.fs.directory import DirHandle, new_dir
from handlefs.fs.file import FileHandle, new_file
from handlefs.fs.info import ExistsResult, FileInfo
from handlefs.fs.paths import clean_path, join_path, must_name, split_path

__all__ = [
    "DirHandle",
    "ExistsResult",
    "FileHandle",
    "FileInfo",
    "clean_path",
    "join_path",
    "must_name",
    "new_dir",
    "new_file",
    "split_path",
]
