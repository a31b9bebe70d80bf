"""Directory handles: path references to directories.

DirHandle mirrors FileHandle for naming, metadata and rename/move, and adds
creation, removal, listing and a recursive depth-first walk that hands out
pre-populated file and directory handles.
"""

import os
import shutil
from collections.abc import Callable
from typing import Any

from handlefs.core.constants import DEFAULT_DIR_MODE
from handlefs.core.errors import IsFile, NotFound
from handlefs.fs.file import FileHandle
from handlefs.fs.info import ExistsResult, FileInfo
from handlefs.fs.paths import clean_path, join_path, must_name, split_path
from handlefs.utils.debug import debug
from handlefs.utils.logging import get_logger

FileVisitor = Callable[[FileHandle], Any]
DirVisitor = Callable[["DirHandle"], Any]


class DirHandle:
    """Handle to a directory identified by path.

    Construction performs no I/O and asserts nothing about existence.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._dir, self._name = split_path(path)
        self._info: FileInfo | None = None

    @classmethod
    def _with_info(cls, path: str, info: FileInfo) -> "DirHandle":
        handle = cls(path)
        handle._info = info
        return handle

    def __repr__(self) -> str:
        return f"DirHandle({self.path()!r})"

    def __fspath__(self) -> str:
        return self.path()

    # --- Naming ---

    def name(self) -> str:
        return self._name

    def path(self) -> str:
        return join_path(self._dir, self._name)

    def parent(self) -> "DirHandle":
        return DirHandle(self._dir)

    def up(self, levels: int) -> "DirHandle":
        """Return the ancestor ``levels`` steps above this directory.

        Resolved lexically: ``DirHandle("a/b/c").up(2)`` is ``a``.
        """
        return DirHandle(join_path(self.path(), *([os.pardir] * levels)))

    def join(self, *segments: str) -> str:
        """Join segments onto this directory's path. No I/O."""
        return join_path(self.path(), *segments)

    # --- Metadata ---

    @property
    def has_info(self) -> bool:
        """True once metadata has been loaded (it may be stale)."""
        return self._info is not None

    def load_info(self) -> FileInfo:
        """Stat the path and replace the cached metadata.

        Returns:
            The freshly loaded FileInfo

        Raises:
            NotFound: If the path does not exist
            IsFile: If the path exists but is not a directory
            OSError: For any other failure, unwrapped
        """
        path = self.path()
        try:
            st = os.stat(path)
        except OSError:
            self._info = None
            raise
        info = FileInfo.from_stat(self._name, st)
        if not info.is_dir:
            self._info = None
            raise IsFile(path)
        self._info = info
        debug("dir.load_info", path=path)
        return info

    def info(self) -> FileInfo:
        """Return cached metadata, loading it first if needed."""
        if self._info is None:
            return self.load_info()
        return self._info

    def exists(self) -> ExistsResult:
        """Check whether a directory exists at the path.

        Returns:
            ``(True, None)`` if it does, ``(False, None)`` if nothing is
            there, ``(True, IsFile)`` if something other than a directory is
            there, and ``(False, error)`` for any other failure.
        """
        try:
            self.load_info()
        except NotFound:
            return ExistsResult(False, None)
        except IsFile as e:
            return ExistsResult(True, e)
        except OSError as e:
            return ExistsResult(False, e)
        return ExistsResult(True, None)

    # --- Creation & removal ---

    def create(self) -> None:
        """Create this directory (mode 0755). The parent must exist."""
        os.mkdir(self.path(), DEFAULT_DIR_MODE)
        debug("dir.create", path=self.path())

    def create_all(self) -> None:
        """Create this directory and any missing ancestors (mode 0755).

        Succeeds without changes if the directory already exists.
        """
        os.makedirs(self.path(), DEFAULT_DIR_MODE, exist_ok=True)
        debug("dir.create_all", path=self.path())

    def remove(self) -> None:
        """Delete this directory, which must be empty."""
        os.rmdir(self.path())
        debug("dir.remove", path=self.path())

    def remove_all(self) -> None:
        """Delete this directory and everything beneath it.

        Irreversible. A directory that does not exist is not an error.
        """
        path = self.path()
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            if os.path.lexists(path):
                raise
            debug("dir.remove_all.missing", path=path)
            return
        get_logger().info("dir.remove_all", path=path)

    # --- Listing ---

    def list_entries(self, limit: int = -1) -> list[FileInfo]:
        """Read metadata for entries of this directory.

        Entries come back in the order the filesystem enumerates them and are
        not followed through symlinks.

        Args:
            limit: Maximum number of entries; zero or negative means all

        Returns:
            List of FileInfo records
        """
        entries: list[FileInfo] = []
        with os.scandir(self.path()) as it:
            for entry in it:
                if 0 < limit <= len(entries):
                    break
                st = entry.stat(follow_symlinks=False)
                entries.append(FileInfo.from_stat(entry.name, st))
        debug("dir.list", path=self.path(), count=len(entries))
        return entries

    def files(self) -> list[FileHandle]:
        """Return handles for the non-directory entries of this directory."""
        return [
            FileHandle(self.join(fi.name))
            for fi in self.list_entries()
            if not fi.is_dir
        ]

    def dirs(self) -> list["DirHandle"]:
        """Return handles for the subdirectories of this directory."""
        return [
            DirHandle(self.join(fi.name)) for fi in self.list_entries() if fi.is_dir
        ]

    def walk(
        self,
        file_visitor: FileVisitor | None = None,
        dir_visitor: DirVisitor | None = None,
    ) -> None:
        """Walk the tree rooted at this directory, depth first.

        Every directory, this one included, is passed to ``dir_visitor`` and
        every other entry to ``file_visitor``. Handles arrive with metadata
        already loaded (file handles only for regular files). Names inside a
        directory are visited in sorted order, each directory before its
        contents. Symlinks are reported as entries, never followed.

        The walk is fail-fast: an exception raised by a visitor, or by a
        stat/listing of any entry, stops the walk and propagates unchanged.

        Args:
            file_visitor: Called with a FileHandle per non-directory entry
            dir_visitor: Called with a DirHandle per directory
        """
        root = self.path()
        st = os.lstat(root)
        debug("dir.walk", path=root)
        _walk_tree(root, FileInfo.from_stat(self._name, st), file_visitor, dir_visitor)

    # --- Mutation ---

    def rename(self, name: str) -> None:
        """Rename the directory within its parent.

        On failure the handle keeps its previous name. On success any cached
        metadata is stale.

        Raises:
            InvalidName: If ``name`` contains a path separator
            OSError: If the underlying rename fails
        """
        must_name(name)
        old_name = self._name
        old_path = self.path()
        self._name = name
        try:
            os.rename(old_path, self.path())
        except OSError as e:
            self._name = old_name
            get_logger().warning(
                "dir.rename.rollback", src=old_path, name=name, error=str(e)
            )
            raise
        debug("dir.rename", src=old_path, dst=self.path())

    def move(self, directory: str | os.PathLike[str]) -> None:
        """Move the directory under another parent, keeping its name.

        On failure the handle keeps its previous parent.
        """
        old_dir = self._dir
        old_path = self.path()
        self._dir = clean_path(directory)
        try:
            os.rename(old_path, self.path())
        except OSError as e:
            self._dir = old_dir
            get_logger().warning(
                "dir.move.rollback",
                src=old_path,
                directory=os.fspath(directory),
                error=str(e),
            )
            raise
        debug("dir.move", src=old_path, dst=self.path())


def _walk_tree(
    path: str,
    info: FileInfo,
    file_visitor: FileVisitor | None,
    dir_visitor: DirVisitor | None,
) -> None:
    if not info.is_dir:
        if file_visitor is not None:
            if info.is_regular:
                file_visitor(FileHandle._with_info(path, info))
            else:
                file_visitor(FileHandle(path))
        return

    if dir_visitor is not None:
        dir_visitor(DirHandle._with_info(path, info))

    for name in sorted(os.listdir(path)):
        child = os.path.join(path, name)
        st = os.lstat(child)
        _walk_tree(child, FileInfo.from_stat(name, st), file_visitor, dir_visitor)


def new_dir(path: str | os.PathLike[str]) -> DirHandle:
    """Create a DirHandle for ``path`` (cleaned, no I/O)."""
    return DirHandle(path)
