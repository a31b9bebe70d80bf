"""File handles: path references to regular files.

A FileHandle stores its path as a (parent directory, name) pair and rebuilds
the full path on demand, so a rename only touches the name and a move only
touches the parent. Metadata is loaded lazily and cached until the caller
reloads it.
"""

import mimetypes
import os
import shutil
from collections.abc import Callable
from typing import TYPE_CHECKING, BinaryIO, TypeVar

from handlefs.core.constants import (
    COPY_CHUNK_SIZE,
    DEFAULT_FILE_MODE,
    MIME_OVERRIDES,
)
from handlefs.core.errors import IsDirectory, IsNotRegular, NotFound
from handlefs.fs.info import ExistsResult, FileInfo
from handlefs.fs.paths import clean_path, join_path, must_name, split_path
from handlefs.utils.debug import debug
from handlefs.utils.logging import get_logger

if TYPE_CHECKING:
    from handlefs.fs.directory import DirHandle

T = TypeVar("T")


class FileHandle:
    """Handle to a regular file identified by path.

    Construction performs no I/O and asserts nothing about existence.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._dir, self._name = split_path(path)
        self._info: FileInfo | None = None

    @classmethod
    def _with_info(cls, path: str, info: FileInfo) -> "FileHandle":
        handle = cls(path)
        handle._info = info
        return handle

    def __repr__(self) -> str:
        return f"FileHandle({self.path()!r})"

    def __fspath__(self) -> str:
        return self.path()

    # --- Naming ---

    def name(self) -> str:
        return self._name

    def path(self) -> str:
        return join_path(self._dir, self._name)

    def extension(self) -> str:
        """Return the suffix from the last dot in the name, dot included.

        ``"archive.tar.gz"`` yields ``".gz"``; a name without a dot yields
        ``""``.
        """
        idx = self._name.rfind(".")
        if idx == -1:
            return ""
        return self._name[idx:]

    def bare_name(self) -> str:
        """Return the name without its extension."""
        idx = self._name.rfind(".")
        if idx == -1:
            return self._name
        return self._name[:idx]

    def mime_type(self) -> str:
        """Return the content type for the extension, or ``""`` if unknown."""
        ext = self.extension().lower()
        if not ext:
            return ""
        if ext in MIME_OVERRIDES:
            return MIME_OVERRIDES[ext]
        return mimetypes.types_map.get(ext, "")

    def parent(self) -> "DirHandle":
        from handlefs.fs.directory import DirHandle

        return DirHandle(self._dir)

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
            IsDirectory: If the path is a directory
            IsNotRegular: If the path is neither a file nor a directory
            OSError: For any other failure, unwrapped
        """
        path = self.path()
        try:
            st = os.stat(path)
        except OSError:
            self._info = None
            raise
        info = FileInfo.from_stat(self._name, st)
        if info.is_dir:
            self._info = None
            raise IsDirectory(path)
        if not info.is_regular:
            self._info = None
            raise IsNotRegular(path)
        self._info = info
        debug("file.load_info", path=path, size=info.size)
        return info

    def info(self) -> FileInfo:
        """Return cached metadata, loading it first if needed."""
        if self._info is None:
            return self.load_info()
        return self._info

    def exists(self) -> ExistsResult:
        """Check whether a regular file exists at the path.

        Returns:
            ``(True, None)`` if it does, ``(False, None)`` if nothing is
            there, ``(True, IsDirectory)`` if a directory is there, and
            ``(False, error)`` for any other failure.
        """
        try:
            self.load_info()
        except NotFound:
            return ExistsResult(False, None)
        except IsDirectory as e:
            return ExistsResult(True, e)
        except OSError as e:
            return ExistsResult(False, e)
        return ExistsResult(True, None)

    # --- Content ---

    def read(self, consumer: Callable[[BinaryIO], T]) -> T:
        """Open the file for reading and pass the stream to ``consumer``.

        The stream is closed on every exit path. The file is never created.

        Args:
            consumer: Callable receiving the binary stream

        Returns:
            Whatever ``consumer`` returns
        """
        with open(self.path(), "rb") as stream:
            return consumer(stream)

    def write(self, consumer: Callable[[BinaryIO], T]) -> T:
        """Create or truncate the file and pass the stream to ``consumer``.

        After ``consumer`` returns, the stream is flushed and synced to disk
        before closing. If ``consumer`` raises, the stream is still closed
        and the exception propagates.

        Args:
            consumer: Callable receiving the binary stream

        Returns:
            Whatever ``consumer`` returns
        """
        with open(self.path(), "wb") as stream:
            result = consumer(stream)
            stream.flush()
            os.fsync(stream.fileno())
        return result

    def open(self, flags: int, perm: int = DEFAULT_FILE_MODE) -> BinaryIO:
        """Open the file with raw ``os.open`` flags.

        The caller owns the returned stream and must close it.

        Args:
            flags: ``os.O_*`` flags
            perm: Mode used if the file is created

        Returns:
            Unbuffered binary file object
        """
        fd = os.open(self.path(), flags, perm)
        try:
            return os.fdopen(fd, _fdopen_mode(flags), buffering=0)
        except BaseException:
            os.close(fd)
            raise

    def copy(self, destination: str | os.PathLike[str]) -> "FileHandle":
        """Copy the file's bytes to ``destination``.

        The destination is created or truncated and synced to disk. If the
        copy fails part-way, the partially written destination is left in
        place.

        Args:
            destination: Path of the copy

        Returns:
            FileHandle for the destination
        """
        target = FileHandle(destination)

        def _stream(src: BinaryIO) -> None:
            with open(target.path(), "wb") as out:
                shutil.copyfileobj(src, out, COPY_CHUNK_SIZE)
                out.flush()
                os.fsync(out.fileno())

        self.read(_stream)
        debug("file.copy", src=self.path(), dst=target.path())
        return target

    # --- Mutation ---

    def rename(self, name: str) -> None:
        """Rename the file within its directory.

        On failure the handle keeps its previous name. On success any cached
        metadata is stale.

        Args:
            name: New bare name

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
                "file.rename.rollback", src=old_path, name=name, error=str(e)
            )
            raise
        debug("file.rename", src=old_path, dst=self.path())

    def move(self, directory: str | os.PathLike[str]) -> None:
        """Move the file into another directory, keeping its name.

        On failure the handle keeps its previous parent.

        Args:
            directory: Destination directory path

        Raises:
            OSError: If the underlying rename fails
        """
        old_dir = self._dir
        old_path = self.path()
        self._dir = clean_path(directory)
        try:
            os.rename(old_path, self.path())
        except OSError as e:
            self._dir = old_dir
            get_logger().warning(
                "file.move.rollback",
                src=old_path,
                directory=os.fspath(directory),
                error=str(e),
            )
            raise
        debug("file.move", src=old_path, dst=self.path())

    def remove(self) -> None:
        """Delete the file. The handle stays usable; cached info is stale."""
        os.remove(self.path())
        debug("file.remove", path=self.path())


def _fdopen_mode(flags: int) -> str:
    """Pick an ``os.fdopen`` mode string matching raw open flags."""
    access = flags & (os.O_RDONLY | os.O_WRONLY | os.O_RDWR)
    if access == os.O_RDONLY:
        return "rb"
    append = bool(flags & os.O_APPEND)
    if access == os.O_WRONLY:
        return "ab" if append else "wb"
    return "ab+" if append else "r+b"


def new_file(path: str | os.PathLike[str]) -> FileHandle:
    """Create a FileHandle for ``path`` (cleaned, no I/O)."""
    return FileHandle(path)
