"""Custom exceptions for handlefs.

This module defines the error taxonomy shared by file and directory handles:

- Not-found: the builtin ``FileNotFoundError``, re-exported as ``NotFound``
  so OS errors propagate verbatim while remaining a distinguished value.
- Kind-mismatch: the path exists but is the wrong kind of entity
  (``IsDirectory``, ``IsFile``, ``IsNotRegular``).
- Contract violation: ``InvalidName``, raised for programming errors such as
  passing a path where a bare name is required.

Any other ``OSError`` raised by the operating system is propagated unwrapped.
"""

import errno

#: Sentinel for "path does not exist"; identical to the builtin exception.
NotFound = FileNotFoundError


class HandleFSError(Exception):
    """Base exception for recoverable errors defined by handlefs.

    All library-defined recoverable errors inherit from this class so callers
    can handle them broadly. ``InvalidName`` is intentionally not a subclass.
    """

    pass


class KindMismatch(HandleFSError):
    """Raised when a path exists but is not the kind the handle declared.

    Kind-mismatch errors are also ``OSError`` subclasses (via the concrete
    classes below), so code catching ``OSError`` around filesystem calls
    still sees them.

    Attributes:
        path: Path that was inspected
        reason: Short description of the mismatch
    """

    code: int = errno.EINVAL
    reason: str = "unexpected entry kind"

    def __init__(self, path: str) -> None:
        """Initialize the kind-mismatch error.

        Args:
            path: Path whose entry kind did not match
        """
        self.path = path
        super().__init__(self.code, self.reason, path)

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class IsDirectory(KindMismatch, IsADirectoryError):
    """Raised when a file was expected but the path is a directory."""

    code = errno.EISDIR
    reason = "is a directory"


class IsFile(KindMismatch, NotADirectoryError):
    """Raised when a directory was expected but the path is not one."""

    code = errno.ENOTDIR
    reason = "is a file"


class IsNotRegular(KindMismatch, OSError):
    """Raised when the path is neither a regular file nor a directory."""

    code = errno.EINVAL
    reason = "is not a regular file"


class InvalidName(AssertionError):
    """Raised when a bare name contains a path separator.

    This signals a programming error rather than bad runtime input, so it is
    kept outside the ``HandleFSError`` and ``OSError`` hierarchies.

    Attributes:
        name: The rejected name
    """

    def __init__(self, name: str) -> None:
        """Initialize InvalidName.

        Args:
            name: The rejected name
        """
        self.name = name
        super().__init__(f"invalid name: {name}")
