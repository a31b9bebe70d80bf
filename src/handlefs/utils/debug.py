"""Debug tracing for handlefs.

Handles trace every filesystem call they make (stat, list, walk, create,
rename, move, remove, copy) as structlog events at debug level. Tracing is
off unless HANDLEFS_DEBUG is set, so a library user who configures structlog
for their own debug output is not flooded with per-call events.

Usage:
    from handlefs.utils.debug import debug

    debug("dir.list", path=path, count=len(entries))

Environment:
    HANDLEFS_DEBUG: Set to '1', 'true', 'yes' (case-insensitive) to enable
                    tracing. Any other value or unset disables it.
"""

import os
from typing import Any

from handlefs.utils.logging import get_logger

# Determine if tracing is enabled at module import time
_DEBUG_ENABLED = os.environ.get("HANDLEFS_DEBUG", "").lower() in (
    "1",
    "true",
    "yes",
)


def debug_enabled() -> bool:
    """Return True if HANDLEFS_DEBUG tracing is on."""
    return _DEBUG_ENABLED


def debug(event: str, **context: Any) -> None:
    """Emit a debug-level trace event if HANDLEFS_DEBUG is enabled.

    Args:
        event: Dotted event name, ``<entity>.<operation>``
        **context: Key/value pairs describing the call (paths, sizes, counts)

    Note:
        The environment variable is read at module import time. Changing it
        afterwards has no effect unless the module is reloaded.
    """
    if _DEBUG_ENABLED:
        get_logger().debug(event, **context)
