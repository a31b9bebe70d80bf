"""Structured logging for handlefs.

The library never configures structlog globally; applications decide where
events go. Events are named ``<entity>.<operation>[.<outcome>]``.
"""

from typing import Any

import structlog


def get_logger(**context: Any) -> Any:
    """Return a structlog logger bound to the handlefs component.

    Args:
        **context: Extra key/value pairs to bind

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger().bind(component="handlefs", **context)
