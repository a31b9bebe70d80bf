"""Core constants for handlefs.

This module defines constants used throughout the library:
- Permission modes for created directories and raw file opens
- Buffer size used when copying files
- MIME types the interpreter's registry does not know about
"""

# ============================================================================
# Permission Modes
# ============================================================================

#: Mode for directories made by DirHandle.create()/create_all() (rwxr-xr-x)
DEFAULT_DIR_MODE: int = 0o755

#: Mode for files created through FileHandle.open() (rw-r--r--)
DEFAULT_FILE_MODE: int = 0o644

# ============================================================================
# Copying
# ============================================================================

#: Chunk size in bytes for streaming copies
COPY_CHUNK_SIZE: int = 64 * 1024

# ============================================================================
# MIME Types
# ============================================================================

#: Extension -> content type entries consulted before the mimetypes registry
MIME_OVERRIDES: dict[str, str] = {
    ".md": "text/markdown",
    ".mkv": "video/x-matroska",
    ".flac": "audio/flac",
    ".opus": "audio/ogg",
    ".webp": "image/webp",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
}
