"""
errors.py — Exception hierarchy for fseventsd.

Parse errors abort the file being decoded, I/O errors abort the file being
read, and a journal directory that cannot be listed aborts the whole run.
"""

from __future__ import annotations


class FsEventsError(Exception):
    """Base class for every error raised by this package."""


class ParseError(FsEventsError):
    """Decompressed journal data does not follow the on-disk layout."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (offset {offset})"
        super().__init__(message)
        self.offset = offset


class InsufficientDataError(ParseError):
    """A fixed-width field or header runs past the end of its buffer."""

    def __init__(self, what: str, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"insufficient data for {what}: need {needed} bytes, "
            f"{available} available",
            offset,
        )
        self.needed = needed
        self.available = available


class StreamSizeError(ParseError):
    """A stream header declares a size smaller than the header itself."""


class DecompressError(FsEventsError, OSError):
    """A journal file could not be opened, read or inflated."""


class JournalDirectoryError(FsEventsError, OSError):
    """The journal directory does not exist or cannot be listed."""


class FileTooLargeError(FsEventsError):
    """A journal file is at or above the configured size ceiling."""
