"""
events.py — Record schema for fseventsd.

Defines the FsEvent dataclass that the record decoder emits and the output
layer consumes, plus the StreamHeader and Layout types that describe the
block structure of a decompressed journal.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from fseventsd.errors import StreamSizeError
from fseventsd.flags import format_flags

HEADER_SIZE = 12


class Layout(enum.Enum):
    """On-disk record layout, selected by the signature of a stream header.

    ``V1`` records carry path, event id and flags.  ``V2`` records carry an
    additional 64-bit node id after the flags.
    """

    V1 = 0x444C5331  # b"1SLD"
    V2 = 0x444C5332  # b"2SLD"

    @classmethod
    def from_signature(cls, signature: int) -> Layout | None:
        """Return the layout for *signature*, or ``None`` if unrecognized."""
        try:
            return cls(signature)
        except ValueError:
            return None

    @property
    def has_node(self) -> bool:
        return self is Layout.V2


@dataclass(frozen=True)
class StreamHeader:
    """The 12-byte header that opens every record block.

    Attributes:
        signature:   Layout marker (``1SLD`` or ``2SLD`` read little-endian).
        padding:     Unused by decoding.
        stream_size: Length of this header plus the record block after it.
    """

    signature: int
    padding: int
    stream_size: int

    @property
    def layout(self) -> Layout | None:
        return Layout.from_signature(self.signature)

    @property
    def block_size(self) -> int:
        """Byte length of the record block that follows the header."""
        if self.stream_size < HEADER_SIZE:
            raise StreamSizeError(
                f"stream size {self.stream_size} is smaller than the "
                f"{HEADER_SIZE}-byte header"
            )
        return self.stream_size - HEADER_SIZE


@dataclass(frozen=True)
class FsEvent:
    """A single file-system change recorded in an FSEvents journal.

    Attributes:
        path:     Path of the affected item, with exactly one leading ``/``.
        flags:    Change-kind names, in flag-bit order.
        node:     Node id of the item (``0`` for the older record layout).
        event_id: Journal sequence number of the event.
    """

    path: str
    flags: tuple[str, ...]
    node: int
    event_id: int

    @property
    def flags_text(self) -> str:
        return format_flags(self.flags)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "flags": self.flags_text,
            "node": self.node,
            "event_id": self.event_id,
        }
