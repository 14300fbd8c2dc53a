"""
records.py — Record block decoding for fseventsd.

A record block is a packed run of variable-length records:

    path bytes, NUL, event id (<Q), flag word (<I)[, node id (<Q)]

The node id is present only when the block was opened by a ``Layout.V2``
header.  A block holds at least one record and its records must end exactly
at the block end.  Offsets are positions in the buffer passed in, so errors
raised while walking a whole journal point at the byte in that journal.
"""

from __future__ import annotations

import logging
import struct

from fseventsd.errors import InsufficientDataError
from fseventsd.events import FsEvent, Layout
from fseventsd.flags import decode_flags

logger = logging.getLogger(__name__)

_U64 = struct.Struct("<Q")
_U32 = struct.Struct("<I")


def _read(fmt: struct.Struct, data: bytes, offset: int, end: int, what: str) -> tuple[int, int]:
    available = end - offset
    if available < fmt.size:
        raise InsufficientDataError(what, offset, fmt.size, max(available, 0))
    (value,) = fmt.unpack_from(data, offset)
    return value, offset + fmt.size


def _read_path(data: bytes, offset: int, end: int) -> tuple[str, int]:
    """Read a NUL-terminated path and return it with one leading slash."""
    nul = data.find(b"\x00", offset, end)
    if nul < 0:
        raise InsufficientDataError("path terminator", end, 1, 0)

    # Invalid UTF-8 must not cost us the record.
    path = "/" + data[offset:nul].decode("utf-8", errors="replace")
    if path.startswith("//"):
        path = path[1:]
    return path, nul + 1


def decode_record(
    data: bytes,
    offset: int,
    layout: Layout,
    end: int | None = None,
) -> tuple[FsEvent, int]:
    """Decode the record starting at *offset*, reading no further than *end*.

    Returns:
        The record and the offset just past it.

    Raises:
        InsufficientDataError: the record runs past *end* (default: the end
            of *data*).
    """
    if end is None:
        end = len(data)

    path, offset = _read_path(data, offset, end)
    event_id, offset = _read(_U64, data, offset, end, "event id")
    flag_word, offset = _read(_U32, data, offset, end, "flags")

    node = 0
    if layout.has_node:
        node, offset = _read(_U64, data, offset, end, "node id")

    event = FsEvent(
        path=path,
        flags=tuple(decode_flags(flag_word)),
        node=node,
        event_id=event_id,
    )
    return event, offset


def decode_block(
    data: bytes,
    layout: Layout,
    start: int = 0,
    end: int | None = None,
) -> list[FsEvent]:
    """Decode every record packed into ``data[start:end]``.

    Raises:
        InsufficientDataError: the block is empty or its last record is
            truncated.
    """
    if end is None:
        end = len(data)

    cursor = start
    events: list[FsEvent] = []
    while True:
        event, cursor = decode_record(data, cursor, layout, end)
        events.append(event)
        if cursor == end:
            break

    logger.debug(
        "Decoded %d %s records from %d-byte block at offset %d",
        len(events),
        layout.name,
        end - start,
        start,
    )
    return events
