"""
stream.py — Whole-buffer decoding for fseventsd.

Walks a decompressed journal from the first byte to the last, decoding each
(header, record block) pair in turn.

Public API
----------
parse_fsevents(data)
    Return every record in *data*, in on-disk order.  Decoding stops
    quietly at a header whose signature is not a known layout; any other
    malformation raises a ParseError and no records are returned.
"""

from __future__ import annotations

import logging

from fseventsd.errors import InsufficientDataError, StreamSizeError
from fseventsd.events import FsEvent
from fseventsd.header import parse_header
from fseventsd.records import decode_block

logger = logging.getLogger(__name__)


def parse_fsevents(data: bytes) -> list[FsEvent]:
    """Decode all record blocks in a decompressed journal buffer."""
    data = bytes(data)
    end = len(data)
    cursor = 0
    events: list[FsEvent] = []

    while cursor < end:
        header, block_start = parse_header(data, cursor)

        layout = header.layout
        if layout is None:
            # Unknown signatures mark the end of usable data.
            logger.debug(
                "Stopping at offset %d: unrecognized signature 0x%08x",
                cursor,
                header.signature,
            )
            break

        try:
            block_size = header.block_size
        except StreamSizeError as exc:
            raise StreamSizeError(str(exc), cursor) from exc
        block_end = block_start + block_size
        if block_end > end:
            raise InsufficientDataError(
                "record block", block_start, block_size, end - block_start
            )

        events.extend(decode_block(data, layout, block_start, block_end))
        cursor = block_end

    return events
