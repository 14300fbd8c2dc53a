"""
header.py — Stream header parsing for fseventsd.

A decompressed journal is a run of (header, record block) pairs.  Each header
is three little-endian u32 values: signature, padding and stream size.
"""

from __future__ import annotations

import struct

from fseventsd.errors import InsufficientDataError
from fseventsd.events import HEADER_SIZE, StreamHeader

HEADER_STRUCT = struct.Struct("<III")


def parse_header(data: bytes | memoryview, offset: int = 0) -> tuple[StreamHeader, int]:
    """Decode the stream header at *offset*.

    Returns:
        The header and the offset of the first byte after it.

    Raises:
        InsufficientDataError: fewer than 12 bytes remain at *offset*.
    """
    available = len(data) - offset
    if available < HEADER_SIZE:
        raise InsufficientDataError("stream header", offset, HEADER_SIZE, max(available, 0))

    signature, padding, stream_size = HEADER_STRUCT.unpack_from(data, offset)
    header = StreamHeader(signature=signature, padding=padding, stream_size=stream_size)
    return header, offset + HEADER_SIZE
