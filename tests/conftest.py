"""Shared builders for synthetic FSEvents journals."""

from __future__ import annotations

import gzip
import struct
from pathlib import Path
from typing import Callable

import pytest


def encode_record(path: bytes, event_id: int, flags: int, node: int | None = None) -> bytes:
    data = path + b"\x00" + struct.pack("<QI", event_id, flags)
    if node is not None:
        data += struct.pack("<Q", node)
    return data


def encode_stream(signature: int, records: list[bytes], padding: int = 0) -> bytes:
    body = b"".join(records)
    return struct.pack("<III", signature, padding, 12 + len(body)) + body


@pytest.fixture
def record() -> Callable[..., bytes]:
    return encode_record


@pytest.fixture
def stream() -> Callable[..., bytes]:
    return encode_stream


@pytest.fixture
def journal_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write gzip-compressed journal data into ``tmp_path/.fseventsd``."""
    directory = tmp_path / ".fseventsd"
    directory.mkdir()

    def _write(name: str, data: bytes) -> Path:
        path = directory / name
        path.write_bytes(gzip.compress(data))
        return path

    return _write
