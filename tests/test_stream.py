"""Tests for whole-buffer journal decoding."""

import struct

import pytest

from fseventsd.errors import InsufficientDataError, ParseError, StreamSizeError
from fseventsd.events import Layout
from fseventsd.stream import parse_fsevents

V1 = Layout.V1.value
V2 = Layout.V2.value


def test_empty_buffer():
    assert parse_fsevents(b"") == []


def test_single_v2_stream(record, stream):
    records = [record(f"dir/file{i}".encode(), 1000 + i, 0x01, node=i) for i in range(50)]
    events = parse_fsevents(stream(V2, records))

    assert len(events) == 50
    assert events[0].path == "/dir/file0"
    assert events[-1].event_id == 1049
    assert events[-1].node == 49


def test_mixed_versions(record, stream):
    data = (
        stream(V1, [record(b"old/a", 1, 0x01), record(b"old/b", 2, 0x02)])
        + stream(V2, [record(b"new/c", 3, 0x08, node=77)])
        + stream(V1, [record(b"old/d", 4, 0x10)])
    )
    events = parse_fsevents(data)

    assert [e.path for e in events] == ["/old/a", "/old/b", "/new/c", "/old/d"]
    assert [e.node for e in events] == [0, 0, 77, 0]
    assert [e.flags_text for e in events] == ["Created", "Removed", "Renamed", "Modified"]


def test_unknown_signature_stops_quietly(record, stream):
    good = stream(V2, [record(b"kept", 1, 0x01, node=1)])
    junk = struct.pack("<III", 0, 0, 0) + b"\x00" * 40
    events = parse_fsevents(good + junk)

    assert [e.path for e in events] == ["/kept"]


def test_unknown_signature_first():
    assert parse_fsevents(b"GZIP" + bytes(100)) == []


def test_stream_size_underflow():
    with pytest.raises(StreamSizeError):
        parse_fsevents(struct.pack("<III", V2, 0, 4))


def test_stream_size_past_end(record, stream):
    data = stream(V2, [record(b"a", 1, 0, node=1)])
    with pytest.raises(InsufficientDataError):
        parse_fsevents(data[:-1])


def test_trailing_partial_header(record, stream):
    data = stream(V2, [record(b"a", 1, 0, node=1)]) + b"2SL"
    with pytest.raises(InsufficientDataError):
        parse_fsevents(data)


def test_record_truncated_by_stream_size(record):
    body = record(b"Users/bob", 5, 0x01, node=9)
    # Declared stream ends four bytes into the node id.
    short = struct.pack("<III", V2, 0, 12 + len(body) - 4) + body[:-4]
    with pytest.raises(ParseError):
        parse_fsevents(short)


def test_stream_size_cuts_record_from_next_block(record, stream):
    first = record(b"a", 1, 0, node=1)
    data = struct.pack("<III", V2, 0, 12 + len(first) - 2) + first
    with pytest.raises(ParseError):
        parse_fsevents(data + stream(V2, [record(b"b", 2, 0, node=2)]))


def test_empty_block_is_an_error(record, stream):
    data = stream(V2, []) + stream(V1, [record(b"x", 1, 0)])
    with pytest.raises(ParseError) as info:
        parse_fsevents(data)
    assert info.value.offset == 12


def test_header_only_journal_is_an_error():
    with pytest.raises(ParseError):
        parse_fsevents(struct.pack("<III", V2, 0, 12))


def test_record_error_offset_is_file_relative(record, stream):
    first = stream(V2, [record(b"ok", 1, 0, node=1)])
    body = record(b"a", 2, 0, node=2)
    # Second block stops four bytes into the node id.
    second = struct.pack("<III", V2, 0, 12 + len(body) - 4) + body[:-4]

    with pytest.raises(InsufficientDataError) as info:
        parse_fsevents(first + second)

    node_offset = len(first) + 12 + 2 + 8 + 4
    assert info.value.offset == node_offset
    assert info.value.needed == 8
    assert info.value.available == 4


def test_records_do_not_read_into_next_block(record, stream):
    # The first block claims one byte less than its record; the missing byte
    # is present in the buffer but belongs to the next header.
    rec = record(b"a", 1, 0, node=1)
    data = struct.pack("<III", V2, 0, 12 + len(rec) - 1) + rec + stream(V1, [record(b"b", 2, 0)])
    with pytest.raises(InsufficientDataError) as info:
        parse_fsevents(data)
    assert info.value.offset == 12 + 14
