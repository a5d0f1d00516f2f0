"""
Tests for `ndef_decoder.message.parse_message`, the raw NDEF message parser.
"""

import pytest

from common.models import NdefRecord
from ndef_decoder import MalformedMessage, decode_records, parse_message

# Two short Text records: MB|SR|TNF=1, then ME|SR|TNF=1
TWO_TEXT_RECORDS = (
    b"\x91\x01\x15T\x02entest text record 1" b"Q\x01\x15T\x02entest text record 2"
)


def test_parse_two_short_records():
    records = parse_message(TWO_TEXT_RECORDS)
    assert records == [
        NdefRecord(tnf=1, type=b"T", payload=b"\x02entest text record 1"),
        NdefRecord(tnf=1, type=b"T", payload=b"\x02entest text record 2"),
    ]


def test_parse_then_decode():
    results = decode_records(parse_message(TWO_TEXT_RECORDS))
    assert [r.payload.text for r in results] == ["test text record 1", "test text record 2"]


def test_parse_empty_input():
    assert parse_message(b"") == []


def test_parse_long_record_with_id():
    payload = b"\x01" + b"a" * 300
    data = bytes([0xC9, 0x01]) + len(payload).to_bytes(4, "big") + bytes([0x02]) + b"U" + b"id"
    records = parse_message(data + payload)
    assert records == [NdefRecord(tnf=1, type=b"U", id=b"id", payload=payload)]


def test_parse_stops_at_message_end():
    data = b"\xd1\x01\x02U\x03x" + b"trailing garbage"
    assert parse_message(data) == [NdefRecord(tnf=1, type=b"U", payload=b"\x03x")]


def test_parse_empty_record():
    assert parse_message(b"\xd0\x00\x00") == [NdefRecord(tnf=0)]


def test_parse_missing_message_end_is_tolerated(caplog):
    records = parse_message(b"\x91\x01\x02U\x03x")
    assert len(records) == 1
    assert "ME flag" in caplog.text


def test_parse_reassembles_chunks():
    data = (
        b"\xb2\x0a\x03text/plain" + b"abc"  # MB|CF|SR, TNF=2
        + b"\x36\x00\x02" + b"de"  # CF|SR, TNF=6
        + b"\x56\x00\x01" + b"f"  # ME|SR, TNF=6
    )
    assert parse_message(data) == [NdefRecord(tnf=2, type=b"text/plain", payload=b"abcdef")]


@pytest.mark.parametrize(
    "data",
    [
        b"\xd1",  # header only
        b"\xd1\x01",  # payload length missing
        b"\xd1\x01\x05U\x03x",  # payload shorter than declared
        b"\xd9\x01\x01",  # ID length missing
        b"\xd1\x01\x00",  # TYPE missing
    ],
)
def test_parse_truncated_fields(data):
    with pytest.raises(MalformedMessage):
        parse_message(data)


def test_parse_rejects_unchanged_outside_chunk():
    with pytest.raises(MalformedMessage):
        parse_message(b"\xd6\x00\x01x")


def test_parse_rejects_open_chunk_sequence():
    with pytest.raises(MalformedMessage):
        parse_message(b"\xb2\x0a\x03text/plainabc")
    with pytest.raises(MalformedMessage):
        parse_message(b"\xf2\x0a\x03text/plainabc")


def test_parse_rejects_typed_middle_chunk():
    data = b"\xb2\x0a\x01text/plaina" + b"\x52\x0a\x01text/plainb"
    with pytest.raises(MalformedMessage):
        parse_message(data)


def test_parse_rejects_middle_chunk_with_id():
    data = b"\xb2\x0a\x03text/plainabc" + b"\x5e\x00\x01\x02idz"
    with pytest.raises(MalformedMessage, match="must not carry an ID"):
        parse_message(data)


def test_parse_rejects_empty_record_with_payload():
    with pytest.raises(MalformedMessage):
        parse_message(b"\xd0\x00\x01x")


def test_parse_rejects_oversize_payload():
    data = bytes([0xC1, 0x01]) + (0x200).to_bytes(4, "big") + b"U" + b"\x00" * 0x200
    with pytest.raises(MalformedMessage):
        parse_message(data, max_payload_size=0x100)
    assert len(parse_message(data, max_payload_size=0x200)) == 1
