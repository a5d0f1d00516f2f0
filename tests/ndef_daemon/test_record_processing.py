"""
Unit tests for the record_processing module in the ndef_daemon.

These tests cover:
- Decoding batches of records through `ndef_decoder` with per-record isolation.
- Incrementing the decode, error, classification-miss and unknown-prefix metrics.
- Parsing raw messages and counting malformed ones.
"""

from unittest.mock import patch

import pytest

from common.models import NdefRecord, RecordDecodeResult
from ndef_daemon import metrics
from ndef_daemon.record_processing import parse_raw_message, process_records
from ndef_decoder import MalformedMessage


def counter_value(counter, **labels):
    target = counter.labels(**labels) if labels else counter
    return target._value.get()


def test_process_records_success_updates_metrics(text_record, uri_record):
    records_before = counter_value(metrics.RECORD_COUNTER)
    ok_before = counter_value(metrics.SUCCESSFUL_DECODES)
    text_before = counter_value(metrics.PAYLOAD_KIND_COUNTER, kind="text")
    uri_before = counter_value(metrics.PAYLOAD_KIND_COUNTER, kind="uri")

    results = process_records([text_record, uri_record])

    assert [r.payload.kind for r in results] == ["text", "uri"]
    assert counter_value(metrics.RECORD_COUNTER) == records_before + 2
    assert counter_value(metrics.SUCCESSFUL_DECODES) == ok_before + 2
    assert counter_value(metrics.PAYLOAD_KIND_COUNTER, kind="text") == text_before + 1
    assert counter_value(metrics.PAYLOAD_KIND_COUNTER, kind="uri") == uri_before + 1


def test_process_records_failure_is_isolated_and_counted(text_record):
    broken = NdefRecord(tnf=1, type=b"T", payload=b"\x09en")
    errors_before = counter_value(metrics.DECODE_ERRORS, error="TruncatedPayload")

    with patch("ndef_daemon.record_processing.logger") as mock_logger:
        results = process_records([broken, text_record])

    assert not results[0].ok
    assert results[1].payload.text == "Hi"
    assert counter_value(metrics.DECODE_ERRORS, error="TruncatedPayload") == errors_before + 1
    mock_logger.warning.assert_called_once()
    assert "Record 0" in mock_logger.warning.call_args[0][0]


def test_process_records_counts_classification_misses():
    misses_before = counter_value(metrics.CLASSIFICATION_MISSES)

    results = process_records(
        [
            NdefRecord(tnf=1, type=b"Xy", payload=b""),
            NdefRecord(tnf=4, type=b"example.com:t", payload=b""),
            NdefRecord(tnf=1, type=b"T", payload=b"\x02enHi"),
        ]
    )

    assert [r.payload.kind for r in results] == ["unsupported", "unsupported", "text"]
    # Only the unknown well-known type is a miss; EXTERNAL_TYPE classifies fine.
    assert counter_value(metrics.CLASSIFICATION_MISSES) == misses_before + 1


def test_process_records_counts_unknown_uri_prefix():
    before = counter_value(metrics.UNKNOWN_URI_PREFIXES)

    results = process_records(
        [
            NdefRecord(tnf=1, type=b"U", payload=b"\x30example.com"),
            NdefRecord(tnf=1, type=b"U", payload=b"\x03example.com"),
        ]
    )

    assert results[0].payload.resolved_uri == "example.com"
    assert results[1].payload.resolved_uri == "http://example.com"
    assert counter_value(metrics.UNKNOWN_URI_PREFIXES) == before + 1


def test_process_records_observes_latency(text_record):
    with patch("ndef_daemon.record_processing.DECODE_LATENCY") as mock_latency:
        process_records([text_record])
    mock_latency.observe.assert_called_once()
    assert mock_latency.observe.call_args[0][0] >= 0


def test_parse_raw_message_counts_messages():
    before = counter_value(metrics.MESSAGE_COUNTER)
    records = parse_raw_message(b"\xd1\x01\x02U\x03x", max_payload_size=0x100)
    assert records == [NdefRecord(tnf=1, type=b"U", payload=b"\x03x")]
    assert counter_value(metrics.MESSAGE_COUNTER) == before + 1


def test_parse_raw_message_malformed_is_counted_and_reraised():
    malformed_before = counter_value(metrics.MALFORMED_MESSAGES)
    with pytest.raises(MalformedMessage):
        parse_raw_message(b"\xd1\x01\x09U\x03x", max_payload_size=0x100)
    assert counter_value(metrics.MALFORMED_MESSAGES) == malformed_before + 1


def test_process_records_labels_errors_by_exception_type(text_record):
    failed = RecordDecodeResult(
        index=0, tnf_name="WELL_KNOWN", error="record too short", error_type="TruncatedPayload"
    )
    before = counter_value(metrics.DECODE_ERRORS, error="TruncatedPayload")

    with patch("ndef_daemon.record_processing.decode_records", return_value=[failed]):
        process_records([text_record])

    assert counter_value(metrics.DECODE_ERRORS, error="TruncatedPayload") == before + 1
