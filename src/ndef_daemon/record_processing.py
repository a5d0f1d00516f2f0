"""
Handles the processing of NDEF records submitted to the ndef2api daemon.

This module is responsible for:
- Parsing raw NDEF messages into records.
- Decoding each record with `ndef_decoder`, isolating failures per record.
- Logging records that could not be classified or decoded.
- Recording decode metrics.
"""

import logging
import time
from typing import List, Sequence

from common.models import NdefRecord, RecordDecodeResult, UriPayload
from ndef_daemon.metrics import (
    CLASSIFICATION_MISSES,
    DECODE_ERRORS,
    DECODE_LATENCY,
    MALFORMED_MESSAGES,
    MESSAGE_COUNTER,
    PAYLOAD_KIND_COUNTER,
    RECORD_COUNTER,
    SUCCESSFUL_DECODES,
    UNKNOWN_URI_PREFIXES,
)
from ndef_decoder import MalformedMessage, decode_records, parse_message
from ndef_decoder.tables import is_known_uri_prefix

logger = logging.getLogger(__name__)


def _record_metrics(result: RecordDecodeResult):
    if result.tnf_name is None or (result.tnf_name == "WELL_KNOWN" and result.rtd_name is None):
        CLASSIFICATION_MISSES.inc()

    if result.error is not None:
        DECODE_ERRORS.labels(error=result.error_type).inc()
        logger.warning(f"Record {result.index} could not be decoded: {result.error}")
        return

    SUCCESSFUL_DECODES.inc()
    PAYLOAD_KIND_COUNTER.labels(kind=result.payload.kind).inc()
    if isinstance(result.payload, UriPayload) and not is_known_uri_prefix(
        result.payload.prefix_code
    ):
        UNKNOWN_URI_PREFIXES.inc()


def process_records(records: Sequence[NdefRecord]) -> List[RecordDecodeResult]:
    """
    Decode a batch of records and record metrics for each outcome.

    Args:
        records: The records of one NDEF message, in message order.

    Returns:
        One RecordDecodeResult per record. Failed records carry an `error`
        and never prevent the others from being decoded.
    """
    RECORD_COUNTER.inc(len(records))
    start_time = time.perf_counter()
    try:
        results = decode_records(records)
    finally:
        DECODE_LATENCY.observe(time.perf_counter() - start_time)

    for result in results:
        _record_metrics(result)

    logger.debug(
        f"Decoded {len(results)} record(s): "
        f"{sum(1 for r in results if r.ok)} ok, {sum(1 for r in results if not r.ok)} failed"
    )
    return results


def parse_raw_message(data: bytes, max_payload_size: int) -> List[NdefRecord]:
    """
    Parse a raw NDEF message into records, counting malformed messages.

    Raises:
        MalformedMessage: if the message cannot be split into records.
    """
    MESSAGE_COUNTER.inc()
    try:
        records = parse_message(data, max_payload_size=max_payload_size)
    except MalformedMessage as e:
        MALFORMED_MESSAGES.inc()
        logger.warning(f"Malformed NDEF message ({len(data)} bytes): {e}")
        raise
    return records
