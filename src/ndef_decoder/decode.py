"""
ndef_decoder.decode

Record dispatcher: picks the payload decoder for an NDEF record and drives the
decoding of all records of a message.

Functions:
    - decode_record: Decode one record into a DecodedPayload
    - decode_records: Decode every record of a message, isolating failures per record

Notes:
    - Routing is a fixed decision table on TNF, RTD and (for MIME records) the
      MIME type string. Records that match no row decode to UnsupportedPayload.
    - Only NdefDecodeError is captured per record; anything else propagates.
"""

import logging
from typing import Iterable, List

from common.models import (
    DecodedPayload,
    MimeRawPayload,
    NdefRecord,
    RecordDecodeResult,
    RtdKind,
    TnfKind,
    UnsupportedPayload,
)

from .classify import classify_rtd, classify_tnf
from .exceptions import NdefDecodeError
from .mime import decode_mime_text_payload, mime_type_from_bytes
from .tables import MIME_WFA_WSC
from .text import decode_text_payload
from .uri import decode_uri_payload
from .wifi import decode_wifi_simple_payload

logger = logging.getLogger(__name__)


def decode_record(record: NdefRecord) -> DecodedPayload:
    """
    Decode a single record.

    Decision table, first match wins:
      1. WELL_KNOWN + URI  -> URI decoder
      2. WELL_KNOWN + TEXT -> Text decoder
      3. MIME_MEDIA        -> Wi-Fi Simple Config decoder for application/vnd.wfa.wsc,
                              MIME text decoder for text/*, otherwise MimeRawPayload
      4. anything else     -> UnsupportedPayload

    Raises:
        TruncatedPayload: if the selected payload decoder finds the payload too short.
    """
    tnf = classify_tnf(record.tnf)

    if tnf == TnfKind.WELL_KNOWN:
        rtd = classify_rtd(record.type)
        if rtd == RtdKind.URI:
            return decode_uri_payload(record.payload)
        if rtd == RtdKind.TEXT:
            return decode_text_payload(record.payload)
    elif tnf == TnfKind.MIME_MEDIA:
        mime_type = mime_type_from_bytes(record.type)
        if mime_type == MIME_WFA_WSC:
            return decode_wifi_simple_payload(record.payload)
        if mime_type.startswith("text/"):
            return decode_mime_text_payload(mime_type, record.payload)
        return MimeRawPayload(mime_type=mime_type)

    return UnsupportedPayload()


def decode_records(records: Iterable[NdefRecord]) -> List[RecordDecodeResult]:
    """
    Decode every record of a message.

    Returns one RecordDecodeResult per record, in input order. A record whose
    decoder raises NdefDecodeError gets an `error` entry; the remaining records
    are still decoded.
    """
    results = []
    for index, record in enumerate(records):
        tnf = classify_tnf(record.tnf)
        rtd = classify_rtd(record.type) if tnf == TnfKind.WELL_KNOWN else None
        result = RecordDecodeResult(
            index=index,
            tnf_name=tnf.name if tnf is not None else None,
            rtd_name=rtd.name if rtd is not None else None,
        )
        try:
            result.payload = decode_record(record)
        except NdefDecodeError as e:
            logger.debug(f"Record {index} (TNF {record.tnf}) failed to decode: {e}")
            result.error_type = type(e).__name__
            result.error = f"{result.error_type}: {e}"
        results.append(result)
    return results
