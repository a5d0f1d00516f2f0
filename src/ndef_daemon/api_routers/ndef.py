"""
Defines the FastAPI APIRouter for NDEF decoding.

This module provides endpoints for:
- Decoding a list of already-split NDEF records.
- Parsing and decoding a raw NDEF message.
- Reading the static TNF, RTD and URI prefix tables.
"""

import logging

from fastapi import APIRouter, HTTPException

from ndef_daemon.config import get_decoder_config
from ndef_daemon.models import (
    DecodeMessageRequest,
    DecodeRecordsRequest,
    DecodeResponse,
    NdefTables,
    UriPrefixEntry,
)
from ndef_daemon.record_processing import parse_raw_message, process_records
from ndef_decoder import MalformedMessage
from ndef_decoder.tables import RTD_TYPES, TNF_VALUES, URI_PREFIXES

logger = logging.getLogger(__name__)

api_router_ndef = APIRouter()  # FastAPI router for NDEF decoding endpoints


def _check_record_count(count: int, max_records: int):
    if count > max_records:
        logger.warning(f"Rejected request with {count} records (limit {max_records})")
        raise HTTPException(
            status_code=413,
            detail=f"Too many records: {count} (limit {max_records}).",
        )


@api_router_ndef.post("/ndef/records", response_model=DecodeResponse)
def decode_records_endpoint(body: DecodeRecordsRequest):
    """
    Decodes a list of raw NDEF records.

    Records that fail to decode are returned with an `error` entry; the
    response is 200 as long as the request itself is valid.

    Raises:
        HTTPException: 413 if more records are submitted than NDEF_MAX_RECORDS allows.
    """
    _check_record_count(len(body.records), get_decoder_config()["max_records"])
    records = [record_in.to_record() for record_in in body.records]
    return DecodeResponse(records=process_records(records))


@api_router_ndef.post("/ndef/message", response_model=DecodeResponse)
def decode_message_endpoint(body: DecodeMessageRequest):
    """
    Parses a raw NDEF message (hex) and decodes each of its records.

    Raises:
        HTTPException: 400 if the message is malformed, 413 if it holds more
            records than NDEF_MAX_RECORDS allows.
    """
    decoder_config = get_decoder_config()
    try:
        records = parse_raw_message(
            bytes.fromhex(body.message), max_payload_size=decoder_config["max_payload_size"]
        )
    except MalformedMessage as e:
        raise HTTPException(status_code=400, detail=f"Malformed NDEF message: {e}") from e
    _check_record_count(len(records), decoder_config["max_records"])
    return DecodeResponse(records=process_records(records))


@api_router_ndef.get("/ndef/tables", response_model=NdefTables)
async def get_ndef_tables():
    """Returns the TNF values, RTD type fields and the URI abbreviation table."""
    return NdefTables(
        tnf=dict(TNF_VALUES),
        rtd={name: type_bytes.hex() for name, type_bytes in RTD_TYPES.items()},
        uri_prefixes=[
            UriPrefixEntry(code=code, prefix=prefix) for code, prefix in enumerate(URI_PREFIXES)
        ],
    )
