"""
ndef_decoder
============

Library for classifying NFC Data Exchange Format (NDEF) records and decoding
their payloads into typed values.

This package contains the core decoding logic: TNF/RTD classification, the
record dispatcher, the payload decoders (well-known Text and URI, Wi-Fi Simple
Config, MIME text) and the parser that splits a raw NDEF message into records.

Functions:
    - classify_tnf / classify_rtd: Map raw TNF values and type fields to kinds
    - decode_record: Decode one record into a typed payload
    - decode_records: Decode a whole message with per-record failure isolation
    - parse_message: Split raw NDEF message bytes into records
    - parse_query: Ordered (key, value) pairs from the query of a URI
"""

from .classify import classify_rtd, classify_tnf
from .decode import decode_record, decode_records
from .exceptions import MalformedMessage, NdefDecodeError, TruncatedPayload
from .message import parse_message
from .mime import decode_mime_text_payload
from .text import decode_text_payload
from .uri import decode_uri_payload, parse_query
from .wifi import decode_wifi_simple_payload

__all__ = [
    "classify_rtd",
    "classify_tnf",
    "decode_record",
    "decode_records",
    "decode_mime_text_payload",
    "decode_text_payload",
    "decode_uri_payload",
    "decode_wifi_simple_payload",
    "parse_message",
    "parse_query",
    "MalformedMessage",
    "NdefDecodeError",
    "TruncatedPayload",
]
