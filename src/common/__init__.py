"""
common

This package contains shared models used across the ndef2api project.

Modules:
    - models: Defines shared Pydantic models used by the decoder library and the daemon
"""

from .models import (
    DecodedPayload,
    MimeRawPayload,
    MimeTextPayload,
    NdefRecord,
    RecordDecodeResult,
    RtdKind,
    TextPayload,
    TnfKind,
    UnsupportedPayload,
    UriPayload,
    WifiCredentialsPayload,
)

__all__ = [
    "DecodedPayload",
    "MimeRawPayload",
    "MimeTextPayload",
    "NdefRecord",
    "RecordDecodeResult",
    "RtdKind",
    "TextPayload",
    "TnfKind",
    "UnsupportedPayload",
    "UriPayload",
    "WifiCredentialsPayload",
]
