"""
common.models

Shared Pydantic models for use across ndef2api modules.

NdefRecord:
    A single raw NDEF record as yielded by the tag reader (TNF, TYPE, ID and PAYLOAD fields).

TnfKind / RtdKind:
    Canonical names for the Type Name Format values and the well-known Record Type Definitions.

DecodedPayload:
    Discriminated union over the typed payload variants produced by ndef_decoder
    (text, URI, Wi-Fi credentials, MIME text, MIME raw, unsupported).

RecordDecodeResult:
    The outcome of decoding one record of a message: either a payload or an error string.
"""

from enum import Enum, IntEnum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TnfKind(IntEnum):
    """Type Name Format values (3-bit field of the record header)."""

    EMPTY = 0x00
    WELL_KNOWN = 0x01
    MIME_MEDIA = 0x02
    ABSOLUTE_URI = 0x03
    EXTERNAL_TYPE = 0x04
    UNKNOWN = 0x05
    UNCHANGED = 0x06
    RESERVED = 0x07


class RtdKind(str, Enum):
    """Well-known Record Type Definitions, valued by their type field."""

    TEXT = "T"
    URI = "U"
    SMART_POSTER = "Sp"
    ALTERNATIVE_CARRIER = "ac"
    HANDOVER_CARRIER = "Hc"
    HANDOVER_REQUEST = "Hr"
    HANDOVER_SELECT = "Hs"


class NdefRecord(BaseModel):
    """
    NdefRecord

    One raw NDEF record. Instances are immutable.

    Attributes:
        tnf (int): Type Name Format, 0-7.
        type (bytes): Record type field; empty for EMPTY records.
        id (bytes): Record identifier, possibly empty.
        payload (bytes): Undecoded payload octets.
    """

    model_config = ConfigDict(frozen=True)

    tnf: int = Field(..., ge=0, le=7)
    type: bytes = b""
    id: bytes = b""
    payload: bytes = b""

    @model_validator(mode="after")
    def _empty_record_has_no_type(self):
        if self.tnf == TnfKind.EMPTY and self.type:
            raise ValueError("EMPTY records must not carry a type")
        return self


# ── Decoded payload variants ──────────────────────────────────────────────────
class TextPayload(BaseModel):
    """Well-known Text record ("T")."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    language_code: str
    text: str
    encoding: Literal["utf-8", "utf-16"] = "utf-8"


class UriPayload(BaseModel):
    """Well-known URI record ("U") with the query parameters of the resolved URI."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["uri"] = "uri"
    resolved_uri: str
    params: List[Tuple[str, str]] = Field(default_factory=list)
    prefix_code: int = 0


class WifiCredentialsPayload(BaseModel):
    """Wi-Fi Simple Config credential (application/vnd.wfa.wsc)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["wifi_credentials"] = "wifi_credentials"
    ssid: Optional[str] = None
    network_key: Optional[str] = None
    authentication_type: Optional[int] = None
    encryption_type: Optional[int] = None


class MimeTextPayload(BaseModel):
    """MIME media record of a text/* type, payload taken verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mime_text"] = "mime_text"
    mime_type: str
    text: str


class MimeRawPayload(BaseModel):
    """MIME media record of any other type; the payload is not interpreted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mime_raw"] = "mime_raw"
    mime_type: str


class UnsupportedPayload(BaseModel):
    """Record the decoder has no representation for."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unsupported"] = "unsupported"


DecodedPayload = Annotated[
    Union[
        TextPayload,
        UriPayload,
        WifiCredentialsPayload,
        MimeTextPayload,
        MimeRawPayload,
        UnsupportedPayload,
    ],
    Field(discriminator="kind"),
]


class RecordDecodeResult(BaseModel):
    """
    RecordDecodeResult

    Outcome of decoding a single record within a message.

    Attributes:
        index (int): Position of the record in the message.
        tnf_name (Optional[str]): TnfKind name, or None if the TNF was not classified.
        rtd_name (Optional[str]): RtdKind name for well-known records, else None.
        payload (Optional[DecodedPayload]): The decoded payload when decoding succeeded.
        error (Optional[str]): Failure description when decoding this record failed.
        error_type (Optional[str]): Exception class name of that failure, for grouping.
    """

    index: int
    tnf_name: Optional[str] = None
    rtd_name: Optional[str] = None
    payload: Optional[DecodedPayload] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
