"""
Defines Pydantic models for API request/response validation and serialization.

These models are used by the FastAPI routers to validate incoming records and
to document the decoded responses. Byte fields travel as hexadecimal strings.

Models:
    - RecordIn: One raw NDEF record with hex-encoded TYPE, ID and PAYLOAD
    - DecodeRecordsRequest: A list of raw records to decode
    - DecodeMessageRequest: A raw NDEF message as a hex string
    - DecodeResponse: One RecordDecodeResult per decoded record
    - UriPrefixEntry: One row of the URI abbreviation table
    - NdefTables: The static TNF, RTD and URI prefix tables
    - RecordDecodeResult: (re-exported from common.models)
"""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from common.models import NdefRecord, RecordDecodeResult


def _check_hex(value: str) -> str:
    cleaned = "".join(value.split())
    try:
        bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"not a valid hex string: {e}") from e
    return cleaned


class RecordIn(BaseModel):
    """A raw NDEF record as received from a tag reader client."""

    tnf: int = Field(..., ge=0, le=7, description="Type Name Format (0-7).")
    type: str = Field("", description="TYPE field as a hex string (e.g. '55' for 'U').")
    id: str = Field("", description="ID field as a hex string; may be empty.")
    payload: str = Field("", description="PAYLOAD field as a hex string.")

    @field_validator("type", "id", "payload")
    @classmethod
    def _validate_hex(cls, value: str) -> str:
        return _check_hex(value)

    @model_validator(mode="after")
    def _empty_record_has_no_type(self):
        if self.tnf == 0 and self.type:
            raise ValueError("EMPTY records (tnf 0) must not carry a type")
        return self

    def to_record(self) -> NdefRecord:
        return NdefRecord(
            tnf=self.tnf,
            type=bytes.fromhex(self.type),
            id=bytes.fromhex(self.id),
            payload=bytes.fromhex(self.payload),
        )


class DecodeRecordsRequest(BaseModel):
    """Request body for decoding already-split records."""

    records: List[RecordIn]


class DecodeMessageRequest(BaseModel):
    """Request body for decoding a raw NDEF message."""

    message: str = Field(..., description="Raw NDEF message bytes as a hex string.")

    @field_validator("message")
    @classmethod
    def _validate_hex(cls, value: str) -> str:
        return _check_hex(value)


class DecodeResponse(BaseModel):
    """Response carrying one result per record, in message order."""

    records: List[RecordDecodeResult] = Field(default_factory=list)


class UriPrefixEntry(BaseModel):
    code: int
    prefix: str


class NdefTables(BaseModel):
    """The static lookup tables used for classification and URI expansion."""

    tnf: Dict[str, int]
    rtd: Dict[str, str] = Field(..., description="RTD name -> TYPE field as a hex string.")
    uri_prefixes: List[UriPrefixEntry]
