"""
ndef_decoder.message

Splits a raw NDEF message (as dumped from a tag) into NdefRecord values.

Record layout:
    octet 0           MB | ME | CF | SR | IL | TNF (3 bits)
    TYPE_LENGTH       1 octet
    PAYLOAD_LENGTH    1 octet if SR else 4 octets, big-endian
    ID_LENGTH         1 octet, present only if IL
    TYPE, ID, PAYLOAD

Chunked records (CF set) are reassembled into a single NdefRecord carrying the
TNF, TYPE and ID of the first chunk.
"""

import logging
import struct
from io import BytesIO
from typing import List

from common.models import NdefRecord, TnfKind

from .exceptions import MalformedMessage

logger = logging.getLogger(__name__)

MAX_PAYLOAD_SIZE = 0x100000

_MB = 0b10000000
_ME = 0b01000000
_CF = 0b00100000
_SR = 0b00010000
_IL = 0b00001000
_TNF = 0b00000111


def _read(stream: BytesIO, size: int, what: str) -> bytes:
    octets = stream.read(size)
    if len(octets) != size:
        raise MalformedMessage(
            f"buffer underflow at reading {what}: expected {size} octets, got {len(octets)}"
        )
    return octets


def _read_record(stream: BytesIO, max_payload_size: int):
    octet0 = _read(stream, 1, "record header")[0]
    tnf = octet0 & _TNF
    flags = {
        "mb": bool(octet0 & _MB),
        "me": bool(octet0 & _ME),
        "cf": bool(octet0 & _CF),
        "il": bool(octet0 & _IL),
    }
    short_record = bool(octet0 & _SR)
    has_id = flags["il"]

    struct_format = ">B" + ("B" if short_record else "L") + ("B" if has_id else "")
    length_octets = _read(stream, struct.calcsize(struct_format), "length fields")
    fields = struct.unpack(struct_format, length_octets)
    type_length, payload_length = fields[0], fields[1]
    id_length = fields[2] if has_id else 0

    if payload_length > max_payload_size:
        raise MalformedMessage(
            f"payload of {payload_length} octets exceeds the limit of {max_payload_size}"
        )
    if tnf == TnfKind.EMPTY and (type_length or payload_length or id_length):
        raise MalformedMessage("EMPTY record must not carry type, id or payload")

    record_type = _read(stream, type_length, "TYPE field")
    record_id = _read(stream, id_length, "ID field")
    payload = _read(stream, payload_length, "PAYLOAD field")
    return tnf, record_type, record_id, payload, flags


def parse_message(data: bytes, max_payload_size: int = MAX_PAYLOAD_SIZE) -> List[NdefRecord]:
    """
    Parse a raw NDEF message into its records.

    Parsing stops after the record flagged ME. Empty input yields an empty list.
    A message that simply runs out of data without an ME flag is accepted with
    a warning.

    Raises:
        MalformedMessage: on truncated fields, oversize payloads, a stray
            UNCHANGED record, a chunk sequence left open, a middle or final
            chunk with a TYPE or ID field, or an EMPTY record carrying data.
    """
    stream = BytesIO(bytes(data))
    end = len(data)
    records: List[NdefRecord] = []
    chunk = None

    while stream.tell() < end:
        index = len(records)
        tnf, record_type, record_id, payload, flags = _read_record(stream, max_payload_size)

        if index == 0 and chunk is None and not flags["mb"]:
            logger.debug("First record of message does not carry the MB flag")

        if chunk is not None:
            if tnf != TnfKind.UNCHANGED or record_type:
                raise MalformedMessage(
                    f"chunk of record {index} must have TNF UNCHANGED and an empty TYPE"
                )
            if flags["il"]:
                raise MalformedMessage(f"chunk of record {index} must not carry an ID field")
            chunk["payload"].append(payload)
            if sum(len(p) for p in chunk["payload"]) > max_payload_size:
                raise MalformedMessage(
                    f"chunked payload of record {index} exceeds the limit of {max_payload_size}"
                )
            if not flags["cf"]:
                records.append(
                    NdefRecord(
                        tnf=chunk["tnf"],
                        type=chunk["type"],
                        id=chunk["id"],
                        payload=b"".join(chunk["payload"]),
                    )
                )
                chunk = None
        elif tnf == TnfKind.UNCHANGED:
            raise MalformedMessage(f"record {index} has TNF UNCHANGED outside a chunk sequence")
        elif flags["cf"]:
            chunk = {"tnf": tnf, "type": record_type, "id": record_id, "payload": [payload]}
        else:
            records.append(NdefRecord(tnf=tnf, type=record_type, id=record_id, payload=payload))

        if flags["me"]:
            if chunk is not None:
                raise MalformedMessage("message ends inside a chunked record")
            return records

    if chunk is not None:
        raise MalformedMessage("data ends inside a chunked record")
    if records:
        logger.warning(f"NDEF message of {len(records)} record(s) ends without the ME flag")
    return records
