"""
ndef_decoder.wifi

Decoder for Wi-Fi Simple Config payloads (MIME type application/vnd.wfa.wsc).

The payload is a stream of TLV attributes, each a 2-byte big-endian type, a
2-byte big-endian length and `length` value bytes. Network credentials live in
a Credential attribute whose value is itself a TLV stream.
"""

from typing import Iterator, Tuple

from common.models import WifiCredentialsPayload

from .exceptions import TruncatedPayload
from .tables import (
    WSC_AUTHENTICATION_TYPE,
    WSC_CREDENTIAL,
    WSC_ENCRYPTION_TYPE,
    WSC_NETWORK_KEY,
    WSC_SSID,
)

TLV_HEADER_SIZE = 4


def iter_tlv(octets: bytes) -> Iterator[Tuple[int, bytes]]:
    """
    Yield (type, value) for each attribute of a TLV stream.

    Raises:
        TruncatedPayload: if a header or a declared value runs past the end of `octets`.
    """
    offset = 0
    end = len(octets)
    while offset < end:
        if offset + TLV_HEADER_SIZE > end:
            raise TruncatedPayload(
                f"TLV header at offset {offset} needs {TLV_HEADER_SIZE} bytes, "
                f"{end - offset} left",
                needed=TLV_HEADER_SIZE,
                available=end - offset,
            )
        tlv_type = int.from_bytes(octets[offset : offset + 2], byteorder="big")
        length = int.from_bytes(octets[offset + 2 : offset + 4], byteorder="big")
        offset += TLV_HEADER_SIZE
        if offset + length > end:
            raise TruncatedPayload(
                f"TLV 0x{tlv_type:04X} declares {length} bytes, {end - offset} left",
                needed=length,
                available=end - offset,
            )
        yield tlv_type, bytes(octets[offset : offset + length])
        offset += length


def decode_wifi_simple_payload(payload: bytes) -> WifiCredentialsPayload:
    """
    Extract SSID and network key from the Credential attribute of a Wi-Fi
    Simple Config payload. Missing attributes are returned as None.

    Unknown attributes are skipped at both levels. If the payload carries more
    than one Credential, values from the last one win.

    Raises:
        TruncatedPayload: if any declared length overruns its enclosing buffer.
    """
    fields = {}
    for tlv_type, value in iter_tlv(payload):
        if tlv_type != WSC_CREDENTIAL:
            continue
        fields = {}
        for sub_type, sub_value in iter_tlv(value):
            if sub_type == WSC_SSID:
                fields["ssid"] = sub_value.decode("utf-8", errors="replace")
            elif sub_type == WSC_NETWORK_KEY:
                fields["network_key"] = sub_value.decode("utf-8", errors="replace")
            elif sub_type == WSC_AUTHENTICATION_TYPE:
                fields["authentication_type"] = int.from_bytes(sub_value, byteorder="big")
            elif sub_type == WSC_ENCRYPTION_TYPE:
                fields["encryption_type"] = int.from_bytes(sub_value, byteorder="big")

    return WifiCredentialsPayload(**fields)
