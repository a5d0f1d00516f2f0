"""
ndef_decoder.text

Decoder for the NFC Forum well-known Text record ("T").

Payload layout:
    byte 0       status: bit 7 = encoding (0 UTF-8, 1 UTF-16), bits 5..0 = language code length L
    bytes 1..L   IANA language code (ASCII)
    bytes L+1..  text in the selected encoding
"""

from common.models import TextPayload

from .exceptions import TruncatedPayload

_UTF16_FLAG = 0x80
_LANG_LENGTH_MASK = 0x3F


def _decode_utf16(octets: bytes) -> str:
    # A BOM selects the byte order, otherwise the record is big-endian.
    if octets[:2] in (b"\xff\xfe", b"\xfe\xff"):
        return octets.decode("utf-16", errors="replace")
    return octets.decode("utf-16-be", errors="replace")


def decode_text_payload(payload: bytes) -> TextPayload:
    """
    Decode a Text record payload into its language code and text.

    Raises:
        TruncatedPayload: if the status byte is missing or the language code
            length runs past the end of the payload.
    """
    if not payload:
        raise TruncatedPayload("text record has no status byte", needed=1, available=0)

    status = payload[0]
    lang_length = status & _LANG_LENGTH_MASK
    if 1 + lang_length > len(payload):
        raise TruncatedPayload(
            f"text record declares a {lang_length} byte language code "
            f"but only {len(payload) - 1} bytes follow the status byte",
            needed=1 + lang_length,
            available=len(payload),
        )

    language_code = payload[1 : 1 + lang_length].decode("ascii", errors="replace")
    body = bytes(payload[1 + lang_length :])

    if status & _UTF16_FLAG:
        return TextPayload(language_code=language_code, text=_decode_utf16(body), encoding="utf-16")
    return TextPayload(
        language_code=language_code, text=body.decode("utf-8", errors="replace"), encoding="utf-8"
    )
