"""
ndef_decoder.mime

Passthrough decoder for MIME media records of a text/* type.
"""

from common.models import MimeTextPayload


def mime_type_from_bytes(type_bytes: bytes) -> str:
    """Render a MIME record type field as a string, one character per byte."""
    return bytes(type_bytes).decode("latin-1")


def decode_mime_text_payload(mime_type: str, payload: bytes) -> MimeTextPayload:
    """Return the payload as UTF-8 text; invalid sequences become U+FFFD."""
    text = bytes(payload).decode("utf-8", errors="replace")
    return MimeTextPayload(mime_type=mime_type, text=text)
