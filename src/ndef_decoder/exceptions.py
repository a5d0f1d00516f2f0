"""
ndef_decoder.exceptions

Exceptions raised by the NDEF decoders.

Only failures that abort a record (or a whole raw message) are exceptions.
A classification miss and an unknown URI prefix code are not raised: the first
degrades to an unsupported payload, the second to the no-prefix fallback.
"""


class NdefDecodeError(Exception):
    """Base class for NDEF decode failures."""


class TruncatedPayload(NdefDecodeError):
    """A declared or implied length runs past the end of a record payload."""

    def __init__(self, message: str, needed: int | None = None, available: int | None = None):
        super().__init__(message)
        self.needed = needed
        self.available = available


class MalformedMessage(NdefDecodeError):
    """A raw NDEF message could not be split into records."""
