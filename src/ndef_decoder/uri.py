"""
ndef_decoder.uri

Decoder for the NFC Forum well-known URI record ("U") and the query parser
used to list the parameters of a resolved URI.

Functions:
    - decode_uri_payload: Expand the identifier code and return the resolved URI with its parameters
    - parse_query: Split the query part of a URI into ordered (key, value) pairs
"""

import logging
from typing import List, Tuple

from common.models import UriPayload

from .exceptions import TruncatedPayload
from .tables import URI_PREFIXES, is_known_uri_prefix

logger = logging.getLogger(__name__)


def parse_query(uri: str) -> List[Tuple[str, str]]:
    """
    Return the query parameters of `uri` in their original order.

    Duplicate keys are kept as separate pairs. A group without "=" yields an
    empty value. Values are returned as written (no percent-decoding).
    """
    _, sep, query = uri.partition("?")
    if not sep:
        return []
    query = query.partition("#")[0]

    pairs = []
    for group in query.split("&"):
        if not group:
            continue
        key, _, value = group.partition("=")
        pairs.append((key, value))
    return pairs


def decode_uri_payload(payload: bytes) -> UriPayload:
    """
    Decode a URI record payload.

    An identifier code outside the abbreviation table is treated as "no prefix"
    and the suffix is used verbatim.

    Raises:
        TruncatedPayload: if the identifier code byte is missing.
    """
    if not payload:
        raise TruncatedPayload("URI record has no identifier code", needed=1, available=0)

    code = payload[0]
    suffix = bytes(payload[1:]).decode("utf-8", errors="replace")

    if is_known_uri_prefix(code):
        resolved = URI_PREFIXES[code] + suffix
    else:
        logger.warning(f"Unknown URI identifier code 0x{code:02X}; using suffix without prefix")
        resolved = suffix

    return UriPayload(resolved_uri=resolved, params=parse_query(resolved), prefix_code=code)
