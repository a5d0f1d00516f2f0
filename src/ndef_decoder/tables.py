"""
ndef_decoder.tables

Static lookup tables used by the NDEF decoders. All tables are built once at
import time and are read-only afterwards.

Tables:
    - TNF_VALUES: TnfKind name -> 3-bit TNF value
    - RTD_TYPES: RtdKind name -> well-known type bytes
    - URI_PREFIXES: URI identifier code -> abbreviated prefix
    - Wi-Fi Simple Config MIME type and TLV attribute IDs
"""

from types import MappingProxyType

from common.models import RtdKind, TnfKind

TNF_VALUES = MappingProxyType({kind.name: int(kind) for kind in TnfKind})

RTD_TYPES = MappingProxyType({kind.name: kind.value.encode("ascii") for kind in RtdKind})

# NFC Forum URI RTD, table 3. Index is the identifier code.
URI_PREFIXES = (
    "",
    "http://www.",
    "https://www.",
    "http://",
    "https://",
    "tel:",
    "mailto:",
    "ftp://anonymous:anonymous@",
    "ftp://ftp.",
    "ftps://",
    "sftp://",
    "smb://",
    "nfs://",
    "ftp://",
    "dav://",
    "news:",
    "telnet://",
    "imap:",
    "rtsp://",
    "urn:",
    "pop:",
    "sip:",
    "sips:",
    "tftp:",
    "btspp://",
    "btl2cap://",
    "btgoep://",
    "tcpobex://",
    "irdaobex://",
    "file://",
    "urn:epc:id:",
    "urn:epc:tag:",
    "urn:epc:pat:",
    "urn:epc:raw:",
    "urn:epc:",
    "urn:nfc:",
)

# ── Wi-Fi Simple Config ──────────────────────────────────────────────────────
MIME_WFA_WSC = "application/vnd.wfa.wsc"

WSC_CREDENTIAL = 0x100E
WSC_SSID = 0x1045
WSC_NETWORK_KEY = 0x1027
WSC_AUTHENTICATION_TYPE = 0x1003
WSC_ENCRYPTION_TYPE = 0x100F


def is_known_uri_prefix(code: int) -> bool:
    """Return True if `code` indexes the URI abbreviation table."""
    return 0 <= code < len(URI_PREFIXES)
