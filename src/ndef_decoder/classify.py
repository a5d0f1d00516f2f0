"""
ndef_decoder.classify

Maps raw TNF values and well-known type fields to their canonical kinds.

Both lookups return None on a miss. A miss is not an error: callers treat it
as an unsupported record.
"""

from typing import Optional

from common.models import RtdKind, TnfKind

from .tables import RTD_TYPES

_TNF_BY_VALUE = {int(kind): kind for kind in TnfKind}
_RTD_BY_TYPE = {type_bytes: RtdKind[name] for name, type_bytes in RTD_TYPES.items()}


def classify_tnf(tnf: int) -> Optional[TnfKind]:
    """
    Return the TnfKind for a TNF value, or None for values outside 0x00-0x07.
    """
    return _TNF_BY_VALUE.get(tnf)


def classify_rtd(type_bytes: bytes) -> Optional[RtdKind]:
    """
    Return the RtdKind whose type field equals `type_bytes` exactly, or None.

    Only meaningful for records with TNF WELL_KNOWN.
    """
    return _RTD_BY_TYPE.get(bytes(type_bytes))
