"""
FiveStar Support SDK v1.1.0
Customer ID verifier and decoder (Python)
MIT License
"""

from typing import Optional

from fivestar_support.customer_id import base32
from fivestar_support.customer_id.keys import derive_key
from fivestar_support.customer_id.payload import Payload, mask
from fivestar_support.errors import FormatError


def unmask_customer_id(token: str, client_id: str) -> Optional[Payload]:
    """Recover the payload behind `token`, or None if it does not belong to `client_id`.

    Malformed text, a foreign client and a corrupted token all give None.
    """
    if not isinstance(client_id, str):
        return None
    try:
        raw = base32.decode(token)
    except FormatError:
        return None

    payload = Payload.unpack(mask(raw, derive_key(client_id)))
    if not payload.is_intact():
        return None
    return payload


def verify_customer_id(token: str, client_id: str) -> bool:
    return unmask_customer_id(token, client_id) is not None


def decode_customer_id(token: str, client_id: str) -> Optional[str]:
    """Canonical unmasked form of a customer id, for logs and diagnostics."""
    payload = unmask_customer_id(token, client_id)
    if payload is None:
        return None
    return base32.encode(payload.pack())
