"""
FiveStar Support SDK v1.1.0
Client masking key derivation (Python)
MIT License
"""

import nacl.encoding
import nacl.hash

KEY_SIZE = 16

# BLAKE2b personalisation; keeps these keys apart from any other blake2b use.
DOMAIN = b"fivestar-cid-v1\x00"


def derive_key(client_id: str) -> bytes:
    """128-bit masking key for a client id. Same id, same key."""
    if not isinstance(client_id, str):
        raise TypeError(f"client_id must be str, not {type(client_id).__name__}")
    return nacl.hash.blake2b(
        client_id.encode("utf-8", "surrogatepass"),
        digest_size=KEY_SIZE,
        person=DOMAIN,
        encoder=nacl.encoding.RawEncoder,
    )
