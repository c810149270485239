"""
FiveStar Support SDK v1.1.0
Customer ID payload layout (Python)
MIT License

    48-bit timestamp (ms) | 72-bit entropy | 8-bit integrity tag
"""

import hmac
from dataclasses import dataclass

import nacl.encoding
import nacl.hash

PAYLOAD_SIZE = 16
TIMESTAMP_SIZE = 6
ENTROPY_SIZE = 9
BODY_SIZE = TIMESTAMP_SIZE + ENTROPY_SIZE

TAG_DOMAIN = b"fivestar-tag-v1\x00"


def integrity_tag(body: bytes) -> int:
    """First byte of a personalised BLAKE2b digest of the 15-byte body.

    The tag is non-linear, so a token unmasked with the wrong client key
    passes with probability 1/256 per token, not for a whole client pair.
    """
    digest = nacl.hash.blake2b(
        bytes(body),
        digest_size=16,
        person=TAG_DOMAIN,
        encoder=nacl.encoding.RawEncoder,
    )
    return digest[0]


def mask(data: bytes, key: bytes) -> bytes:
    """XOR two equal length byte strings. Applying it twice is a no-op."""
    if len(data) != len(key):
        raise ValueError("data and key must be the same length")
    return bytes(a ^ b for a, b in zip(data, key))


@dataclass(frozen=True)
class Payload:
    timestamp_ms: int
    entropy: bytes
    tag: int

    @classmethod
    def build(cls, timestamp_ms: int, entropy: bytes) -> "Payload":
        if len(entropy) != ENTROPY_SIZE:
            raise ValueError(f"entropy must be {ENTROPY_SIZE} bytes")
        body = timestamp_ms.to_bytes(TIMESTAMP_SIZE, byteorder="big") + entropy
        return cls(timestamp_ms, bytes(entropy), integrity_tag(body))

    @classmethod
    def unpack(cls, data: bytes) -> "Payload":
        if len(data) != PAYLOAD_SIZE:
            raise ValueError(f"payload must be {PAYLOAD_SIZE} bytes")
        return cls(
            timestamp_ms=int.from_bytes(data[:TIMESTAMP_SIZE], byteorder="big"),
            entropy=bytes(data[TIMESTAMP_SIZE:BODY_SIZE]),
            tag=data[BODY_SIZE],
        )

    def body(self) -> bytes:
        return self.timestamp_ms.to_bytes(TIMESTAMP_SIZE, byteorder="big") + self.entropy

    def pack(self) -> bytes:
        return self.body() + bytes([self.tag])

    def is_intact(self) -> bool:
        """Recompute the tag and compare in constant time."""
        return hmac.compare_digest(bytes([integrity_tag(self.body())]), bytes([self.tag]))
