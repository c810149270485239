"""
FiveStar Support SDK v1.1.0
Entropy and timestamp sources (Python)
MIT License
"""

import time
from typing import Callable

import nacl.utils

from fivestar_support.errors import EntropyUnavailableError

RandomSource = Callable[[int], bytes]
Clock = Callable[[], int]

TIMESTAMP_BITS = 48
_TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1

# libsodium randombytes_buf; thread-safe
default_random_source: RandomSource = nacl.utils.random


def system_clock() -> int:
    """Milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def timestamp_ms(clock: Clock) -> int:
    now = int(clock())
    if now < 0:
        raise ValueError(f"Clock returned a negative timestamp: {now}")
    return now & _TIMESTAMP_MASK


def draw(source: RandomSource, size: int) -> bytes:
    """Read exactly `size` bytes from a secure random source."""
    try:
        data = source(size)
    except Exception as e:
        raise EntropyUnavailableError(f"Random source failed: {e}") from e

    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        raise EntropyUnavailableError(f"Random source did not return {size} bytes")
    return bytes(data)
