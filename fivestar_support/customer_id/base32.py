"""
FiveStar Support SDK v1.1.0
Crockford Base32 codec for 128-bit values (Python)
MIT License
"""

from fivestar_support.errors import FormatError

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ENCODED_LENGTH = 26
RAW_LENGTH = 16

# 26 characters carry 130 bits; the two lowest bits of the last one are padding.
_PADDING_BITS = ENCODED_LENGTH * 5 - RAW_LENGTH * 8
_PADDING_MASK = (1 << _PADDING_BITS) - 1

DECODE_TABLE = {char: index for index, char in enumerate(ALPHABET)}
DECODE_TABLE.update({char.lower(): index for char, index in list(DECODE_TABLE.items())})


def encode(data: bytes) -> str:
    """Encode 16 bytes as 26 upper-case characters, most significant bit first."""
    if len(data) != RAW_LENGTH:
        raise ValueError(f"Expected {RAW_LENGTH} bytes, got {len(data)}")

    number = int.from_bytes(data, byteorder="big") << _PADDING_BITS
    chars = []
    for _ in range(ENCODED_LENGTH):
        number, remainder = divmod(number, 32)
        chars.append(ALPHABET[remainder])
    return "".join(reversed(chars))


def decode(text: str) -> bytes:
    """Decode 26 case-insensitive characters back to 16 bytes.

    Raises FormatError on a wrong length, a character outside the alphabet
    or non-zero padding bits.
    """
    if not isinstance(text, str):
        raise FormatError(f"Expected str, got {type(text).__name__}")
    if len(text) != ENCODED_LENGTH:
        raise FormatError(f"Expected {ENCODED_LENGTH} characters, got {len(text)}")

    number = 0
    for char in text:
        value = DECODE_TABLE.get(char)
        if value is None:
            raise FormatError(f"Invalid character: {char!r}")
        number = (number << 5) | value

    if number & _PADDING_MASK:
        raise FormatError("Non-zero padding bits")
    return (number >> _PADDING_BITS).to_bytes(RAW_LENGTH, byteorder="big")
