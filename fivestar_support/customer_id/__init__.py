"""
FiveStar Support SDK v1.1.0
Customer ID scheme (Python)
MIT License

Offline, client-bound customer identifiers: 26 Crockford Base32 characters
holding a timestamp, 72 random bits and an 8-bit tag, XOR-masked with a key
derived from the client id.
"""

from fivestar_support.customer_id.base32 import ALPHABET
from fivestar_support.customer_id.generator import CustomerIdGenerator, generate_customer_id
from fivestar_support.customer_id.keys import derive_key
from fivestar_support.customer_id.payload import Payload
from fivestar_support.customer_id.validator import is_valid_customer_id_format
from fivestar_support.customer_id.verifier import (
    decode_customer_id,
    unmask_customer_id,
    verify_customer_id,
)
from fivestar_support.errors import EntropyUnavailableError, FormatError

__all__ = [
    "ALPHABET",
    "CustomerIdGenerator",
    "EntropyUnavailableError",
    "FormatError",
    "Payload",
    "decode_customer_id",
    "derive_key",
    "generate_customer_id",
    "is_valid_customer_id_format",
    "unmask_customer_id",
    "verify_customer_id",
]
