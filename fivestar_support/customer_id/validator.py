"""
FiveStar Support SDK v1.1.0
Customer ID format validator (Python)
MIT License
"""

from fivestar_support.customer_id.base32 import DECODE_TABLE, ENCODED_LENGTH


def is_valid_customer_id_format(text) -> bool:
    """Syntactic check only: 26 Crockford characters, any case.

    Padding bits and client binding are left to verify_customer_id.
    """
    if not isinstance(text, str) or len(text) != ENCODED_LENGTH:
        return False
    return all(char in DECODE_TABLE for char in text)
