"""
FiveStar Support SDK v1.1.0 (Python)
MIT License
"""

from fivestar_support.client import (
    FiveStarClient,
    FiveStarClientConfig,
    RegisterCustomerOptions,
    SubmitResponseOptions,
)
from fivestar_support.customer_id import (
    CustomerIdGenerator,
    decode_customer_id,
    generate_customer_id,
    is_valid_customer_id_format,
    verify_customer_id,
)
from fivestar_support.errors import (
    EntropyUnavailableError,
    FiveStarAPIError,
    FiveStarError,
    FormatError,
)

__version__ = "1.1.0"

__all__ = [
    "CustomerIdGenerator",
    "EntropyUnavailableError",
    "FiveStarAPIError",
    "FiveStarClient",
    "FiveStarClientConfig",
    "FiveStarError",
    "FormatError",
    "RegisterCustomerOptions",
    "SubmitResponseOptions",
    "decode_customer_id",
    "generate_customer_id",
    "is_valid_customer_id_format",
    "verify_customer_id",
]
