"""
FiveStar Support SDK v1.1.0
API client (Python)
MIT License
"""

from fivestar_support.client.client import FiveStarClient
from fivestar_support.client.models import (
    CustomerInfo,
    FiveStarClientConfig,
    GenerateCustomerIdResult,
    RegisterCustomerOptions,
    RegisterCustomerResult,
    ResponseType,
    SubmitResponseOptions,
    SubmitResponseResult,
    VerifyCustomerResult,
)
from fivestar_support.errors import FiveStarAPIError

__all__ = [
    "CustomerInfo",
    "FiveStarAPIError",
    "FiveStarClient",
    "FiveStarClientConfig",
    "GenerateCustomerIdResult",
    "RegisterCustomerOptions",
    "RegisterCustomerResult",
    "ResponseType",
    "SubmitResponseOptions",
    "SubmitResponseResult",
    "VerifyCustomerResult",
]
