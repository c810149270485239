"""
FiveStar Support SDK v1.1.0
HTTP client for the FiveStar Support API (Python)
MIT License
"""

import logging
from typing import Dict, List, Optional, Type, TypeVar

import requests
from pydantic import ValidationError

from fivestar_support.client.models import (
    DEFAULT_API_URL,
    FiveStarClientConfig,
    GenerateCustomerIdRequest,
    GenerateCustomerIdResult,
    RegisterCustomerOptions,
    RegisterCustomerRequest,
    RegisterCustomerResult,
    ResponseType,
    ResponseTypesResult,
    SubmitResponseOptions,
    SubmitResponseRequest,
    SubmitResponseResult,
    VerifyCustomerRequest,
    VerifyCustomerResult,
    WireModel,
)
from fivestar_support.customer_id import generate_customer_id, is_valid_customer_id_format
from fivestar_support.errors import FiveStarAPIError

logger = logging.getLogger(__name__)

USER_AGENT = "FiveStar Python SDK/1.1.0 (+https://fivestar.support)"

T = TypeVar("T", bound=WireModel)


class FiveStarClient:
    """Client for the FiveStar Support API.

    Customer IDs are normally minted server-side with generate_customer_id();
    generate_local_customer_id() mints one offline with the same client binding
    used by older SDK releases.
    """

    def __init__(self, config: Optional[FiveStarClientConfig] = None, *,
                 client_id: Optional[str] = None, api_url: str = DEFAULT_API_URL,
                 platform: Optional[str] = None, app_version: Optional[str] = None,
                 device_model: Optional[str] = None, os_version: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        if config is None:
            if client_id is None:
                raise ValueError("Either config or client_id is required")
            config = FiveStarClientConfig(
                client_id=client_id,
                api_url=api_url,
                platform=platform,
                app_version=app_version,
                device_model=device_model,
                os_version=os_version,
            )
        self.config = config
        self.client_id = config.client_id
        self.api_url = config.api_url.rstrip('/')
        self.session = session or requests.Session()

    def __enter__(self) -> "FiveStarClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Private helpers

    def _url(self, path: str) -> str:
        return f"{self.api_url}{path}"

    def _headers(self) -> Dict[str, str]:
        """Headers including device information for fingerprinting."""
        headers = {
            'Content-Type': 'application/json',
            'User-Agent': USER_AGENT,
        }
        device = {
            'X-FiveStar-Platform': self.config.platform,
            'X-FiveStar-App-Version': self.config.app_version,
            'X-FiveStar-Device-Model': self.config.device_model,
            'X-FiveStar-OS-Version': self.config.os_version,
        }
        headers.update({k: v for k, v in device.items() if v is not None})
        return headers

    def _request(self, method: str, path: str, as_type: Type[T],
                 body: Optional[WireModel] = None,
                 params: Optional[Dict[str, str]] = None) -> T:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                params=params,
                json=body.to_wire() if body is not None else None,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise FiveStarAPIError(f"HTTP request failed: {e}") from e

        if response.status_code != 200:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            raise FiveStarAPIError(self._error_message(response), response.status_code)

        try:
            return as_type.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise FiveStarAPIError(f"Invalid response from server: {e}", response.status_code) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        fallback = f"HTTP {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return fallback
        if not isinstance(data, dict):
            return fallback
        return data.get('error') or data.get('message') or fallback

    # Public API

    def get_response_types(self) -> List[ResponseType]:
        """All response types configured for this client."""
        result = self._request(
            "GET", "/api/responses/types", ResponseTypesResult,
            params={'clientId': self.client_id},
        )
        return result.types or []

    def generate_customer_id(self) -> GenerateCustomerIdResult:
        """Ask the server to mint a signed customer ID."""
        return self._request(
            "POST", "/api/customers/generate", GenerateCustomerIdResult,
            body=GenerateCustomerIdRequest(client_id=self.client_id),
        )

    def generate_local_customer_id(self) -> str:
        """Mint a customer ID offline, bound to this client's ID."""
        return generate_customer_id(self.client_id)

    def register_customer(self, customer_id: str,
                          options: Optional[RegisterCustomerOptions] = None) -> RegisterCustomerResult:
        """Associate a customer ID with optional customer details."""
        if not is_valid_customer_id_format(customer_id):
            raise FiveStarAPIError(f"Malformed customer ID: {customer_id!r}")
        options = options or RegisterCustomerOptions()
        return self._request(
            "POST", "/api/customers", RegisterCustomerResult,
            body=RegisterCustomerRequest(
                client_id=self.client_id,
                customer_id=customer_id,
                email=options.email,
                name=options.name,
                metadata=options.metadata,
            ),
        )

    def verify_customer(self, customer_id: str) -> VerifyCustomerResult:
        """Check with the server that a customer ID is registered for this client."""
        try:
            return self._request(
                "POST", "/api/customers/verify", VerifyCustomerResult,
                body=VerifyCustomerRequest(client_id=self.client_id, customer_id=customer_id),
            )
        except FiveStarAPIError as e:
            logger.debug("Customer verification failed: %s", e)
            return VerifyCustomerResult(valid=False, message="Verification failed")

    def submit_response(self, options: SubmitResponseOptions) -> SubmitResponseResult:
        """Submit feedback on behalf of a customer."""
        return self._request(
            "POST", "/api/responses", SubmitResponseResult,
            body=SubmitResponseRequest(
                client_id=self.client_id,
                customer_id=options.customer_id,
                title=options.title,
                description=options.description,
                response_type_id=options.type_id,
                customer_email=options.email,
                customer_name=options.name,
                metadata=options.metadata,
            ),
        )

    def get_public_url(self, locale: Optional[str] = None) -> str:
        """Public feedback page for this client."""
        locale_prefix = f"/{locale}" if locale else ""
        return f"{self.api_url}{locale_prefix}/c/{self.client_id}"

    def close(self) -> None:
        self.session.close()
