"""
FiveStar Support SDK v1.1.0
Test for FiveStar API client (Python)
MIT License
"""

from unittest.mock import MagicMock

import pytest
import requests

from fivestar_support.client import (
    FiveStarAPIError,
    FiveStarClient,
    FiveStarClientConfig,
    RegisterCustomerOptions,
    SubmitResponseOptions,
)
from fivestar_support.customer_id import verify_customer_id

CUSTOMER_ID = "0123456789ABCDEFGHJKMNPQRS"


def make_response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body if body is not None else {}
    return response


def make_client(response=None, **kwargs):
    session = MagicMock()
    session.request.return_value = response or make_response()
    return FiveStarClient(client_id="test-client", session=session, **kwargs), session


def sent_json(session):
    return session.request.call_args.kwargs["json"]


# Public URL

def test_client_initialization_with_config():
    client = FiveStarClient(FiveStarClientConfig(client_id="test-client"))
    assert client.get_public_url() == "https://fivestar.support/c/test-client"


def test_client_initialization_with_parameters():
    client = FiveStarClient(client_id="test-client")
    assert client.get_public_url() == "https://fivestar.support/c/test-client"


def test_client_with_custom_api_url():
    client = FiveStarClient(client_id="test-client", api_url="https://custom.example.com/")
    assert client.get_public_url() == "https://custom.example.com/c/test-client"


def test_get_public_url_with_locale():
    client = FiveStarClient(client_id="test-client")
    assert client.get_public_url("fr") == "https://fivestar.support/fr/c/test-client"
    assert client.get_public_url("de") == "https://fivestar.support/de/c/test-client"


def test_get_public_url_without_locale():
    client = FiveStarClient(client_id="test-client")
    assert client.get_public_url(None) == "https://fivestar.support/c/test-client"
    assert client.get_public_url("") == "https://fivestar.support/c/test-client"


def test_client_requires_client_id():
    with pytest.raises(ValueError):
        FiveStarClient()


# Requests

def test_headers_include_device_information():
    client, session = make_client(
        make_response(body={"types": []}), platform="android", os_version="14"
    )
    client.get_response_types()
    headers = session.request.call_args.kwargs["headers"]
    assert headers["Content-Type"] == "application/json"
    assert headers["X-FiveStar-Platform"] == "android"
    assert headers["X-FiveStar-OS-Version"] == "14"
    assert "X-FiveStar-App-Version" not in headers
    assert "X-FiveStar-Device-Model" not in headers


def test_get_response_types():
    body = {"types": [{"id": "1", "name": "Bug", "slug": "bug", "color": "#f00", "icon": "bug"}]}
    client, session = make_client(make_response(body=body))
    types = client.get_response_types()
    assert [t.slug for t in types] == ["bug"]
    args = session.request.call_args
    assert args.args == ("GET", "https://fivestar.support/api/responses/types")
    assert args.kwargs["params"] == {"clientId": "test-client"}


def test_get_response_types_missing_list():
    client, _ = make_client(make_response(body={}))
    assert client.get_response_types() == []


def test_generate_customer_id_from_server():
    body = {"customerId": CUSTOMER_ID, "expiresAt": "2026-01-01T00:00:00Z", "deviceId": "dev-1"}
    client, session = make_client(make_response(body=body))
    result = client.generate_customer_id()
    assert result.customer_id == CUSTOMER_ID
    assert result.device_id == "dev-1"
    assert sent_json(session) == {"clientId": "test-client"}
    assert session.request.call_args.args[1].endswith("/api/customers/generate")


def test_generate_local_customer_id():
    client, session = make_client()
    customer_id = client.generate_local_customer_id()
    assert verify_customer_id(customer_id, "test-client")
    session.request.assert_not_called()


def test_register_customer_omits_absent_fields():
    body = {"success": True, "customer": {"id": "c1", "customerId": CUSTOMER_ID, "email": "a@b.co"}}
    client, session = make_client(make_response(body=body))
    result = client.register_customer(CUSTOMER_ID, RegisterCustomerOptions(email="a@b.co"))
    assert result.success
    assert result.customer.customer_id == CUSTOMER_ID
    assert sent_json(session) == {
        "clientId": "test-client",
        "customerId": CUSTOMER_ID,
        "email": "a@b.co",
    }


def test_register_customer_rejects_malformed_id():
    client, session = make_client()
    with pytest.raises(FiveStarAPIError):
        client.register_customer("not-a-customer-id")
    session.request.assert_not_called()


def test_verify_customer():
    client, session = make_client(make_response(body={"valid": True}))
    assert client.verify_customer(CUSTOMER_ID).valid
    assert sent_json(session) == {"clientId": "test-client", "customerId": CUSTOMER_ID}


def test_verify_customer_failure_is_not_raised():
    client, _ = make_client(make_response(status_code=404, body={"error": "Not found"}))
    result = client.verify_customer(CUSTOMER_ID)
    assert not result.valid
    assert result.message == "Verification failed"


def test_submit_response():
    client, session = make_client(make_response(body={"success": True, "responseId": "r1"}))
    result = client.submit_response(SubmitResponseOptions(
        customer_id=CUSTOMER_ID,
        title="Crash",
        description="App crashes on start",
        type_id="bug",
        name="Ada",
    ))
    assert result.response_id == "r1"
    assert sent_json(session) == {
        "clientId": "test-client",
        "customerId": CUSTOMER_ID,
        "title": "Crash",
        "description": "App crashes on start",
        "responseTypeId": "bug",
        "customerName": "Ada",
    }


# Errors

def test_error_message_from_body():
    client, _ = make_client(make_response(status_code=400, body={"error": "Bad client"}))
    with pytest.raises(FiveStarAPIError) as excinfo:
        client.generate_customer_id()
    assert excinfo.value.message == "Bad client"
    assert excinfo.value.status_code == 400


def test_error_message_fallback():
    client, _ = make_client(make_response(status_code=500, body=ValueError("not json")))
    with pytest.raises(FiveStarAPIError) as excinfo:
        client.generate_customer_id()
    assert excinfo.value.message == "HTTP 500"


def test_transport_error():
    client, session = make_client()
    session.request.side_effect = requests.exceptions.ConnectionError("refused")
    with pytest.raises(FiveStarAPIError) as excinfo:
        client.get_response_types()
    assert excinfo.value.status_code is None


def test_invalid_response_body():
    client, _ = make_client(make_response(body={"success": True}))
    with pytest.raises(FiveStarAPIError):
        client.submit_response(SubmitResponseOptions(
            customer_id=CUSTOMER_ID, title="t", description="d", type_id="bug",
        ))


def test_context_manager_closes_session():
    client, session = make_client()
    with client:
        pass
    session.close.assert_called_once()
