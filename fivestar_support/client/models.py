"""
FiveStar Support SDK v1.1.0
API models (Python)
MIT License
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_URL = "https://fivestar.support"


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python; unknown keys ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class FiveStarClientConfig(BaseModel):
    """Configuration for the FiveStar Support client"""
    client_id: str
    api_url: str = DEFAULT_API_URL
    platform: Optional[str] = None
    app_version: Optional[str] = None
    device_model: Optional[str] = None
    os_version: Optional[str] = None
    timeout: float = 10.0


class ResponseType(WireModel):
    """Response type (bug, feature request, etc.)"""
    id: str
    name: str
    slug: str
    color: str
    icon: str


class ResponseTypesResult(WireModel):
    types: Optional[List[ResponseType]] = None


class GenerateCustomerIdResult(WireModel):
    customer_id: str = Field(alias="customerId")
    expires_at: str = Field(alias="expiresAt")
    device_id: str = Field(alias="deviceId")


class SubmitResponseOptions(WireModel):
    customer_id: str = Field(alias="customerId")
    title: str
    description: str
    type_id: str = Field(alias="typeId")
    email: Optional[str] = None
    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class SubmitResponseResult(WireModel):
    success: bool
    response_id: str = Field(alias="responseId")
    message: Optional[str] = None


class RegisterCustomerOptions(WireModel):
    email: Optional[str] = None
    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CustomerInfo(WireModel):
    id: str
    customer_id: str = Field(alias="customerId")
    email: Optional[str] = None
    name: Optional[str] = None


class RegisterCustomerResult(WireModel):
    success: bool
    customer: Optional[CustomerInfo] = None
    message: Optional[str] = None


class VerifyCustomerResult(WireModel):
    valid: bool
    message: Optional[str] = None


# Request bodies

class GenerateCustomerIdRequest(WireModel):
    client_id: str = Field(alias="clientId")


class RegisterCustomerRequest(WireModel):
    client_id: str = Field(alias="clientId")
    customer_id: str = Field(alias="customerId")
    email: Optional[str] = None
    name: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class VerifyCustomerRequest(WireModel):
    client_id: str = Field(alias="clientId")
    customer_id: str = Field(alias="customerId")


class SubmitResponseRequest(WireModel):
    client_id: str = Field(alias="clientId")
    customer_id: str = Field(alias="customerId")
    title: str
    description: str
    response_type_id: str = Field(alias="responseTypeId")
    customer_email: Optional[str] = Field(default=None, alias="customerEmail")
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    metadata: Optional[Dict[str, Any]] = None
