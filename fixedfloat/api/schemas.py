"""
Request models for the FixedFloat API

One model per endpoint that takes arguments. Attribute names are snake_case,
wire names (aliases) are the API's camelCase. Field order is the order the
fields appear in the JSON body.

Enumerated fields (direction, type, choice) are plain strings: values outside
the documented set are passed through and rejected by the API, not here.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from fixedfloat.constants import Direction, EmergencyChoice, OrderType

Amount = Union[int, float, str]
# The API documents tag/address as strings, but an unset value goes over the
# wire as boolean false.
OptionalText = Union[str, bool, None]


def _enum_value(v):
    if isinstance(v, Enum):
        return v.value
    return v


class PriceRequest(BaseModel):
    from_ccy: str = Field(alias="fromCcy")
    to_ccy: str = Field(alias="toCcy")
    amount: Amount
    direction: str = Direction.FROM.value
    type: str = OrderType.FLOAT.value

    class Config:
        populate_by_name = True

    @field_validator("direction", "type", mode="before")
    @classmethod
    def unwrap_enum(cls, v):
        return _enum_value(v)


class CreateOrderRequest(BaseModel):
    from_ccy: str = Field(alias="fromCcy")
    to_ccy: str = Field(alias="toCcy")
    to_address: str = Field(alias="toAddress")
    amount: Amount
    tag: OptionalText = False
    direction: str = Direction.FROM.value
    type: str = OrderType.FLOAT.value

    class Config:
        populate_by_name = True

    @field_validator("direction", "type", mode="before")
    @classmethod
    def unwrap_enum(cls, v):
        return _enum_value(v)


class OrderRequest(BaseModel):
    """Identifies an existing order: used by the `order` and `qr` endpoints."""

    id: str
    token: str


class QRCodeRequest(OrderRequest):
    pass


class EmergencyRequest(BaseModel):
    id: str
    token: str
    choice: str = EmergencyChoice.EXCHANGE.value
    address: OptionalText = False  # required by the API when choice is REFUND
    tag: OptionalText = False

    @field_validator("choice", mode="before")
    @classmethod
    def unwrap_enum(cls, v):
        return _enum_value(v)


def encode_payload(payload: Optional[BaseModel]) -> str:
    """
    Serialize a request model to the exact body string that gets signed and sent

    Compact JSON (no whitespace) using the wire field names. A missing
    payload encodes to the empty string.
    """
    if payload is None:
        return ""
    return payload.model_dump_json(by_alias=True)
