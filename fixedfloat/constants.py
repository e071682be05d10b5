"""
FixedFloat API Constants

Base URL, endpoint paths and the enumerated option values the API accepts.
"""

from enum import Enum

BASE_URL = "https://ff.io/api/v2/"

# Endpoint paths, relative to BASE_URL
CURRENCIES_ENDPOINT = "ccies"
PRICE_ENDPOINT = "price"
CREATE_ORDER_ENDPOINT = "create"
ORDER_ENDPOINT = "order"
EMERGENCY_ENDPOINT = "emergency"
QR_CODES_ENDPOINT = "qr"

# Envelope values that mark a successful response
SUCCESS_CODE = 0
SUCCESS_MSG = "OK"


class Direction(str, Enum):
    """Which side of the exchange `amount` refers to."""

    FROM = "from"  # amount is what the client sends, in fromCcy
    TO = "to"  # amount is what the client receives, in toCcy


class OrderType(str, Enum):
    """Rate type of an order."""

    FIXED = "fixed"
    FLOAT = "float"


class EmergencyChoice(str, Enum):
    """Action to take for an order in EMERGENCY status."""

    EXCHANGE = "EXCHANGE"  # continue at the market rate
    REFUND = "REFUND"  # refund minus miner fee
