"""Async client for the FixedFloat exchange API"""

from .api.auth import generate_signature
from .client import FixedFloatClient
from .constants import Direction, EmergencyChoice, OrderType
from .exceptions import (
    ConfigurationError,
    FixedFloatAPIError,
    FixedFloatError,
    PreconditionError,
)

__all__ = [
    "FixedFloatClient",
    "generate_signature",
    # Option values
    "Direction",
    "OrderType",
    "EmergencyChoice",
    # Exceptions
    "FixedFloatError",
    "ConfigurationError",
    "PreconditionError",
    "FixedFloatAPIError",
]
