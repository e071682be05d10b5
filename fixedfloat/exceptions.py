"""
Exceptions raised by the FixedFloat client.

Transport failures (httpx errors, undecodable response bodies) are not
wrapped: they reach the caller as raised by httpx / json.
"""

from typing import Any


class FixedFloatError(Exception):
    """Base error for everything the client itself raises."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(FixedFloatError, ValueError):
    """Client constructed without an API key or secret."""

    def __init__(self, message: str = "Please provide an API and secret keys"):
        super().__init__(message)


class PreconditionError(FixedFloatError, ValueError):
    """Request issued without an endpoint path."""

    def __init__(self, message: str = "Required params: path"):
        super().__init__(message)


class FixedFloatAPIError(FixedFloatError):
    """The API answered, but the envelope did not report success."""

    def __init__(self, code: Any, msg: Any):
        self.code = code
        self.msg = msg
        super().__init__(f"Error {code}: {msg}")
