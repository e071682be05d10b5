"""
Shared test fixtures for the FixedFloat client tests.

Provides reusable fixtures for:
- Recording mock transports (httpx.MockTransport)
- FixedFloatClient instances wired to those transports
- Mocked httpx.AsyncClient for patch-based tests
"""

import json

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from fixedfloat import FixedFloatClient


TEST_API_KEY = "test-api-key"
TEST_API_SECRET = "test-api-secret"


# ---------------------------------------------------------------------------
# Mock transports / client
# ---------------------------------------------------------------------------


@pytest.fixture
def make_transport():
    """Build a MockTransport that answers with `payload` and records every request.

    Returns (transport, requests). `payload` may be a dict (sent as JSON) or
    a str (sent as the raw body).
    """
    def _make(payload, status_code=200):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if isinstance(payload, str):
                return httpx.Response(status_code, text=payload)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler), requests

    return _make


@pytest.fixture
def make_client(make_transport):
    """Build a FixedFloatClient wired to a recording MockTransport.

    Returns (client, requests).
    """
    def _make(payload, status_code=200, **kwargs):
        transport, requests = make_transport(payload, status_code)
        client = FixedFloatClient(TEST_API_KEY, TEST_API_SECRET, transport=transport, **kwargs)
        return client, requests

    return _make


@pytest.fixture
def mock_http_client():
    """Create a mocked httpx.AsyncClient usable as an async context manager."""
    def _make(json_body=None, side_effect=None):
        mock_response = MagicMock()
        mock_response.status_code = 200
        if side_effect is not None:
            mock_response.json.side_effect = side_effect
        else:
            mock_response.json.return_value = json_body
        mock_response.text = json.dumps(json_body) if json_body is not None else ""

        mock_client = AsyncMock()
        mock_client.post.return_value = mock_response
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)
        return mock_client

    return _make
