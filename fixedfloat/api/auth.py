"""
Authentication utilities for the FixedFloat API
Signs request bodies with HMAC-SHA256 and performs the signed POST
"""

import hashlib
import hmac
import json
import logging
from typing import Any, Dict, Optional

import httpx

from fixedfloat.constants import SUCCESS_CODE, SUCCESS_MSG
from fixedfloat.exceptions import FixedFloatAPIError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json; charset=UTF-8"


def generate_signature(api_secret: str, body: str = "") -> str:
    """
    Generate HMAC-SHA256 signature for a request body

    Args:
        api_secret: API secret, used as the HMAC key
        body: Raw request body exactly as it will be sent (empty for no-argument endpoints)

    Returns:
        HMAC signature hex string
    """
    return hmac.new(api_secret.encode("utf-8"), body.encode("utf-8"), hashlib.sha256).hexdigest()


def build_headers(api_key: str, signature: str) -> Dict[str, str]:
    return {
        "Content-Type": CONTENT_TYPE,
        "X-API-KEY": api_key,
        "X-API-SIGN": signature,
    }


def unwrap_response(resp: Any) -> Any:
    """Check the response envelope and return its data field.

    Success requires both code == 0 and msg == "OK".
    """
    if not isinstance(resp, dict):
        raise FixedFloatAPIError(None, None)

    code = resp.get("code")
    msg = resp.get("msg")
    # bool is an int subclass; a literal false is not a success code
    if isinstance(code, bool) or code != SUCCESS_CODE or msg != SUCCESS_MSG:
        raise FixedFloatAPIError(code, msg)

    return resp.get("data")


async def signed_request(
    url: str,
    api_key: str,
    api_secret: str,
    body: str = "",
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """
    Make a signed POST request to the FixedFloat API

    One attempt only: transport errors and undecodable bodies are logged and
    re-raised unchanged.

    Args:
        url: Full endpoint URL
        api_key: API key, sent in X-API-KEY
        api_secret: API secret, used to sign the body
        body: JSON body string (sent as-is, even when empty)
        timeout: Request timeout in seconds
        transport: Optional httpx transport (e.g. httpx.MockTransport)

    Returns:
        The data field of a successful response
    """
    headers = build_headers(api_key, generate_signature(api_secret, body))
    logger.debug(f"POST {url} ({len(body)} byte body)")

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        try:
            response = await client.post(url, headers=headers, content=body.encode("utf-8"))
        except httpx.HTTPError as e:
            logger.error(f"❌ FixedFloat request failed on POST {url}: {e!r}")
            raise

    try:
        resp = response.json()
    except json.JSONDecodeError:
        logger.error(
            f"❌ FixedFloat returned a non-JSON body on POST {url} "
            f"(HTTP {response.status_code}): {response.text[:200]}"
        )
        raise

    try:
        return unwrap_response(resp)
    except FixedFloatAPIError as e:
        logger.warning(f"⚠️  FixedFloat API error on POST {url}: {e}")
        raise
