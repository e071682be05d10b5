"""
FixedFloat Client

Async client for the FixedFloat v2 exchange API (https://ff.io/api/v2/).

- Every call is a single signed POST (no retries, no caching, no pooling)
- Request bodies are built from typed request models
- The {code, msg, data} envelope is unwrapped: callers get `data` or an exception

Get a key pair from https://fixedfloat.com/user/apikey
"""

import logging
from typing import Any, Optional, Union

import httpx

from fixedfloat.api.auth import signed_request
from fixedfloat.api.schemas import (
    Amount,
    CreateOrderRequest,
    EmergencyRequest,
    OptionalText,
    OrderRequest,
    PriceRequest,
    QRCodeRequest,
    encode_payload,
)
from fixedfloat.config import settings
from fixedfloat.constants import (
    CREATE_ORDER_ENDPOINT,
    CURRENCIES_ENDPOINT,
    EMERGENCY_ENDPOINT,
    ORDER_ENDPOINT,
    PRICE_ENDPOINT,
    QR_CODES_ENDPOINT,
    Direction,
    EmergencyChoice,
    OrderType,
)
from fixedfloat.exceptions import ConfigurationError, PreconditionError

logger = logging.getLogger(__name__)


class FixedFloatClient:
    """
    FixedFloat API client.

    Holds the credential pair and base URL, both fixed for the lifetime of
    the instance. Instances share nothing, so several clients (e.g. one per
    account, or one against a mock server) can be used side by side.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key or not api_secret:
            raise ConfigurationError()

        self._api_key = api_key
        self._api_secret = api_secret
        self._base_url = base_url or settings.base_url
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport
        logger.info(f"FixedFloatClient initialized (base_url={self._base_url})")

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_secret(self) -> str:
        return self._api_secret

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"FixedFloatClient(base_url={self._base_url!r})"

    async def request(self, path: str, data: str = "") -> Any:
        """
        Make a signed request

        Args:
            path: Endpoint path relative to the base URL (e.g. "price")
            data: JSON body string, empty by default

        Returns:
            The unwrapped `data` field of the response

        Raises:
            PreconditionError: path is missing or empty (nothing is sent)
            FixedFloatAPIError: the envelope did not report success
            httpx.HTTPError, json.JSONDecodeError: transport or decode failure
        """
        if not path:
            raise PreconditionError()

        return await signed_request(
            self._base_url + path,
            self._api_key,
            self._api_secret,
            data,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def get_currencies(self) -> Any:
        """Getting a list of currencies supported by the FixedFloat service."""
        return await self.request(CURRENCIES_ENDPOINT)

    async def get_price(
        self,
        from_ccy: str,
        to_ccy: str,
        amount: Amount,
        direction: Union[Direction, str] = Direction.FROM,
        type: Union[OrderType, str] = OrderType.FLOAT,
    ) -> Any:
        """
        Get the exchange rate of a currency pair

        Args:
            from_ccy: Code of the currency the client wants to send (ex. ETH)
            to_ccy: Code of the currency the client wants to receive (ex. BTC)
            amount: If direction="from", the amount of from_ccy the client wants to send.
                If direction="to", the amount of to_ccy the client wants to receive.
            direction: "from" or "to" (def. "from")
            type: Order type, "fixed" or "float" (def. "float")
        """
        payload = PriceRequest(
            from_ccy=from_ccy,
            to_ccy=to_ccy,
            amount=amount,
            direction=direction,
            type=type,
        )
        return await self.request(PRICE_ENDPOINT, encode_payload(payload))

    async def create_order(
        self,
        from_ccy: str,
        to_ccy: str,
        to_address: str,
        amount: Amount,
        direction: Union[Direction, str] = Direction.FROM,
        type: Union[OrderType, str] = OrderType.FLOAT,
        tag: OptionalText = False,
    ) -> Any:
        """
        Create an exchange order

        Args:
            from_ccy: Code of the currency the client wants to send (ex. ETH)
            to_ccy: Code of the currency the client wants to receive (ex. BTC)
            to_address: Destination address for the funds once the order completes
            amount: Amount in from_ccy (direction="from") or to_ccy (direction="to")
            direction: "from" or "to" (def. "from")
            type: Order type, "fixed" or "float" (def. "float")
            tag: MEMO or Destination Tag. Can be omitted by appending it to
                to_address after a colon.

        Returns:
            Order data, including the `id` and `token` used by the order methods
        """
        payload = CreateOrderRequest(
            from_ccy=from_ccy,
            to_ccy=to_ccy,
            to_address=to_address,
            amount=amount,
            tag=tag,
            direction=direction,
            type=type,
        )
        return await self.request(CREATE_ORDER_ENDPOINT, encode_payload(payload))

    async def get_order(self, id: str, token: str) -> Any:
        """Get the current data of an order (id ex. 8PQWPY, token from create_order)."""
        payload = OrderRequest(id=id, token=token)
        return await self.request(ORDER_ENDPOINT, encode_payload(payload))

    async def set_emergency(
        self,
        id: str,
        token: str,
        choice: Union[EmergencyChoice, str] = EmergencyChoice.EXCHANGE,
        address: OptionalText = False,
        tag: OptionalText = False,
    ) -> Any:
        """
        Choose the action for an order in EMERGENCY status

        Args:
            id: Order ID
            token: Order security token
            choice: "EXCHANGE" to continue at the current market rate,
                "REFUND" to refund minus miner fee
            address: Refund address, required when choice="REFUND"
            tag: MEMO or Destination Tag if required
        """
        payload = EmergencyRequest(id=id, token=token, choice=choice, address=address, tag=tag)
        return await self.request(EMERGENCY_ENDPOINT, encode_payload(payload))

    async def get_qr_codes(self, id: str, token: str) -> Any:
        payload = QRCodeRequest(id=id, token=token)
        return await self.request(QR_CODES_ENDPOINT, encode_payload(payload))
