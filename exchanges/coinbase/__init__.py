"""
Coinbase Exchange Connector

Market-data facade that wires the request types, an HttpClient and the
post-processors together.

API Documentation:
    https://docs.cdp.coinbase.com/exchange/reference/

Endpoints Used:
    - GET /products - Product list
    - GET /products/{product_id}/candles - Historic rates
    - GET /products/{product_id}/trades - Latest trades (paginated)

Structure:
    exchanges/coinbase/
    ├── __init__.py          # This file (CoinbaseMarketData)
    ├── api_client.py        # httpx transport implementing HttpClient
    └── requests.py          # BaseRequest subclasses per endpoint
"""

from typing import Optional, Tuple

from melonbar.http.client import HttpClient
from melonbar.http.request import BaseRequest
from melonbar.http.requests import describe_request
from melonbar.http.response import Response
from melonbar.logging import get_logger
from melonbar.postprocessing import as_json, get_candles_range, get_pagination
from melonbar.postprocessing.json_node import JsonNode
from melonbar.schemas import CandlesRange, Pagination
from .api_client import CoinbaseHttpClient
from .requests import GetProductCandlesRequest, GetProductsRequest, GetProductTradesRequest


class CoinbaseMarketData:
    """
    Coinbase public market data

    Invalid requests are not dispatched and non-2xx responses are not
    processed; both are logged and reported as None.

    Example:
        >>> with CoinbaseMarketData() as coinbase:
        ...     candles = coinbase.get_candles("BTC-USD", granularity=3600)
        ...     if candles is not None:
        ...         print(f"{len(candles.candles)} candles from {candles.last} to {candles.first}")
    """

    name = "coinbase"

    def __init__(self, client: Optional[HttpClient] = None):
        """
        Args:
            client: Transport to use; a CoinbaseHttpClient is created (and owned) when omitted
        """
        self._owns_client = client is None
        self.client = client if client is not None else CoinbaseHttpClient()
        self.logger = get_logger(__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    # ============================================
    # Market Data
    # ============================================

    def get_products(self) -> Optional[JsonNode]:
        """Product list as a JSON array node"""
        response = self._dispatch(GetProductsRequest())
        return as_json().apply(response) if response is not None else None

    def get_candles(
        self,
        product_id: str,
        granularity: Optional[int] = None,
        start: Optional[str] = None,
        end: Optional[str] = None
    ) -> Optional[CandlesRange]:
        """
        Fetch historic rates.

        Args:
            product_id: Product (e.g., "BTC-USD")
            granularity: Candle width in seconds (60, 300, 900, 3600, 21600, 86400)
            start: ISO-8601 range start (requires end)
            end: ISO-8601 range end (requires start)

        Returns:
            CandlesRange in response order (newest first), or None on any failure
        """
        request = GetProductCandlesRequest(
            product_id=product_id.upper(), granularity=granularity, start=start, end=end
        )
        self.logger.info(f"Fetching candles: {product_id} (granularity={granularity}, start={start}, end={end})")

        response = self._dispatch(request)
        if response is None:
            return None

        candles = get_candles_range().apply(response)
        if candles is not None:
            self.logger.info(f"Fetched {len(candles.candles)} candles for {product_id}")
        return candles

    async def get_candles_async(
        self,
        product_id: str,
        granularity: Optional[int] = None,
        start: Optional[str] = None,
        end: Optional[str] = None
    ) -> Optional[CandlesRange]:
        """Non-blocking variant of get_candles()"""
        request = GetProductCandlesRequest(
            product_id=product_id.upper(), granularity=granularity, start=start, end=end
        )
        if not self._is_dispatchable(request):
            return None

        response = await self.client.send_async(request)
        if not self._is_success(request, response):
            return None
        return get_candles_range().apply(response)

    def get_trades_page(
        self,
        product_id: str,
        pagination: Optional[Pagination] = None
    ) -> Tuple[Optional[JsonNode], Optional[Pagination]]:
        """
        Fetch one page of trades.

        Returns:
            (trades, cursor): the page as a JSON array node and the cursors
            for the adjacent pages; (None, None) on failure

        Example:
            >>> trades, cursor = coinbase.get_trades_page("BTC-USD", Pagination(limit=100))
            >>> older, _ = coinbase.get_trades_page("BTC-USD", Pagination(after=cursor.after, limit=100))
        """
        request = GetProductTradesRequest(product_id=product_id.upper(), pagination=pagination)
        response = self._dispatch(request)
        if response is None:
            return None, None
        return as_json().apply(response), get_pagination().apply(response)

    # ============================================
    # Helpers
    # ============================================

    def _dispatch(self, request: BaseRequest) -> Optional[Response]:
        if not self._is_dispatchable(request):
            return None

        response = self.client.send(request)
        return response if self._is_success(request, response) else None

    def _is_dispatchable(self, request: BaseRequest) -> bool:
        if request.is_valid_request():
            return True
        self.logger.error(f"Invalid request, not dispatching: {describe_request(request)}")
        return False

    def _is_success(self, request: BaseRequest, response: Response) -> bool:
        if response.is_success:
            return True
        self.logger.error(
            f"HTTP {response.status_code} on {request.request_path}: {response.content}"
        )
        return False


__all__ = [
    "CoinbaseHttpClient",
    "CoinbaseMarketData",
    "GetProductCandlesRequest",
    "GetProductTradesRequest",
    "GetProductsRequest",
]
