"""
Coinbase REST Transport

HttpClient implementation on top of httpx. It turns a BaseRequest into an
HTTP exchange and wraps the result in a Response; everything else (parsing,
mapping, pagination cursors) is left to post-processors.

Handled here:
- Resolving the target URL from uri / request_path
- Query parameters from the request's Pagination cursor
- Request/response debug logging

Not handled here: retries, rate limiting and request signing.

Usage:
    with CoinbaseHttpClient() as client:
        response = client.send(GetProductsRequest())

    async with CoinbaseHttpClient() as client:
        response = await client.send_async(GetProductsRequest())
"""

import asyncio
import time
from typing import Any, Dict, Optional, Tuple

import httpx

from melonbar.config import settings
from melonbar.guard import non_null
from melonbar.http.client import HttpClient
from melonbar.http.request import BaseRequest, HttpMethod
from melonbar.http.requests import describe_request
from melonbar.http.response import Response
from melonbar.logging import get_logger, log_api_request, log_api_response


class CoinbaseHttpClient(HttpClient):
    """
    httpx-backed transport for the Coinbase Exchange REST API

    Attributes:
        base_url: API base URL (defaults to settings.coinbase_base_url)
        timeout: Request timeout in seconds (defaults to settings.request_timeout)
        logger: Logger instance for debugging

    Notes:
        - Transport errors (httpx.HTTPError and subclasses) propagate unchanged
        - Non-2xx responses are returned, not raised
        - Invalid requests are logged and still dispatched; callers decide
    """

    EXCHANGE = "coinbase"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[Any] = None
    ):
        """
        Initialize the transport.

        Args:
            base_url: Override for the API base URL
            timeout: Override for the request timeout in seconds
            headers: Headers sent with every request
            transport: httpx transport for both clients (e.g., httpx.MockTransport in tests)
        """
        self.base_url = (base_url or settings.coinbase_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.logger = get_logger(__name__)

        client_kwargs = {
            "timeout": self.timeout,
            "headers": headers if headers is not None else settings.get_default_headers(),
        }
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.Client(**client_kwargs)
        self._async_client = httpx.AsyncClient(**client_kwargs)

    # ============================================
    # Context Managers for Session Management
    # ============================================

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def close(self) -> None:
        self._client.close()
        self.logger.debug("CoinbaseHttpClient session closed")

    async def aclose(self) -> None:
        await self._async_client.aclose()
        self.close()

    # ============================================
    # HttpClient Contract
    # ============================================

    def send(self, request: BaseRequest) -> Response:
        """
        Perform the request and block until the response arrives.

        Raises:
            NullArgumentError: If request is None
            httpx.HTTPError: On connection errors, timeouts, etc.
        """
        non_null(request)
        method, url, params, content = self._prepare(request)

        log_api_request(self.EXCHANGE, url, params)
        started = time.perf_counter()
        resp = self._client.request(method, url, params=params, content=content)
        log_api_response(self.EXCHANGE, url, resp.status_code, time.perf_counter() - started)

        return self._to_response(resp)

    def send_async(self, request: BaseRequest) -> "asyncio.Future[Response]":
        """
        Schedule the request on the running event loop.

        Returns:
            asyncio.Task resolving to the Response

        Raises:
            NullArgumentError: If request is None
            RuntimeError: If no event loop is running
        """
        non_null(request)
        loop = asyncio.get_running_loop()
        return loop.create_task(self._send_async(request))

    async def _send_async(self, request: BaseRequest) -> Response:
        method, url, params, content = self._prepare(request)

        log_api_request(self.EXCHANGE, url, params)
        started = time.perf_counter()
        resp = await self._async_client.request(method, url, params=params, content=content)
        log_api_response(self.EXCHANGE, url, resp.status_code, time.perf_counter() - started)

        return self._to_response(resp)

    # ============================================
    # Helpers
    # ============================================

    def _prepare(self, request: BaseRequest) -> Tuple[str, str, Optional[Dict[str, Any]], Optional[str]]:
        if not request.is_valid_request():
            self.logger.warning(f"Dispatching request that failed validation: {describe_request(request)}")

        params = request.pagination.to_params() if request.pagination is not None else None
        content = request.body if request.body and request.method != HttpMethod.GET else None
        return request.method.value, self.resolve_url(request), params or None, content

    def resolve_url(self, request: BaseRequest) -> str:
        """
        Absolute URL for a request.

        request.uri wins over request.request_path; relative targets are
        joined to base_url.
        """
        target = request.uri or request.request_path
        if target.startswith(("http://", "https://")):
            return target
        if target and not target.startswith("/"):
            target = f"/{target}"
        return f"{self.base_url}{target}"

    @staticmethod
    def _to_response(resp: httpx.Response) -> Response:
        return Response(
            status_code=resp.status_code,
            content=resp.text,
            headers=dict(resp.headers),
        )
