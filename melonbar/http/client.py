"""
HTTP Client Contract

The boundary between the client core and whatever transport performs the
actual HTTP exchange. The core only relies on the two methods below; pooling,
TLS, retries and signing belong to the implementation.

Example:
    class RecordingClient(HttpClient):
        def send(self, request):
            return Response(status_code=200, content="[]")

        def send_async(self, request):
            return asyncio.get_running_loop().run_in_executor(None, self.send, request)
"""

import asyncio
from abc import ABC, abstractmethod

from melonbar.http.request import BaseRequest
from melonbar.http.response import Response


class HttpClient(ABC):
    """
    Abstract Base Class for HTTP transports.

    Abstract Methods:
        - send: Blocking dispatch
        - send_async: Non-blocking dispatch returning a future
    """

    @abstractmethod
    def send(self, request: BaseRequest) -> Response:
        """
        Perform the request and block until the response arrives.

        Args:
            request: Built request

        Returns:
            Response: Status code, raw body and headers

        Raises:
            Exception: Transport-defined dispatch failures, propagated unchanged
        """
        ...

    @abstractmethod
    def send_async(self, request: BaseRequest) -> "asyncio.Future[Response]":
        """
        Schedule the request without blocking the caller.

        Args:
            request: Built request

        Returns:
            asyncio.Future[Response]: Handle that can be awaited or checked with done()

        Notes:
            - Must be called while an event loop is running
            - Cancelling the returned future is up to the transport
        """
        ...
