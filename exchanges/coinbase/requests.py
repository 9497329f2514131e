"""
Coinbase Exchange Request Types

Concrete BaseRequest subclasses for the public market-data endpoints.

API Documentation:
    https://docs.cdp.coinbase.com/exchange/reference/

Endpoints:
    - GET /products                         - GetProductsRequest
    - GET /products/{product_id}/candles    - GetProductCandlesRequest
    - GET /products/{product_id}/trades     - GetProductTradesRequest (paginated)

request_path is filled in from the other fields when not given explicitly,
including the query string for candles.
"""

from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import Field, model_validator

from melonbar.http.request import BaseRequest
from melonbar.schemas import Pagination
from melonbar.utils.time import is_iso8601

# Candle widths in seconds accepted by the candles endpoint
VALID_GRANULARITIES = (60, 300, 900, 3600, 21600, 86400)

# Maximum page size of paginated endpoints
MAX_PAGE_LIMIT = 100


class GetProductsRequest(BaseRequest):
    """List all tradable products"""

    request_path: str = "/products"


class GetProductCandlesRequest(BaseRequest):
    """
    Historic rates for a product.

    Attributes:
        product_id: Product, e.g. "BTC-USD"
        start: Range start as ISO-8601, must be given together with end
        end: Range end as ISO-8601, must be given together with start
        granularity: Candle width in seconds, one of VALID_GRANULARITIES

    Example:
        >>> request = GetProductCandlesRequest(product_id="BTC-USD", granularity=3600)
        >>> request.request_path
        '/products/BTC-USD/candles?granularity=3600'
    """

    product_id: str = Field(..., description="Product id, e.g. BTC-USD")
    start: Optional[str] = Field(None, description="ISO-8601 range start")
    end: Optional[str] = Field(None, description="ISO-8601 range end")
    granularity: Optional[int] = Field(None, description="Candle width in seconds")

    @model_validator(mode="before")
    @classmethod
    def populate_request_path(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("request_path") or not data.get("product_id"):
            return data

        query = {
            key: data[key]
            for key in ("start", "end", "granularity")
            if data.get(key) is not None
        }
        path = f"/products/{data['product_id']}/candles"
        if query:
            path = f"{path}?{urlencode(query)}"
        return {**data, "request_path": path}

    def is_valid_request(self) -> bool:
        return (
            bool(self.product_id)
            and self._if_present(self.granularity, lambda g: g in VALID_GRANULARITIES)
            and self._if_present(self.start, is_iso8601)
            and self._if_present(self.end, is_iso8601)
            and self._all_or_nothing(self.start, self.end)
        )


class GetProductTradesRequest(BaseRequest):
    """
    Latest trades for a product, newest first.

    Paged with a Pagination cursor: limit must be within 1..MAX_PAGE_LIMIT and
    only one of before/after may be set.
    """

    product_id: str = Field(..., description="Product id, e.g. BTC-USD")

    @model_validator(mode="before")
    @classmethod
    def populate_request_path(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("request_path") and data.get("product_id"):
            return {**data, "request_path": f"/products/{data['product_id']}/trades"}
        return data

    def is_valid_request(self) -> bool:
        return bool(self.product_id) and self._if_present(self.pagination, self._valid_cursor)

    def _valid_cursor(self, pagination: Pagination) -> bool:
        return (
            self._if_present(pagination.limit, lambda limit: 1 <= limit <= MAX_PAGE_LIMIT)
            and not (pagination.before is not None and pagination.after is not None)
        )
