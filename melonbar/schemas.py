"""
Domain Schemas

Pydantic models for the values the post-processing pipeline produces and the
cursor metadata requests carry.

Models:
    - Candle: One Coinbase candle ([time, low, high, open, close, volume])
    - CandlesRange: Ordered candles plus the first/last candle times
    - Pagination: before/after/limit cursor for paginated endpoints
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from melonbar.utils.time import to_utc_datetime


# ============================================
# Candle Schema
# ============================================

class Candle(BaseModel):
    """
    A single candlestick bucket.

    Coinbase serializes candles as positional arrays, so the canonical
    constructor for wire data is from_fragment().

    Example:
        >>> Candle.from_fragment("[1704110400, 49500.0, 51000.0, 50000.0, 50500.0, 125.5]")
        Candle(time=datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc), low=49500.0, ...)
    """

    model_config = ConfigDict(frozen=True)

    time: datetime = Field(..., description="Bucket start time in UTC")
    low: float = Field(..., ge=0, description="Lowest price during the bucket")
    high: float = Field(..., ge=0, description="Highest price during the bucket")
    open: float = Field(..., ge=0, description="First trade price in the bucket")
    close: float = Field(..., ge=0, description="Last trade price in the bucket")
    volume: float = Field(..., ge=0, description="Volume in base currency")

    @classmethod
    def from_fragment(cls, fragment: str) -> "Candle":
        """
        Build a Candle from one JSON array fragment.

        Raises:
            ValueError: If the fragment is not a JSON array of at least six numbers
        """
        values = json.loads(fragment)
        if not isinstance(values, list) or len(values) < 6:
            raise ValueError(f"Expected [time, low, high, open, close, volume], got: {fragment}")

        time, low, high, open_, close, volume = values[:6]
        return cls(
            time=to_utc_datetime(time),
            low=low,
            high=high,
            open=open_,
            close=close,
            volume=volume,
        )


# ============================================
# Candles Range Schema
# ============================================

class CandlesRange(BaseModel):
    """
    Ordered candles with their boundary times.

    Attributes:
        candles: Candles in response order (Coinbase returns newest first)
        first: Time of the first candle, None for an empty range
        last: Time of the last candle, None for an empty range
    """

    model_config = ConfigDict(frozen=True)

    candles: List[Candle] = Field(default_factory=list)
    first: Optional[datetime] = None
    last: Optional[datetime] = None

    @classmethod
    def of(cls, candles: List[Candle]) -> "CandlesRange":
        candles = list(candles)
        return cls(
            candles=candles,
            first=candles[0].time if candles else None,
            last=candles[-1].time if candles else None,
        )


# ============================================
# Pagination Schema
# ============================================

class Pagination(BaseModel):
    """
    Cursor metadata for paginated endpoints.

    Coinbase pages with opaque cursors: "before" requests newer items and
    "after" requests older items than the cursor. Responses carry the cursors
    for the adjacent pages in the CB-BEFORE and CB-AFTER headers.
    """

    model_config = ConfigDict(frozen=True)

    before: Optional[str] = Field(None, description="Cursor for the newer page")
    after: Optional[str] = Field(None, description="Cursor for the older page")
    limit: Optional[int] = Field(None, description="Maximum items per page")

    def to_params(self) -> Dict[str, Any]:
        """Query parameters for the cursor, omitting unset fields."""
        return self.model_dump(exclude_none=True)
