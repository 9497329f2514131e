"""
Candle series processors.

Coinbase answers /products/<id>/candles with an array of positional arrays:

    [[1704114000, 49500, 51000, 50000, 50500, 125.5],
     [1704110400, 49000, 50100, 49100, 50000, 98.2]]

The body is split into one fragment per candle without building the whole
JSON tree first, then each fragment is mapped to a Candle.
"""

import re
from typing import List, Optional

from melonbar.http.response import PostProcessor, map_present
from melonbar.logging import get_logger
from melonbar.schemas import Candle, CandlesRange

logger = get_logger(__name__)

# zero-width split right after each "]," boundary between candles
CANDLES_DELIMITER = re.compile(r"(?<=\],)")


def get_candles() -> PostProcessor[Optional[List[Candle]]]:
    """
    Map a candles response to a list of Candle.

    Returns:
        PostProcessor yielding candles in response order, or None if any
        fragment could not be mapped
    """
    return PostProcessor(lambda response: _map_candles(response.content))


def get_candles_range() -> PostProcessor[Optional[CandlesRange]]:
    """Map a candles response to a CandlesRange (None if mapping failed)."""
    return get_candles().and_then(map_present(CandlesRange.of))


def parse_candles(body: str) -> List[str]:
    """
    Split a candles document into one JSON array fragment per candle.

    The outer brackets are stripped first. A single-candle document has no
    boundary, so the split yields exactly one fragment; an empty document
    yields no fragments.

    Example:
        >>> parse_candles("[[1,2,3],[4,5,6]]")
        ['[1,2,3]', '[4,5,6]']
        >>> parse_candles("[[1,2,3]]")
        ['[1,2,3]']
    """
    inner = body.strip()[1:-1].strip()
    if not inner:
        return []
    return [fragment.strip().rstrip(",").strip() for fragment in CANDLES_DELIMITER.split(inner)]


def _map_candles(content: str) -> Optional[List[Candle]]:
    try:
        document = content.strip()
        if not (document.startswith("[") and document.endswith("]")):
            raise ValueError("Candles document is not a JSON array")
        return [Candle.from_fragment(fragment) for fragment in parse_candles(document)]
    except (ValueError, TypeError, RecursionError) as e:
        logger.error(
            "Exception [%s] thrown while attempting to map candles from content: [%s]",
            type(e).__name__, content
        )
    return None
