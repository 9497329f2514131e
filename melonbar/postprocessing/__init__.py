"""
Post-Processing Package

Composable processors that turn a completed Response into typed values:

    - processing: JSON parsing, object mapping, value extraction, pagination
    - candles: Candle series extraction
    - json_node: The JSON tree the processors produce
"""

from melonbar.postprocessing.candles import get_candles, get_candles_range, parse_candles
from melonbar.postprocessing.json_node import MISSING_NODE, JsonNode, MissingNode
from melonbar.postprocessing.processing import (
    as_json,
    as_object,
    as_pretty_json_string,
    get_json_value,
    get_json_value_as_string,
    get_pagination,
)

__all__ = [
    "MISSING_NODE",
    "JsonNode",
    "MissingNode",
    "as_json",
    "as_object",
    "as_pretty_json_string",
    "get_candles",
    "get_candles_range",
    "get_json_value",
    "get_json_value_as_string",
    "get_pagination",
    "parse_candles",
]
