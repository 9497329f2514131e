"""
Unit Tests for Candle Series Processing

These tests verify that:
- Candle documents are split into one fragment per candle
- Fragments are mapped to Candle objects in response order
- CandlesRange records the first/last candle times
- Malformed documents yield None instead of raising

Run with:
    pytest tests/unit/test_candles.py -v
"""

import logging
from datetime import datetime, timezone

import pytest

from melonbar.http.response import Response
from melonbar.postprocessing import get_candles, get_candles_range, parse_candles
from melonbar.schemas import Candle, CandlesRange


# Coinbase format: [time, low, high, open, close, volume], newest first
CANDLES_BODY = (
    "[[1704114000,50100.5,50900,50500,50800.25,12.5],"
    "[1704110400,49500,51000,50000,50500,125.5],"
    "[1704106800,49000,50100,49100,50000,98.2]]"
)


def make_response(content: str) -> Response:
    return Response(status_code=200, content=content)


class TestParseCandles:
    """Tests for parse_candles"""

    def test_splits_two_candles(self):
        assert parse_candles("[[1,2,3],[4,5,6]]") == ["[1,2,3]", "[4,5,6]"]

    def test_single_candle_has_no_boundary(self):
        assert parse_candles("[[1,2,3]]") == ["[1,2,3]"]

    def test_empty_document(self):
        assert parse_candles("[]") == []

    def test_whitespace_between_candles(self):
        body = "[\n  [1, 2, 3],\n  [4, 5, 6]\n]"

        assert parse_candles(body) == ["[1, 2, 3]", "[4, 5, 6]"]

    def test_three_candles(self):
        assert len(parse_candles(CANDLES_BODY)) == 3


class TestGetCandles:
    """Tests for get_candles"""

    def test_maps_candles_in_response_order(self):
        candles = get_candles().apply(make_response(CANDLES_BODY))

        assert len(candles) == 3
        assert all(isinstance(candle, Candle) for candle in candles)
        assert candles[0].time == datetime(2024, 1, 1, 13, tzinfo=timezone.utc)
        assert candles[2].time == datetime(2024, 1, 1, 11, tzinfo=timezone.utc)

    def test_field_mapping(self):
        candle = get_candles().apply(make_response(CANDLES_BODY))[1]

        assert candle.low == 49500.0
        assert candle.high == 51000.0
        assert candle.open == 50000.0
        assert candle.close == 50500.0
        assert candle.volume == 125.5

    def test_single_candle(self):
        candles = get_candles().apply(make_response("[[1704110400,1,4,2,3,10]]"))

        assert len(candles) == 1

    def test_empty_document(self):
        assert get_candles().apply(make_response("[]")) == []

    @pytest.mark.parametrize("content", [
        '{"message": "NotFound"}',
        "[[1704110400,1,4,2,3]]",
        "[[1704110400,1,4,2,3,10],[oops]]",
        "[[1704110400,-1,4,2,3,10]]",
        "",
    ])
    def test_malformed_document_returns_none(self, content):
        assert get_candles().apply(make_response(content)) is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            get_candles().apply(make_response('{"message": "NotFound"}'))

        assert any("map candles" in record.getMessage() for record in caplog.records)

    def test_deeply_nested_fragment_returns_none(self, caplog):
        nested = "[" * 100000 + "]" * 100000

        with caplog.at_level(logging.ERROR):
            assert get_candles().apply(make_response(f"[{nested}]")) is None

        assert any("RecursionError" in record.getMessage() for record in caplog.records)


class TestGetCandlesRange:
    """Tests for get_candles_range"""

    def test_records_boundaries(self):
        candles_range = get_candles_range().apply(make_response(CANDLES_BODY))

        assert isinstance(candles_range, CandlesRange)
        assert len(candles_range.candles) == 3
        assert candles_range.first == datetime(2024, 1, 1, 13, tzinfo=timezone.utc)
        assert candles_range.last == datetime(2024, 1, 1, 11, tzinfo=timezone.utc)

    def test_empty_range(self):
        candles_range = get_candles_range().apply(make_response("[]"))

        assert candles_range.candles == []
        assert candles_range.first is None
        assert candles_range.last is None

    def test_malformed_document_returns_none(self):
        assert get_candles_range().apply(make_response("oops")) is None


class TestCandleSchema:
    """Tests for Candle.from_fragment"""

    def test_from_fragment(self):
        candle = Candle.from_fragment("[1704110400, 49500, 51000, 50000, 50500, 125.5]")

        assert candle.time == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
        assert candle.close == 50500.0

    def test_extra_values_ignored(self):
        assert Candle.from_fragment("[1704110400,1,4,2,3,10,99]").volume == 10.0

    def test_too_few_values(self):
        with pytest.raises(ValueError):
            Candle.from_fragment("[1704110400,1,4]")

    def test_not_an_array(self):
        with pytest.raises(ValueError):
            Candle.from_fragment('{"time": 1}')
