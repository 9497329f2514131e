"""
Unit Tests for JsonNode

Run with:
    pytest tests/unit/test_json_node.py -v
"""

import pytest

from melonbar.postprocessing.json_node import MISSING_NODE, JsonNode, MissingNode


@pytest.fixture
def document():
    return JsonNode({
        "a": {"b": 7, "c": None},
        "list": [{"id": 1}, {"id": 2}],
        "a/b": "slash",
        "m~n": "tilde",
    })


class TestGet:
    """Tests for single-key lookup"""

    def test_existing_key(self, document):
        assert document.get("a").value == {"b": 7, "c": None}

    def test_absent_key_returns_none(self, document):
        assert document.get("zzz") is None

    def test_get_on_non_object(self):
        assert JsonNode([1, 2]).get("0") is None
        assert JsonNode("text").get("a") is None

    def test_null_value_is_present_node(self, document):
        node = document.get("a").get("c")

        assert node is not None
        assert node.is_null()
        assert not node.is_missing()


class TestAt:
    """Tests for JSON pointer lookup"""

    def test_nested_object(self, document):
        assert document.at("/a/b").value == 7

    def test_array_index(self, document):
        assert document.at("/list/1/id").value == 2

    def test_empty_pointer_is_self(self, document):
        assert document.at("") is document

    def test_missing_segment_returns_sentinel(self, document):
        assert document.at("/a/zzz") is MISSING_NODE
        assert document.at("/a/b/deeper") is MISSING_NODE
        assert document.at("/zzz/b") is MISSING_NODE

    @pytest.mark.parametrize("pointer", ["/list/2", "/list/-1", "/list/01", "/list/x"])
    def test_bad_array_index_returns_sentinel(self, document, pointer):
        assert document.at(pointer) is MISSING_NODE

    def test_escaped_segments(self, document):
        assert document.at("/a~1b").value == "slash"
        assert document.at("/m~0n").value == "tilde"

    def test_pointer_without_leading_slash_raises(self, document):
        with pytest.raises(ValueError, match="must start with"):
            document.at("a/b")

    def test_missing_node_propagates(self):
        assert MISSING_NODE.at("/a") is MISSING_NODE
        assert MISSING_NODE.get("a") is None


class TestRendering:
    """Tests for text rendering"""

    def test_str_is_compact_json(self):
        assert str(JsonNode({"a": [1, 2]})) == '{"a":[1,2]}'

    def test_str_of_string_is_quoted(self):
        assert str(JsonNode("BTC-USD")) == '"BTC-USD"'

    def test_str_of_null(self):
        assert str(JsonNode(None)) == "null"

    def test_as_text(self):
        assert JsonNode("BTC-USD").as_text() == "BTC-USD"
        assert JsonNode(7).as_text() == "7"
        assert JsonNode(True).as_text() == "true"

    def test_pretty_string(self):
        assert JsonNode({"a": 1}).to_pretty_string() == '{\n  "a": 1\n}'

    def test_missing_node_renders_empty(self):
        assert str(MISSING_NODE) == ""
        assert MISSING_NODE.to_pretty_string() == ""
        assert MISSING_NODE.value is None


class TestEquality:
    """Tests for node equality"""

    def test_equal_values(self):
        assert JsonNode({"a": 1}) == JsonNode({"a": 1})
        assert JsonNode([1]) != JsonNode([2])

    def test_null_node_is_not_missing_node(self):
        assert JsonNode(None) != MISSING_NODE
        assert MISSING_NODE != JsonNode(None)

    def test_missing_node_is_singleton_instance(self):
        assert isinstance(MISSING_NODE, MissingNode)
        assert MISSING_NODE == MISSING_NODE
        assert MISSING_NODE.is_missing()
