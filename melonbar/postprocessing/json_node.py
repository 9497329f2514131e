"""
JSON document tree used by the post-processing pipeline.

A decoded JSON value is wrapped in a JsonNode so that a document that is
literally `null` (a present node whose value is None) is never confused with
a failed parse (no node at all).

Two lookups are offered:
    - get(key): single top-level key; returns None when the key is absent
    - at(pointer): RFC 6901 JSON pointer; returns MISSING_NODE when any
      segment cannot be resolved
"""

import json
import re
from typing import Any, Optional

_ARRAY_INDEX = re.compile(r"^(0|[1-9][0-9]*)$")

POINTER_SEPARATOR = "/"


class JsonNode:
    """A node of a decoded JSON document."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = None):
        self._value = value

    @property
    def value(self) -> Any:
        """The decoded Python value (dict, list, str, int, float, bool or None)."""
        return self._value

    def is_missing(self) -> bool:
        return False

    def is_null(self) -> bool:
        return self._value is None

    def get(self, key: str) -> Optional["JsonNode"]:
        """Child of an object node, or None if this is not an object or has no such key."""
        if isinstance(self._value, dict) and key in self._value:
            return JsonNode(self._value[key])
        return None

    def at(self, pointer: str) -> "JsonNode":
        """
        Resolve a JSON pointer against this node.

        Args:
            pointer: "" for this node, otherwise "/"-prefixed segments where
                     "~1" stands for "/" and "~0" for "~"

        Returns:
            JsonNode: The addressed node, or MISSING_NODE if a segment does not resolve

        Raises:
            ValueError: If a non-empty pointer does not start with "/"

        Example:
            >>> JsonNode({"a": [{"b": 7}]}).at("/a/0/b").value
            7
            >>> JsonNode({"a": {}}).at("/a/b") is MISSING_NODE
            True
        """
        if pointer == "":
            return self
        if not pointer.startswith(POINTER_SEPARATOR):
            raise ValueError(f"Invalid JSON pointer: '{pointer}' must start with '/'")

        current = self._value
        for token in pointer[1:].split(POINTER_SEPARATOR):
            token = token.replace("~1", "/").replace("~0", "~")
            if isinstance(current, dict):
                if token not in current:
                    return MISSING_NODE
                current = current[token]
            elif isinstance(current, list):
                if not _ARRAY_INDEX.match(token) or int(token) >= len(current):
                    return MISSING_NODE
                current = current[int(token)]
            else:
                return MISSING_NODE
        return JsonNode(current)

    def as_text(self) -> str:
        """Raw text of a string node; JSON text for every other node."""
        if isinstance(self._value, str):
            return self._value
        return str(self)

    def to_pretty_string(self) -> str:
        return json.dumps(self._value, indent=2, ensure_ascii=False)

    def __str__(self) -> str:
        return json.dumps(self._value, separators=(",", ":"), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"JsonNode({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNode):
            return NotImplemented
        if other.is_missing():
            return False
        return self._value == other._value

    __hash__ = None


class MissingNode(JsonNode):
    """Result of a pointer lookup that did not resolve. Use the MISSING_NODE instance."""

    __slots__ = ()

    def is_missing(self) -> bool:
        return True

    def is_null(self) -> bool:
        return False

    def get(self, key: str) -> Optional[JsonNode]:
        return None

    def at(self, pointer: str) -> JsonNode:
        return self

    def as_text(self) -> str:
        return ""

    def to_pretty_string(self) -> str:
        return ""

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "MissingNode()"

    def __eq__(self, other: object) -> bool:
        return other is self

    __hash__ = object.__hash__


MISSING_NODE = MissingNode()
