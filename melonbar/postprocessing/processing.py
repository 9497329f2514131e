"""
Post-Processing Library

Common PostProcessor implementations. Each factory returns a fresh processor
that turns a Response into a typed value.

Failure Policy:
    Parsing and mapping failures are never raised to the caller. The
    processor logs the exception type together with the offending content
    and returns None instead:

        >>> as_json().apply(Response(status_code=200, content="not json")) is None
        True

    The string-producing processors go one step further and always return a
    string ("null" and "{}" respectively) instead of None.

Usage:
    from melonbar.postprocessing import as_object, get_json_value_as_string

    ticker = as_object(Ticker).apply(response)            # Optional[Ticker]
    price = get_json_value_as_string("price").apply(response)
"""

import json
from typing import Any, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from melonbar.guard import non_null
from melonbar.http.response import PostProcessor, Response, map_present
from melonbar.logging import get_logger
from melonbar.postprocessing.json_node import POINTER_SEPARATOR, JsonNode
from melonbar.schemas import Pagination

T = TypeVar("T")

logger = get_logger(__name__)

CB_BEFORE_HEADER = "cb-before"
CB_AFTER_HEADER = "cb-after"


# ============================================
# Processors
# ============================================

def as_object(target: Type[T]) -> PostProcessor[Optional[T]]:
    """
    Deserialize response content into an instance of target.

    Args:
        target: Any type pydantic can validate (models, List[Model], dataclasses, ...)

    Returns:
        PostProcessor yielding the instance, or None if mapping failed
    """
    adapter = TypeAdapter(target)
    return PostProcessor(lambda response: _map_to_object(response.content, adapter, target))


def as_json() -> PostProcessor[Optional[JsonNode]]:
    """
    Parse response content as a JSON document.

    Returns:
        PostProcessor yielding the document's root node, or None if the content is not JSON
    """
    return PostProcessor(lambda response: _marshal_json(response.content))


def get_json_value(path: str) -> PostProcessor[Optional[JsonNode]]:
    """
    Parse response content with as_json(), then extract the node at path.

    Path semantics:
        - "price": top-level key lookup; None if the key is absent
        - "a/b" or "/a/b": JSON pointer; MISSING_NODE if a segment is absent

    Returns:
        PostProcessor yielding the node; None if the content is not JSON

    str() of MISSING_NODE is ""; use get_json_value_as_string() to get "null".
    """
    return as_json().and_then(map_present(lambda node: _extract(node, path)))


def get_json_value_as_string(path: str) -> PostProcessor[str]:
    """
    Extract the node at path with get_json_value() and render it as JSON text.

    Always returns a string: "null" when the content is not JSON, the key is
    absent, or the pointer does not resolve.

    Example:
        >>> get_json_value_as_string("id").apply(Response(status_code=200, content='{"id":"BTC-USD"}'))
        '"BTC-USD"'
    """
    return get_json_value(path).and_then(_to_string)


def as_pretty_json_string() -> PostProcessor[str]:
    """
    Render response content as indented JSON for debugging/logging.

    Returns "{}" when the content is not JSON.
    """
    return as_json().and_then(
        lambda node: node.to_pretty_string() if node is not None else "{}"
    )


def get_pagination() -> PostProcessor[Optional[Pagination]]:
    """
    Read the adjacent-page cursors from the CB-BEFORE / CB-AFTER headers.

    Returns:
        PostProcessor yielding a Pagination, or None when neither header is present
    """
    return PostProcessor(_read_pagination)


# ============================================
# Helpers
# ============================================

def _map_to_object(content: str, adapter: TypeAdapter, target: Any) -> Optional[Any]:
    try:
        return adapter.validate_json(content)
    except (ValidationError, ValueError, TypeError) as e:
        logger.error(
            "Exception [%s] thrown while attempting to map to [%s] from json: [%s]",
            type(e).__name__, getattr(target, "__name__", target), content
        )
    return None


def _marshal_json(content: str) -> Optional[JsonNode]:
    non_null(content)
    try:
        return JsonNode(json.loads(content))
    except (ValueError, TypeError, RecursionError) as e:
        logger.error(
            "Exception [%s] thrown while attempting to parse content as json: [%s]",
            type(e).__name__, content, exc_info=e
        )
    return None


def _extract(node: JsonNode, path: str) -> Optional[JsonNode]:
    if POINTER_SEPARATOR in path:
        pointer = path if path.startswith(POINTER_SEPARATOR) else POINTER_SEPARATOR + path
        return node.at(pointer)
    return node.get(path)


def _to_string(node: Optional[JsonNode]) -> str:
    # absent key and unresolved pointer both render as "null"
    if node is None or node.is_missing():
        return "null"
    return str(node)


def _read_pagination(response: Response) -> Optional[Pagination]:
    before = response.header(CB_BEFORE_HEADER)
    after = response.header(CB_AFTER_HEADER)
    if before is None and after is None:
        return None
    return Pagination(before=before, after=after)
