"""
Response and Post-Processor

Response is the read-only result the transport hands back. A PostProcessor
is a pure function Response -> T; processors are chained with and_then():

    status = as_json().and_then(map_present(lambda node: node.get("status")))
    status.apply(response)

Processors hold no state between calls, so one instance can be shared by
any number of concurrent callers.
"""

from typing import Callable, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")
U = TypeVar("U")


class Response(BaseModel):
    """
    Completed HTTP response.

    Attributes:
        status_code: HTTP status code
        content: Raw response body as text
        headers: Response headers, names lower-cased
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    content: str = Field(..., description="Raw response body")
    headers: Dict[str, str] = Field(default_factory=dict, description="Lower-cased response headers")

    @field_validator('headers')
    @classmethod
    def lowercase_header_names(cls, v: Dict[str, str]) -> Dict[str, str]:
        return {name.lower(): value for name, value in v.items()}

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())


class PostProcessor(Generic[T]):
    """
    Composable transformation of a Response into a T.

    Example:
        >>> body = PostProcessor(lambda response: response.content)
        >>> length = body.and_then(len)
        >>> length.apply(Response(status_code=200, content="[]"))
        2
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Response], T]):
        self._fn = fn

    def apply(self, response: Response) -> T:
        return self._fn(response)

    __call__ = apply

    def and_then(self, fn: Callable[[T], U]) -> "PostProcessor[U]":
        """
        Compose this processor with fn.

        The returned processor applies this processor once, then fn to its result.
        """
        inner = self._fn
        return PostProcessor(lambda response: fn(inner(response)))

    def __repr__(self) -> str:
        return f"<PostProcessor({getattr(self._fn, '__qualname__', self._fn)!r})>"


def map_present(fn: Callable[[T], U]) -> Callable[[Optional[T]], Optional[U]]:
    """Lift fn over an optional value: None stays None."""
    def mapper(value: Optional[T]) -> Optional[U]:
        return None if value is None else fn(value)
    return mapper
