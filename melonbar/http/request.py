"""
Request Model

BaseRequest describes one outbound call to the exchange REST API. Instances
are frozen once built: later stages (e.g., the transport resolving the full
URI) derive a new instance with model_copy() instead of mutating.

Concrete request types subclass BaseRequest, add their own fields and
override is_valid_request() using the _if_present() and _all_or_nothing()
combinators:

    class GetProductCandlesRequest(BaseRequest):
        product_id: str
        start: Optional[str] = None
        end: Optional[str] = None

        def is_valid_request(self) -> bool:
            return (
                self._if_present(self.start, is_iso8601)
                and self._all_or_nothing(self.start, self.end)
            )

Validation never raises. A False result is reported to the caller, who
decides whether to dispatch anyway or abort.
"""

from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from melonbar.schemas import Pagination

T = TypeVar("T")


class HttpMethod(str, Enum):
    """HTTP verbs a request can use"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


class BaseRequest(BaseModel):
    """
    Base definition for outbound requests.

    Attributes:
        method: HTTP verb
        request_path: Path (and query) relative to the API base URL
        uri: Absolute target; when empty the transport resolves it from request_path
        body: Raw request body, empty for most GET requests
        pagination: Optional page cursor
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(default=HttpMethod.GET, description="HTTP verb")
    request_path: str = Field(default="", description="Path relative to the API base URL")
    uri: str = Field(default="", description="Absolute request target")
    body: str = Field(default="", description="Raw request body")
    pagination: Optional[Pagination] = Field(default=None, description="Page cursor")

    def is_valid_request(self) -> bool:
        """
        Default request evaluation.

        Subclasses override this to check each endpoint's requirements. The
        base request has no constraints.

        Returns:
            True if the request is valid, False otherwise
        """
        return True

    @staticmethod
    def _if_present(field: Optional[T], constraint: Callable[[T], bool]) -> bool:
        """
        Evaluate constraint against field, provided the field is present.

        Returns:
            True if field is None or satisfies constraint
        """
        return field is None or bool(constraint(field))

    @staticmethod
    def _all_or_nothing(*fields: Any) -> bool:
        """
        Require the given fields to be all present or all absent (None).

        Only None counts as absent; an empty string is present.

        Returns:
            True if no fields were given, or every field's presence matches the first one's
        """
        if not fields:
            return True
        # every field must agree with the presence/absence of the first
        first_present = fields[0] is not None
        return all((field is not None) == first_present for field in fields)
