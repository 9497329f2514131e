"""Helpers for working with BaseRequest instances."""

from typing import Optional

from melonbar.http.request import BaseRequest


def describe_request(request: Optional[BaseRequest]) -> str:
    """
    Render a short, log-friendly summary of a request.

    Example:
        >>> describe_request(BaseRequest(uri="/products"))
        'BaseRequest(uri=/products, method=GET, body=)'
    """
    if request is None:
        return "None"
    return (
        f"{type(request).__name__}(uri={request.uri}, "
        f"method={request.method.value}, body={request.body})"
    )
