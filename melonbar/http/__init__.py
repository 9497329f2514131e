"""
HTTP Package

Request model, response wrapper, post-processor type and the client contract
implemented by transports.
"""

from melonbar.http.client import HttpClient
from melonbar.http.request import BaseRequest, HttpMethod
from melonbar.http.requests import describe_request
from melonbar.http.response import PostProcessor, Response, map_present

__all__ = [
    "BaseRequest",
    "HttpClient",
    "HttpMethod",
    "PostProcessor",
    "Response",
    "describe_request",
    "map_present",
]
