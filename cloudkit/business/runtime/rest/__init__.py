"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResponse
from .paginator import Paginator, ResultPage
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, decode_json, with_page_token
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "Paginator",
    "ResultPage",
    "decode_json",
    "with_page_token",
]
