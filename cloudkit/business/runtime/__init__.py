"""Runtime orchestration components."""

from .fanout import FanOutAggregator, SubQueryRequest, SubQueryResult, fan_out
from .rest import (
    HTTPClient,
    HTTPResponse,
    Paginator,
    ResponseAdapter,
    RESTTransport,
    RestEndpointSpec,
    RestRunner,
    ResultPage,
)

__all__ = [
    "FanOutAggregator",
    "SubQueryRequest",
    "SubQueryResult",
    "fan_out",
    "HTTPClient",
    "HTTPResponse",
    "Paginator",
    "ResponseAdapter",
    "RESTTransport",
    "RestEndpointSpec",
    "RestRunner",
    "ResultPage",
]
