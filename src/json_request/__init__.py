"""Make JSON calls to HTTP servers.

json_request exports request(), which serializes a payload as the JSON body
of an HTTP request and decodes the JSON body of 2xx responses::

    from dataclasses import dataclass

    import json_request
    from json_request import Method

    @dataclass
    class Ping:
        ping: bool

    @dataclass
    class Pong:
        pong: bool

    pong = json_request.request(
        Method.POST, "http://example.com/ping", Ping(ping=True), Pong
    )

request() returns None when the response status is not 2xx, and raises a
JSONRequestError when the request could not be completed.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, overload

from json_request.codec import Deserializable, JSONCodec, Serializable
from json_request.config import Options
from json_request.error import (
    BodyReadError,
    DecodeError,
    EncodeError,
    JSONRequestError,
    TransportError,
)
from json_request.executor import RequestExecutor
from json_request.http import (
    HttpClient,
    HttpResponse,
    Method,
    MethodLike,
    Request,
    Response,
    StatusClass,
    is_success,
    status_class,
)

__all__ = [
    "BodyReadError",
    "DecodeError",
    "Deserializable",
    "EncodeError",
    "HttpClient",
    "HttpResponse",
    "JSONCodec",
    "JSONRequestError",
    "Method",
    "Options",
    "Request",
    "RequestExecutor",
    "Response",
    "Serializable",
    "StatusClass",
    "TransportError",
    "default_executor",
    "is_success",
    "request",
    "request_text",
    "send",
    "status_class",
]


T = TypeVar("T")

_default_executor: Optional[RequestExecutor] = None


def default_executor() -> RequestExecutor:
    """Returns the executor used by the module-level functions."""
    global _default_executor
    if _default_executor is None:
        _default_executor = RequestExecutor()
    return _default_executor


@overload
def request(
    method: MethodLike, url: str, payload: Any = None, result_type: None = None
) -> Optional[Any]: ...


@overload
def request(
    method: MethodLike,
    url: str,
    payload: Any = None,
    result_type: Callable[[Any], T] = ...,
) -> Optional[T]: ...


def request(
    method: MethodLike,
    url: str,
    payload: Any = None,
    result_type: Optional[Callable[[Any], T]] = None,
) -> Optional[Any]:
    """Make an HTTP request with the default executor.

    See RequestExecutor.request.
    """
    return default_executor().request(method, url, payload, result_type)


def request_text(method: MethodLike, url: str, payload: Any = None) -> Optional[str]:
    """Make an HTTP request with the default executor and return the body
    of a 2xx response as text."""
    return default_executor().request_text(method, url, payload)


def send(method: MethodLike, url: str, payload: Any = None) -> Response:
    """Make an HTTP request with the default executor and return its
    status and body."""
    return default_executor().send(method, url, payload)
