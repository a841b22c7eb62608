"""HTTP vocabulary shared by the executor and the transport integrations."""

import enum
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, Union


@enum.unique
class Method(str, enum.Enum):
    """Standard HTTP request methods.

    Plain strings are accepted wherever a Method is expected, so extension
    methods can still be sent.
    """

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __repr__(self):
        return self.value

    def __str__(self):
        return self.value


MethodLike = Union[Method, str]


@enum.unique
class StatusClass(enum.Enum):
    """Classes of HTTP response status codes."""

    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5
    UNSPECIFIED = 0

    def __str__(self):
        return self.name


def status_class(code: int) -> StatusClass:
    """Returns the class of an HTTP response status code."""
    category = code // 100
    if category == 1:  # 1xx informational
        return StatusClass.INFORMATIONAL
    elif category == 2:  # 2xx success
        return StatusClass.SUCCESS
    elif category == 3:  # 3xx redirection
        return StatusClass.REDIRECTION
    elif category == 4:  # 4xx client error
        return StatusClass.CLIENT_ERROR
    elif category == 5:  # 5xx server error
        return StatusClass.SERVER_ERROR

    return StatusClass.UNSPECIFIED


def is_success(code: int) -> bool:
    return status_class(code) is StatusClass.SUCCESS


def method_name(method: MethodLike) -> str:
    if isinstance(method, Method):
        return method.value
    return str(method)


@dataclass(frozen=True)
class Request:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes

    @property
    def status_class(self) -> StatusClass:
        return status_class(self.status)

    @property
    def ok(self) -> bool:
        return is_success(self.status)


class HttpResponse(Protocol):
    """Protocol for responses returned by transport integrations.

    The body is not read until read() is called, so responses that are not
    needed can be closed without draining them.
    """

    @property
    def status_code(self) -> int: ...

    def read(self) -> bytes:
        """Read the whole body. Raises BodyReadError on I/O failures."""
        ...

    def close(self) -> None:
        """Release the connection."""
        ...


class HttpClient(Protocol):
    """Protocol for HTTP transports."""

    def send(self, request: Request) -> HttpResponse:
        """Send a request and return the response once its headers are
        received. Raises TransportError when no response could be obtained."""
        ...
