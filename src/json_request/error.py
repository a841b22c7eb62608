from typing import Optional


class JSONRequestError(Exception):
    """Base class for json_request exceptions.

    Every error wraps the exception raised by the underlying library,
    available as the ``inner`` attribute (and as ``__cause__`` when raised
    by json_request itself).
    """

    inner: Optional[BaseException]

    def __init__(self, inner: Optional[BaseException] = None, message: str = ""):
        self.inner = inner
        if not message:
            message = str(inner) if inner is not None else ""
        super().__init__(message)

    def __repr__(self):
        return f"{type(self).__name__}({self.inner!r})"


class TransportError(JSONRequestError, ConnectionError):
    """The request could not be sent or no response was received (DNS,
    refused connection, malformed URL, protocol violation, ...)."""


class EncodeError(JSONRequestError, ValueError):
    """The payload could not be serialized to JSON. No request was sent."""


class DecodeError(JSONRequestError, ValueError):
    """The body of a successful response could not be decoded into the
    requested type."""


class BodyReadError(JSONRequestError, IOError):
    """An I/O error occurred while reading the response body."""
