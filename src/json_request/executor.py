from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar, overload

from json_request.codec import JSONCodec
from json_request.config import Options
from json_request.http import (
    HttpClient,
    HttpResponse,
    MethodLike,
    Request,
    Response,
    StatusClass,
    method_name,
    status_class,
)
from json_request.integrations import default_client

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestExecutor:
    """Performs single JSON request/response exchanges.

    Each call encodes the payload, sends one request with a
    ``Connection: close`` header, classifies the response status and, for
    2xx responses, decodes the body. Non-2xx responses are not errors:
    request() and request_text() return None for them.

    The executor keeps no per-call state and can be shared between threads
    as long as the underlying client can.
    """

    __slots__ = ("client", "codec", "options")

    def __init__(
        self,
        client: Optional[HttpClient] = None,
        codec: Optional[JSONCodec] = None,
        options: Optional[Options] = None,
    ):
        """Create a new executor.

        Args:
            client: Transport used to send requests. Defaults to the first
                available integration (see json_request.integrations).

            codec: JSON codec. Defaults to a JSONCodec using the encoding
                from options.

            options: Executor settings, Options() by default.
        """
        if client is None:
            client = default_client()
        self.options = options or Options()
        self.client = client
        self.codec = codec or JSONCodec(encoding=self.options.encoding)

    @overload
    def request(
        self,
        method: MethodLike,
        url: str,
        payload: Any = None,
        result_type: None = None,
    ) -> Optional[Any]: ...

    @overload
    def request(
        self,
        method: MethodLike,
        url: str,
        payload: Any,
        result_type: Type[T],
    ) -> Optional[T]: ...

    @overload
    def request(
        self,
        method: MethodLike,
        url: str,
        payload: Any = None,
        *,
        result_type: Callable[[Any], T],
    ) -> Optional[T]: ...

    def request(self, method, url, payload=None, result_type=None):
        """Make an HTTP request with a JSON payload and decode the JSON
        response.

        Args:
            method: HTTP method.

            url: URL of the request. It is not validated, malformed URLs
                surface as TransportError.

            payload: Value serialized as the JSON body of the request. When
                None, the request is sent without a body.

            result_type: Type the response body is decoded into, see
                JSONCodec.decode. The plain JSON value is returned when
                omitted.

        Returns:
            The decoded body of a 2xx response, or None if the response
            status was not 2xx (the body is then left unread).

        Raises:
            EncodeError: if the payload could not be serialized.
            TransportError: if the request could not be sent.
            BodyReadError: if the response body could not be read.
            DecodeError: if the body could not be decoded into result_type.
        """
        body = self._read_success(method, url, payload)
        if body is None:
            return None
        return self.codec.decode(body, result_type)

    def request_text(
        self, method: MethodLike, url: str, payload: Any = None
    ) -> Optional[str]:
        """Like request(), but returns the body of a 2xx response as text
        instead of decoding it as JSON."""
        body = self._read_success(method, url, payload)
        if body is None:
            return None
        return self.codec.decode_text(body)

    def send(self, method: MethodLike, url: str, payload: Any = None) -> Response:
        """Like request(), but returns the status and raw body of the
        response whatever its status class."""
        response = self._exchange(method, url, payload)
        try:
            return Response(status=response.status_code, body=response.read())
        finally:
            response.close()

    def _read_success(
        self, method: MethodLike, url: str, payload: Any
    ) -> Optional[bytes]:
        response = self._exchange(method, url, payload)
        try:
            if status_class(response.status_code) is not StatusClass.SUCCESS:
                return None
            return response.read()
        finally:
            response.close()

    def _exchange(self, method: MethodLike, url: str, payload: Any) -> HttpResponse:
        headers: Dict[str, str] = {"Connection": "close"}
        body: Optional[bytes] = None
        if payload is not None:
            body = self.codec.encode(payload)
            headers["Content-Type"] = self.options.content_type

        request = Request(method_name(method), url, headers, body)
        logger.debug("sending %s request to %s", request.method, request.url)
        response = self.client.send(request)
        logger.debug(
            "received %d response from %s %s",
            response.status_code,
            request.method,
            request.url,
        )
        return response
