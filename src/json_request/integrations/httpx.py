from typing import Optional

import httpx

from json_request.error import BodyReadError, TransportError
from json_request.http import HttpClient, HttpResponse, Request

# Errors raised by httpx that do not derive from httpx.HTTPError.
# See https://www.python-httpx.org/exceptions/
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.CookieConflict)
_READ_ERRORS = (httpx.HTTPError, httpx.StreamError)


class Client(HttpClient):
    """Transport backed by httpx.

    Args:
        client: httpx client used to send requests. When omitted, a new
            client is created for each request and closed with its
            response.
    """

    def __init__(self, client: Optional[httpx.Client] = None):
        self.client = client

    def send(self, request: Request) -> HttpResponse:
        client = self.client or httpx.Client()
        owned = self.client is None
        try:
            req = client.build_request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.body,
            )
            response = client.send(req, stream=True)
        except _TRANSPORT_ERRORS as e:
            if owned:
                client.close()
            raise TransportError(e) from e
        except BaseException:
            if owned:
                client.close()
            raise
        return Response(response, client if owned else None)


class Response(HttpResponse):
    def __init__(self, response: httpx.Response, owner: Optional[httpx.Client] = None):
        self.response = response
        self.owner = owner

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def read(self) -> bytes:
        try:
            return self.response.read()
        except _READ_ERRORS as e:
            raise BodyReadError(e) from e

    def close(self):
        try:
            self.response.close()
        finally:
            if self.owner is not None:
                self.owner.close()
