from typing import Optional

import requests

from json_request.error import BodyReadError, TransportError
from json_request.http import HttpClient, HttpResponse, Request


class Client(HttpClient):
    """Transport backed by requests.

    Args:
        session: requests session used to send requests. When omitted, a
            new session is created for each request and closed with its
            response.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session

    def send(self, request: Request) -> HttpResponse:
        session = self.session or requests.Session()
        owned = self.session is None
        try:
            response = session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
                stream=True,
            )
        # See https://requests.readthedocs.io/en/latest/api/#exceptions
        except requests.RequestException as e:
            if owned:
                session.close()
            raise TransportError(e) from e
        except BaseException:
            if owned:
                session.close()
            raise
        return Response(response, session if owned else None)


class Response(HttpResponse):
    def __init__(
        self, response: requests.Response, owner: Optional[requests.Session] = None
    ):
        self.response = response
        self.owner = owner

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def read(self) -> bytes:
        try:
            return self.response.content
        except (requests.RequestException, OSError) as e:
            raise BodyReadError(e) from e

    def close(self):
        try:
            self.response.close()
        finally:
            if self.owner is not None:
                self.owner.close()
