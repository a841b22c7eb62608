import socket

import pytest
import requests

from json_request import (
    BodyReadError,
    Method,
    Request,
    RequestExecutor,
    TransportError,
)
from json_request.integrations.requests import Client, Response
from json_request.test import PingServer


@pytest.fixture
def server():
    with PingServer() as server:
        yield server


def unused_port() -> int:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def test_send_request(server):
    response = Client().send(
        Request(
            "POST",
            server.url_for("/echo"),
            {"Connection": "close", "Content-Type": "application/json"},
            b'{"ping": true}',
        )
    )
    try:
        assert response.status_code == 200
        assert response.read() == b'{"ping": true}'
    finally:
        response.close()

    [req] = server.requests
    assert req.method == "POST"
    assert req.path == "/echo"
    assert req.headers["connection"] == "close"
    assert req.headers["content-type"] == "application/json"


def test_send_with_session(server):
    with requests.Session() as session:
        client = Client(session)
        response = client.send(Request("GET", server.url_for("/ping")))
        response.close()
        assert response.status_code == 200


def test_connection_refused():
    url = f"http://127.0.0.1:{unused_port()}/ping"
    with pytest.raises(TransportError) as exc:
        Client().send(Request("GET", url))
    assert isinstance(exc.value.inner, requests.ConnectionError)


@pytest.mark.parametrize("url", ["not a url", "ftp://example.com/", "http://"])
def test_malformed_url(url):
    with pytest.raises(TransportError):
        Client().send(Request("GET", url))


def test_body_read_error():
    class Broken(requests.Response):
        @property
        def content(self):
            raise requests.exceptions.ChunkedEncodingError("connection broken")

    broken = Broken()
    broken.status_code = 200
    response = Response(broken)
    with pytest.raises(BodyReadError) as exc:
        response.read()
    assert isinstance(exc.value.inner, requests.exceptions.ChunkedEncodingError)


def test_executor_with_requests(server):
    executor = RequestExecutor(Client())
    assert executor.request(Method.POST, server.url_for("/ping"), {"ping": True}) == {
        "pong": True
    }
    assert executor.request(Method.GET, server.url_for("/missing")) is None
    assert executor.request_text(Method.GET, server.url_for("/ping")) == '{"pong": true}'


def test_session_closed_on_unexpected_error(monkeypatch):
    sessions = []

    class FailingSession(requests.Session):
        def __init__(self):
            super().__init__()
            self.closed = False
            sessions.append(self)

        def request(self, *args, **kwargs):
            raise RuntimeError("boom")

        def close(self):
            self.closed = True
            super().close()

    monkeypatch.setattr(requests, "Session", FailingSession)
    with pytest.raises(RuntimeError):
        Client().send(Request("GET", "http://example.com/"))
    assert sessions[0].closed
