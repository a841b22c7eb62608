import json

import pytest

from json_request.error import (
    BodyReadError,
    DecodeError,
    EncodeError,
    JSONRequestError,
    TransportError,
)


@pytest.mark.parametrize(
    "cls,base",
    [
        (TransportError, ConnectionError),
        (EncodeError, ValueError),
        (DecodeError, ValueError),
        (BodyReadError, IOError),
    ],
)
def test_error_hierarchy(cls, base):
    err = cls(RuntimeError("boom"))
    assert isinstance(err, JSONRequestError)
    assert isinstance(err, base)


def test_error_wraps_inner_exception():
    try:
        json.loads("{")
    except json.JSONDecodeError as e:
        inner = e
    err = DecodeError(inner)
    assert err.inner is inner
    assert str(err) == str(inner)
    assert repr(err) == f"DecodeError({inner!r})"


def test_error_message_override():
    err = TransportError(OSError("refused"), message="could not connect")
    assert str(err) == "could not connect"
    assert isinstance(err.inner, OSError)


def test_error_without_inner_exception():
    err = BodyReadError()
    assert err.inner is None
    assert str(err) == ""
