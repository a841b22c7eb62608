"""Conversion between Python values and JSON bodies."""

from __future__ import annotations

import dataclasses
import json
import types
from collections.abc import Mapping, Sequence
from typing import (
    Any,
    Callable,
    Dict,
    Literal,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from typing_extensions import Protocol, TypeAlias, runtime_checkable

from json_request.error import DecodeError, EncodeError

T = TypeVar("T")


@runtime_checkable
class Serializable(Protocol):
    """Objects that know how to turn themselves into a JSON-compatible
    value (dict, list, str, int, float, bool or None)."""

    def to_json(self) -> Any: ...


@runtime_checkable
class Deserializable(Protocol):
    """Types that know how to build an instance from a decoded JSON value."""

    @classmethod
    def from_json(cls, value: Any) -> Any: ...


ResultType: TypeAlias = Union[Type[T], Callable[[Any], T], None]

_PLAIN_TYPES = (dict, list, str, int, float, bool)


class JSONCodec:
    """Encodes payloads to JSON request bodies and decodes JSON response
    bodies into typed results.

    Args:
        encoding: Text encoding of request and response bodies.
    """

    __slots__ = ("encoding",)

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def encode(self, payload: Any) -> bytes:
        """Serialize a payload to a JSON body.

        Raises:
            EncodeError: if the payload is not representable as JSON.
        """
        try:
            text = json.dumps(payload, default=_to_json, allow_nan=False)
            return text.encode(self.encoding)
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodeError(e) from e

    def decode_text(self, body: bytes) -> str:
        """Decode a body to text, unmodified.

        Raises:
            DecodeError: if the body is not valid in the codec encoding.
        """
        try:
            return body.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(e) from e

    def decode(self, body: bytes, result_type: ResultType[T] = None) -> Any:
        """Decode a JSON body and convert it to result_type.

        When result_type is None (or typing.Any) the plain decoded value is
        returned.

        Raises:
            DecodeError: if the body is not strict JSON (an empty body, NaN
                and Infinity included) or the value does not fit result_type.
                Dataclass fields are converted according to their
                annotations.
        """
        text = self.decode_text(body)
        try:
            value = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise DecodeError(e) from e
        if result_type is None or result_type is Any:
            return value
        try:
            return _convert(value, result_type)
        except (TypeError, ValueError, KeyError, RecursionError) as e:
            raise DecodeError(e) from e


def _to_json(obj: Any) -> Any:
    if isinstance(obj, Serializable):
        return obj.to_json()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _convert(value: Any, result_type: Any) -> Any:
    if result_type is Any or result_type is object:
        return value
    if result_type is None or result_type is type(None):
        if value is not None:
            raise TypeError(f"cannot decode {type(value).__name__} into None")
        return None
    origin = get_origin(result_type)
    if origin is not None:
        return _convert_generic(value, result_type, origin, get_args(result_type))
    if isinstance(result_type, type):
        if isinstance(result_type, Deserializable):
            return result_type.from_json(value)
        if dataclasses.is_dataclass(result_type):
            return _convert_dataclass(value, result_type)
        if result_type in _PLAIN_TYPES:
            return _convert_plain(value, result_type)
    return result_type(value)


def _convert_generic(value: Any, result_type: Any, origin: Any, args: tuple) -> Any:
    if origin is Union or origin is types.UnionType:
        for arg in args:
            try:
                return _convert(value, arg)
            except (TypeError, ValueError, KeyError):
                continue
        raise TypeError(f"cannot decode {type(value).__name__} into {result_type}")

    if origin is Literal:
        if not any(type(value) is type(a) and value == a for a in args):
            raise ValueError(f"{value!r} is not one of {args}")
        return value

    if not isinstance(origin, type):
        raise TypeError(f"cannot decode into {result_type}")

    if issubclass(origin, Mapping):
        _expect(value, dict, result_type)
        key_type, item_type = args if len(args) == 2 else (Any, Any)
        return {
            _convert(k, key_type): _convert(v, item_type) for k, v in value.items()
        }

    if origin is tuple:
        _expect(value, list, result_type)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_convert(v, args[0]) for v in value)
        if args and len(args) != len(value):
            raise TypeError(
                f"cannot decode array of {len(value)} items into {result_type}"
            )
        return tuple(_convert(v, a) for v, a in zip(value, args))

    if issubclass(origin, Sequence) and not issubclass(origin, (str, bytes)):
        _expect(value, list, result_type)
        item_type = args[0] if args else Any
        return [_convert(v, item_type) for v in value]

    raise TypeError(f"cannot decode into {result_type}")


def _convert_dataclass(value: Any, cls: type) -> Any:
    _expect(value, dict, cls.__name__)
    hints = get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not f.init or f.name not in value:
            continue
        try:
            kwargs[f.name] = _convert(value[f.name], hints.get(f.name, Any))
        except (TypeError, ValueError, KeyError) as e:
            raise TypeError(f"{cls.__name__}.{f.name}: {e}") from e
    return cls(**kwargs)


def _expect(value: Any, json_type: type, target: Any):
    if not isinstance(value, json_type):
        kind = "an object" if json_type is dict else "an array"
        raise TypeError(
            f"cannot decode {type(value).__name__} into {target}: expected {kind}"
        )


def _convert_plain(value: Any, cls: type) -> Any:
    if cls in (int, float) and isinstance(value, bool):
        ok = False
    elif cls is float:
        ok = isinstance(value, (int, float))
    else:
        ok = isinstance(value, cls)
    if not ok:
        raise TypeError(
            f"cannot decode {type(value).__name__} into {cls.__name__}"
        )
    return float(value) if cls is float else value
