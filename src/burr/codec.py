"""Body codecs: domain objects to wire bytes and back."""

import dataclasses
import json
from typing import Any, Protocol, TypeVar, get_args, get_origin, runtime_checkable

from burr.errors.exceptions import CodecError

T = TypeVar("T")


@runtime_checkable
class Codec(Protocol):
    """Converts request payloads to bytes and response bodies to objects."""

    content_type: str

    def serialize(self, obj: Any) -> bytes: ...

    def deserialize(self, data: bytes, result_type: type[T] | None) -> T: ...


class JsonCodec:
    """JSON codec aware of burr models and plain dataclasses.

    Objects exposing ``to_dict()`` / ``from_dict()`` (the burr models) use those;
    other dataclasses are converted field by field; mappings, lists and scalars
    go through :mod:`json` unchanged.
    """

    content_type = "application/json; charset=utf-8"

    def serialize(self, obj: Any) -> bytes:
        if hasattr(obj, "to_dict"):
            obj = obj.to_dict()
        elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            obj = dataclasses.asdict(obj)

        try:
            return json.dumps(obj).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise CodecError(f"Cannot serialize {type(obj).__name__} payload: {e}") from e

    def deserialize(self, data: bytes, result_type: type[T] | None) -> T:
        """Decode data into result_type.

        ``None`` (or ``Any``/``object``) returns the plain decoded JSON.
        ``list[X]`` and ``dict[str, X]`` decode their items as ``X``.
        """
        try:
            decoded = json.loads(data)
        except (ValueError, TypeError) as e:
            raise CodecError(f"Response body is not valid JSON: {e}") from e

        return self._convert(decoded, result_type)

    def _convert(self, value: Any, result_type: Any) -> Any:
        if result_type is None or result_type is Any or result_type is object:
            return value

        origin = get_origin(result_type)
        if origin is not None:
            return self._convert_generic(value, result_type, origin)

        is_model = hasattr(result_type, "from_dict") or dataclasses.is_dataclass(result_type)
        if is_model and not isinstance(value, dict):
            raise CodecError(f"Expected a JSON object for {result_type.__name__}, got {type(value).__name__}")

        try:
            if hasattr(result_type, "from_dict"):
                return result_type.from_dict(value)
            if dataclasses.is_dataclass(result_type):
                names = {f.name for f in dataclasses.fields(result_type)}
                return result_type(**{k: v for k, v in value.items() if k in names})
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise CodecError(f"Cannot decode response body as {result_type.__name__}: {e}") from e

        if not isinstance(result_type, type):
            raise CodecError(f"Unsupported result type: {result_type!r}")
        if not isinstance(value, result_type):
            raise CodecError(f"Expected {result_type.__name__} body, got {type(value).__name__}")
        return value

    def _convert_generic(self, value: Any, result_type: Any, origin: Any) -> Any:
        args = get_args(result_type)
        if origin is list:
            if not isinstance(value, list):
                raise CodecError(f"Expected list body, got {type(value).__name__}")
            item_type = args[0] if args else None
            return [self._convert(item, item_type) for item in value]
        if origin is dict:
            if not isinstance(value, dict):
                raise CodecError(f"Expected dict body, got {type(value).__name__}")
            item_type = args[1] if len(args) == 2 else None
            return {key: self._convert(item, item_type) for key, item in value.items()}
        raise CodecError(f"Unsupported result type: {result_type!r}")
