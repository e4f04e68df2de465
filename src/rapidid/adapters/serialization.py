import orjson

from rapidid.codec.identifier import Identifier, from_bytes, parse
from rapidid.errors import InvalidEncodingError


def marshal_text(identifier: Identifier) -> bytes:
    return identifier.to_text().encode("ascii")


def unmarshal_text(data) -> Identifier:
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            data = bytes(data).decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(f"invalid identifier text: {e}") from e
    return parse(data)


def marshal_binary(identifier: Identifier) -> bytes:
    return identifier.bytes()


def unmarshal_binary(data) -> Identifier:
    return from_bytes(data)


def marshal_json(identifier: Identifier) -> bytes:
    return orjson.dumps(identifier.to_text())


def unmarshal_json(data) -> Identifier:
    try:
        value = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise InvalidEncodingError(f"invalid identifier JSON: {e}") from e
    if not isinstance(value, str):
        raise InvalidEncodingError(
            f"invalid identifier JSON: expected a string, got {type(value).__name__}"
        )
    return parse(value)


def orjson_default(obj):
    """``default`` hook for orjson.dumps that renders identifiers as text."""
    if isinstance(obj, Identifier):
        return obj.to_text()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def dumps(obj, option=None) -> bytes:
    return orjson.dumps(obj, default=orjson_default, option=option)
