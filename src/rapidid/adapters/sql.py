"""Glue between identifiers and database drivers."""

import io
import logging

import asyncpg
from sqlalchemy import Column, LargeBinary
from sqlalchemy.orm import declared_attr
from sqlalchemy.types import TypeDecorator

from rapidid.codec.identifier import (
    BYTE_LENGTH,
    BYTE_LENGTH_WITH_PREFIX,
    ENCODED_LENGTH,
    ENCODED_LENGTH_WITH_PREFIX,
    Identifier,
    from_bytes,
    new,
    parse,
    validate_prefix,
)
from rapidid.errors import (
    BytesSizeMismatchError,
    IdentifierError,
    InvalidEncodingError,
    UnsupportedScanTypeError,
)

logger = logging.getLogger(__name__)

BINARY_LENGTHS = (BYTE_LENGTH, BYTE_LENGTH_WITH_PREFIX)
# payloads grow to 26 characters once the tick count passes 58**25 // 2**96
TEXT_LENGTHS = (
    ENCODED_LENGTH,
    ENCODED_LENGTH + 1,
    ENCODED_LENGTH_WITH_PREFIX,
    ENCODED_LENGTH_WITH_PREFIX + 1,
)


def to_db_value(identifier: Identifier) -> bytes:
    return identifier.bytes()


def scan(src):
    """
    Convert a driver value into an Identifier.
    Accepts None, bytes-like objects, BytesIO buffers and strings; an empty
    value scans to None.
    """
    if src is None:
        return None
    if isinstance(src, str):
        data = src.encode("utf-8")
    elif isinstance(src, (bytes, bytearray, memoryview)):
        data = bytes(src)
    elif isinstance(src, io.BytesIO):
        data = src.getvalue()
    else:
        raise UnsupportedScanTypeError(src)
    return _scan_bytes(data)


def _scan_bytes(data: bytes):
    length = len(data)
    if length == 0:
        return None
    if length in BINARY_LENGTHS:
        logger.debug(f"Scanning {length} bytes as binary identifier")
        return from_bytes(data)
    if length in TEXT_LENGTHS:
        logger.debug(f"Scanning {length} bytes as text identifier")
        try:
            text = data.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(f"invalid identifier text: {e}") from e
        return parse(text)
    raise BytesSizeMismatchError(length, BYTE_LENGTH)


def _encode_bytea(value):
    if isinstance(value, Identifier):
        return to_db_value(value)
    return bytes(value)


def _decode_bytea(data: bytes):
    if len(data) in BINARY_LENGTHS:
        try:
            return from_bytes(data)
        except IdentifierError:
            pass
    return data


async def register_asyncpg_codec(
    conn: asyncpg.Connection, schema: str = "pg_catalog"
):
    """
    Teach an asyncpg connection to send identifiers as bytea and to return
    19 and 23 byte bytea values as identifiers.
    """
    await conn.set_type_codec(
        "bytea",
        schema=schema,
        encoder=_encode_bytea,
        decoder=_decode_bytea,
        format="binary",
    )


class IdentifierType(TypeDecorator):
    """Stores identifiers in their binary form."""

    impl = LargeBinary
    cache_ok = True

    def __init__(self):
        super().__init__(length=BYTE_LENGTH_WITH_PREFIX)

    @property
    def python_type(self):
        return Identifier

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            value = parse(value)
        return to_db_value(value)

    def process_result_value(self, value, dialect):
        return scan(value)


def id_column(prefix: str = "", **kwargs) -> Column:
    validate_prefix(prefix, True)
    kwargs.setdefault("primary_key", True)
    return Column(IdentifierType(), default=lambda: new(prefix), **kwargs)


class IdentifierMixin:
    id_prefix = ""

    @declared_attr
    def id(cls):
        return id_column(cls.id_prefix)
