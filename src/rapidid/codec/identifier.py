"""
Time ordered identifiers with an optional three letter prefix.

An identifier is 19 raw bytes: 7 bytes of timestamp, counted in 100ns ticks
since 2022-01-01 UTC, followed by 12 random bytes. A prefix such as ``acc``
is stored in front of the payload together with the separator, which makes
the binary form 23 bytes long.

The text form is the prefix and separator unchanged, followed by the payload
in base58, padded to 25 characters. Because the base58 alphabet is sorted the
same way as ASCII, sorting the strings sorts the identifiers by creation time.
"""

import logging
from datetime import datetime
from functools import total_ordering

from rapidid.codec.base58 import b58decode, b58encode
from rapidid.codec.entropy import RANDOM_BYTES_LENGTH, random_bytes
from rapidid.errors import (
    BytesSizeMismatchError,
    InvalidEncodingError,
    PrefixInvalidError,
    StringSizeMismatchError,
)
from rapidid.utilities.time_and_date import from_ticks, ticks_since_epoch

logger = logging.getLogger(__name__)

SEPARATOR = "-"
SEPARATOR_BYTES = SEPARATOR.encode("ascii")
PREFIX_LENGTH = 3
TIME_BYTES_LENGTH = 7
BYTE_LENGTH = TIME_BYTES_LENGTH + RANDOM_BYTES_LENGTH
BYTE_LENGTH_WITH_PREFIX = PREFIX_LENGTH + len(SEPARATOR) + BYTE_LENGTH
ENCODED_LENGTH = 25
ENCODED_LENGTH_WITH_PREFIX = PREFIX_LENGTH + len(SEPARATOR) + ENCODED_LENGTH

_TIMESTAMP_MASK = 0xFFFFFFFFFFFFFF00


@total_ordering
class Identifier:
    __slots__ = ("_raw",)

    def __init__(self, raw: bytes):
        if len(raw) < BYTE_LENGTH:
            raise BytesSizeMismatchError(len(raw), BYTE_LENGTH)
        # bytes() copies mutable buffers, so the caller keeps no handle on ours
        raw = bytes(raw)
        _check_prefix_part(raw[:-BYTE_LENGTH])
        self._raw = raw

    @property
    def payload(self) -> bytes:
        return self._raw[-BYTE_LENGTH:]

    @property
    def prefix(self) -> str:
        """The prefix without its separator, or an empty string."""
        return self._prefix_part().removesuffix(SEPARATOR)

    @property
    def timestamp(self) -> datetime:
        ticks = int.from_bytes(self.payload[:TIME_BYTES_LENGTH], "big")
        return from_ticks(ticks)

    def to_text(self) -> str:
        return self._prefix_part() + b58encode(self.payload, pad_to=ENCODED_LENGTH)

    def _prefix_part(self) -> str:
        return self._raw[:-BYTE_LENGTH].decode("ascii")

    def _sort_key(self):
        return self._raw[:-BYTE_LENGTH], self.payload

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Identifier({self.to_text()!r})"

    def __eq__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash(self._raw)

    def bytes(self) -> bytes:
        return self._raw


def _check_prefix_part(prefix_part: bytes) -> None:
    """Bytes in front of the payload must read as an ASCII prefix and separator."""
    if not prefix_part:
        return
    if not prefix_part.endswith(SEPARATOR_BYTES):
        raise PrefixInvalidError(prefix_part, f"must end with {SEPARATOR!r}")
    try:
        prefix = prefix_part.decode("ascii")
    except UnicodeDecodeError:
        raise PrefixInvalidError(prefix_part, "must only contain ASCII characters")
    validate_prefix(prefix, False)


def validate_prefix(prefix: str, separator_is_invalid: bool) -> None:
    """
    Raise PrefixInvalidError unless ``prefix`` is empty or exactly three
    characters without whitespace or separators.
    When ``separator_is_invalid`` is False a single trailing separator is
    allowed, which is how prefixes appear in parsed text.
    """
    if not separator_is_invalid:
        prefix = prefix.removesuffix(SEPARATOR)
    if SEPARATOR in prefix:
        raise PrefixInvalidError(prefix, f"must not contain {SEPARATOR!r}")
    if any(char.isspace() for char in prefix):
        raise PrefixInvalidError(prefix, "must not contain whitespace")
    if not prefix.isascii():
        raise PrefixInvalidError(prefix, "must only contain ASCII characters")
    if prefix and len(prefix) != PREFIX_LENGTH:
        raise PrefixInvalidError(prefix, f"must be {PREFIX_LENGTH} characters")


def new(prefix: str = "", timestamp: datetime = None) -> Identifier:
    """
    Create an identifier stamped with the current time, or ``timestamp``.
    The prefix must be empty or a 3 letter word without whitespace or hyphens.
    """
    validate_prefix(prefix, True)
    prefix_bytes = prefix.encode("ascii")
    if prefix_bytes:
        prefix_bytes += SEPARATOR_BYTES

    ticks = ticks_since_epoch(timestamp)
    # keep the 56 least significant bits of the tick count
    shifted = (ticks << 8) & _TIMESTAMP_MASK
    time_bytes = shifted.to_bytes(8, "big")[:TIME_BYTES_LENGTH]

    identifier = Identifier(prefix_bytes + time_bytes + random_bytes())
    logger.debug(f"Generated identifier {identifier} at tick {ticks}")
    return identifier


def generate() -> str:
    return generate_with_prefix("")


def generate_with_prefix(prefix: str) -> str:
    """Same as ``str(new(prefix))``, tolerating a trailing separator."""
    return new(prefix.removesuffix(SEPARATOR)).to_text()


def from_bytes(raw: bytes) -> Identifier:
    return Identifier(raw)


def parse(text: str) -> Identifier:
    if not isinstance(text, str):
        raise InvalidEncodingError(
            f"invalid identifier: expected str, got {type(text).__name__}"
        )
    index = text.find(SEPARATOR)
    if index == -1:
        prefix, encoded = "", text
    else:
        prefix, encoded = text[: index + 1], text[index + 1 :]

    if len(encoded) < ENCODED_LENGTH:
        raise StringSizeMismatchError(len(encoded), ENCODED_LENGTH)
    validate_prefix(prefix, False)

    payload = b58decode(encoded, BYTE_LENGTH)
    if len(payload) > BYTE_LENGTH:
        raise InvalidEncodingError(
            f"invalid identifier: {encoded!r} encodes more than {BYTE_LENGTH} bytes"
        )
    return from_bytes(prefix.encode("ascii") + payload)
