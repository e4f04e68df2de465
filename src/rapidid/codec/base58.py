"""Order-preserving base58 over fixed-width big-endian byte strings.

The alphabet is sorted by ASCII code point, so two payloads of the same width
padded to the same number of characters compare lexically the same way their
bytes compare numerically.
"""

from rapidid.errors import InvalidEncodingError

# Drops 0, O, I and l, which are easily confused with one another.
ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(ALPHABET)

_DECODE_TABLE = {char: index for index, char in enumerate(ALPHABET)}


def encode_int(num: int, pad_to: int = None) -> str:
    """Convert a non-negative integer to a base58 string."""
    if num < 0:
        raise ValueError("base58 only supports unsigned integers")

    digits = []
    while num > 0:
        num, rem = divmod(num, BASE)
        digits.append(ALPHABET[rem])
    encoded = "".join(reversed(digits)) or ALPHABET[0]
    if pad_to is not None and pad_to > len(encoded):
        encoded = ALPHABET[0] * (pad_to - len(encoded)) + encoded
    return encoded


def decode_int(text: str) -> int:
    """Convert a base58 string back to an integer."""
    num = 0
    for char in text:
        digit = _DECODE_TABLE.get(char)
        if digit is None:
            raise InvalidEncodingError(
                f"invalid identifier: {char!r} is not a valid base58 character"
            )
        num = num * BASE + digit
    return num


def b58encode(data: bytes, pad_to: int = None) -> str:
    return encode_int(int.from_bytes(data, "big"), pad_to=pad_to)


def b58decode(text: str, length: int = 0) -> bytes:
    """Decode ``text`` into at least ``length`` big-endian bytes."""
    num = decode_int(text)
    size = max(length, (num.bit_length() + 7) // 8)
    return num.to_bytes(size, "big")
