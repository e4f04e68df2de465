from rapidid.codec.identifier import (
    Identifier,
    from_bytes,
    generate,
    generate_with_prefix,
    new,
    parse,
    validate_prefix,
)
from rapidid.errors import (
    BytesSizeMismatchError,
    EntropyError,
    IdentifierError,
    InvalidEncodingError,
    PrefixInvalidError,
    StringSizeMismatchError,
    UnsupportedScanTypeError,
)

__all__ = [
    "BytesSizeMismatchError",
    "EntropyError",
    "Identifier",
    "IdentifierError",
    "InvalidEncodingError",
    "PrefixInvalidError",
    "StringSizeMismatchError",
    "UnsupportedScanTypeError",
    "from_bytes",
    "generate",
    "generate_with_prefix",
    "new",
    "parse",
    "validate_prefix",
]
