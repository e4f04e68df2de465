class BaseError(Exception):
    status_code = 500  # Default to Internal Server Error

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class InternalServerError(BaseError):
    status_code = 500


class BadRequestError(BaseError):
    status_code = 400


class IdentifierError(BadRequestError, ValueError):
    """Raised for any identifier that cannot be built, parsed or scanned."""


class PrefixInvalidError(IdentifierError):
    def __init__(self, prefix, reason):
        self.prefix = prefix
        super().__init__(f"invalid prefix {prefix!r}: {reason}")


class BytesSizeMismatchError(IdentifierError):
    def __init__(self, length, expected):
        self.length = length
        super().__init__(
            f"invalid identifier bytes; must have at least length {expected}, got {length}"
        )


class StringSizeMismatchError(IdentifierError):
    def __init__(self, length, expected):
        self.length = length
        super().__init__(
            f"invalid identifier string; must have at least {expected} characters, got {length}"
        )


class InvalidEncodingError(IdentifierError):
    pass


class UnsupportedScanTypeError(IdentifierError, TypeError):
    def __init__(self, value):
        self.value_type = type(value)
        super().__init__(f"unable to scan type {self.value_type.__name__} into Identifier")


class EntropyError(InternalServerError):
    """The platform randomness source failed. Not recoverable."""
