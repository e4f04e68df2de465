import secrets

from rapidid.errors import EntropyError

RANDOM_BYTES_LENGTH = 12


def random_bytes(size: int = RANDOM_BYTES_LENGTH) -> bytes:
    """Read ``size`` bytes from the platform CSPRNG."""
    try:
        return secrets.token_bytes(size)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"unable to read {size} random bytes: {e}") from e
