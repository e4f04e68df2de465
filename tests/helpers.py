from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from rapidid.codec.identifier import BYTE_LENGTH
from rapidid.utilities.time_and_date import EPOCH

FIXED_TIME = datetime(2024, 6, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
ZERO_PAYLOAD = bytes(BYTE_LENGTH)


def patch_random_bytes(testcase, *values):
    """Make identifier generation use ``values`` in order instead of the CSPRNG."""
    patcher = patch("rapidid.codec.identifier.random_bytes")
    mock_random = patcher.start()
    testcase.addCleanup(patcher.stop)
    if len(values) == 1:
        mock_random.return_value = values[0]
    else:
        mock_random.side_effect = list(values)
    return mock_random


def payload_from_int(value: int) -> bytes:
    return value.to_bytes(BYTE_LENGTH, "big")


# first tick count whose payload no longer fits in 25 base58 characters
ROLLOVER_TICKS = 58**25 // 2**96
BEFORE_ROLLOVER = EPOCH + timedelta(microseconds=ROLLOVER_TICKS // 10 - 1)
AFTER_ROLLOVER = EPOCH + timedelta(microseconds=ROLLOVER_TICKS // 10 + 1)
