import time
from datetime import datetime, timedelta, timezone

EPOCH = datetime(2022, 1, 1, tzinfo=timezone.utc)
EPOCH_NS = int(EPOCH.timestamp()) * 1_000_000_000
NANOSECONDS_PER_TICK = 100


def now(naive: bool = False):
    dt = datetime.now(tz=timezone.utc)
    if not naive:
        return dt
    return dt.replace(tzinfo=None)


def ticks_since_epoch(moment: datetime = None) -> int:
    """Elapsed 100ns ticks between the epoch and ``moment`` (default: now)."""
    if moment is None:
        return (time.time_ns() - EPOCH_NS) // NANOSECONDS_PER_TICK
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - EPOCH
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * 10_000_000 + delta.microseconds * 10


def from_ticks(ticks: int) -> datetime:
    return EPOCH + timedelta(microseconds=ticks // 10)
