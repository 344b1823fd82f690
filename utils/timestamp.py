"""Timestamp and tick-delay helpers."""

import time
from datetime import datetime, timezone


def now_micros():
    """Wall clock in microseconds since the Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """ISO 8601 UTC timestamp with microsecond precision."""
    if epoch_us is None:
        epoch_us = now_micros()
    moment = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def delay_seconds(delay_ms):
    """Convert a tick delay in milliseconds to seconds for asyncio."""
    return max(delay_ms, 0) / 1000
