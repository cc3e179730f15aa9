"""
Timestamp helpers. Stored timestamps are epoch milliseconds.
"""

import time
from datetime import datetime, timezone


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def file_timestamp(milliseconds: bool = False) -> str:
    """
    UTC timestamp safe for file names, e.g. ``2026-01-27T09-15-00``,
    or ``2026-01-27T09-15-00-123Z`` with milliseconds.
    """
    now = datetime.now(timezone.utc)
    stamp = now.strftime("%Y-%m-%dT%H-%M-%S")
    if milliseconds:
        stamp += f"-{now.microsecond // 1000:03d}Z"
    return stamp


def iso_now() -> str:
    """Current UTC time in ISO 8601 format."""
    return datetime.now(timezone.utc).isoformat()
