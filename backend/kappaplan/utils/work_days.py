"""
Work-day arithmetic for absence records.
"""

from datetime import date, timedelta
from typing import Iterable


def count_work_days(start: date, end: date, holidays: Iterable[date] = ()) -> int:
    """
    Count Monday-Friday days in the inclusive range [start, end],
    skipping the given holidays. Returns 0 when end is before start.
    """
    if end < start:
        return 0

    holiday_set = set(holidays)
    total = 0
    current = start
    while current <= end:
        if current.weekday() < 5 and current not in holiday_set:
            total += 1
        current += timedelta(days=1)
    return total
