"""
Helpers for "year-week" bucket keys such as ``2026-KW05``.
"""

import re
from datetime import date
from typing import Tuple

WEEK_KEY_PATTERN = re.compile(r"^(?P<year>\d{4})-(?:KW|W)(?P<week>\d{1,2})$")
WEEKS_PER_YEAR = 52


def parse_week_key(key: str) -> Tuple[int, int]:
    """
    Split a week key into (year, week number).

    Raises:
        ValueError: if the key is not of the form ``YYYY-KWnn`` / ``YYYY-Wnn``
    """
    match = WEEK_KEY_PATTERN.match(key or "")
    if not match:
        raise ValueError(f"Invalid week key: {key!r}")
    week = int(match.group("week"))
    if not 1 <= week <= 53:
        raise ValueError(f"Invalid week number in key: {key!r}")
    return int(match.group("year")), week


def format_week_key(year: int, week: int) -> str:
    """Build the canonical ``YYYY-KWnn`` key."""
    return f"{year}-KW{week:02d}"


def week_key_for_date(day: date) -> str:
    """ISO calendar week key for a date."""
    iso_year, iso_week, _ = day.isocalendar()
    return format_week_key(iso_year, iso_week)


def is_week_of_year(key: str, year: int) -> bool:
    """True when the key is a valid week key belonging to ``year``."""
    try:
        key_year, _ = parse_week_key(key)
    except ValueError:
        return False
    return key_year == year
