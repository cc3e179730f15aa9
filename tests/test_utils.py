"""
Week key and work-day helper tests.
"""

from datetime import date

import pytest

from kappaplan.utils.week_keys import (
    parse_week_key,
    format_week_key,
    week_key_for_date,
    is_week_of_year,
)
from kappaplan.utils.work_days import count_work_days
from kappaplan.services.excel_export_service import completion_status
from kappaplan.services.backup_service import is_backup_filename


def test_parse_week_key_accepts_both_spellings():
    assert parse_week_key("2026-KW01") == (2026, 1)
    assert parse_week_key("2026-W7") == (2026, 7)


@pytest.mark.parametrize("key", ["", "2026", "KW01", "2026-KW00", "2026-KW54", "26-KW01", "2026-kw01"])
def test_parse_week_key_rejects_malformed(key):
    with pytest.raises(ValueError):
        parse_week_key(key)


def test_format_and_date_keys():
    assert format_week_key(2026, 3) == "2026-KW03"
    # 2027-01-01 still belongs to ISO week 53 of 2026
    assert week_key_for_date(date(2027, 1, 1)) == "2026-KW53"
    assert is_week_of_year("2026-KW10", 2026)
    assert not is_week_of_year("2025-KW10", 2026)
    assert not is_week_of_year("garbage", 2026)


def test_count_work_days():
    monday = date(2026, 1, 5)
    sunday = date(2026, 1, 11)

    assert count_work_days(monday, sunday) == 5
    assert count_work_days(monday, sunday, [date(2026, 1, 6), date(2026, 1, 10)]) == 4
    assert count_work_days(sunday, sunday) == 0
    assert count_work_days(sunday, monday) == 0


def test_completion_status():
    assert completion_status(0, 0) == "-"
    assert completion_status(15, 25) == "60%"


def test_backup_file_names():
    assert is_backup_filename("kappa-backup-2026-01-01T10-00-00-000Z.json")
    assert not is_backup_filename("../kappa-backup-x.json")
    assert not is_backup_filename("kappa-backup-x.txt")
    assert not is_backup_filename("notes.json")
