from datetime import date, time

import pytest

from src.gate_attendance.gate_attendance.common.datetime_utils import iter_days, parse_clock, try_parse_iso_date


def test_try_parse_iso_date_reads_day_prefix():
    assert try_parse_iso_date("2024-01-05") == date(2024, 1, 5)
    assert try_parse_iso_date("2024-01-05T08:00:00") == date(2024, 1, 5)


@pytest.mark.parametrize("value", [None, "", "05/01/2024", "2024-13-01", "not a date"])
def test_try_parse_iso_date_returns_none_for_bad_values(value):
    assert try_parse_iso_date(value) is None


def test_parse_clock():
    assert parse_clock("07:30") == time(7, 30)
    assert parse_clock("8:05:09") == time(8, 5, 9)
    with pytest.raises(ValueError):
        parse_clock("0730")


def test_iter_days_is_inclusive_and_empty_when_reversed():
    assert list(iter_days(date(2024, 2, 28), date(2024, 3, 1))) == [
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
    ]
    assert list(iter_days(date(2024, 3, 2), date(2024, 3, 1))) == []


def test_iter_days_stops_at_the_last_representable_day():
    assert list(iter_days(date.max, date.max)) == [date.max]
