"""Compress a set of dates into display ranges such as ``01/01–03/01, 05/01``.

The year is not rendered, so a run crossing New Year reads ``30/12–02/01``.
That ambiguity is accepted for the gate's reports.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Union

from ..core.constants import DATE_RANGE_SEPARATOR, DISPLAY_DATE_FORMAT, NO_DATA
from .datetime_utils import parse_iso_date

DateLike = Union[str, date]


def _as_date(value: DateLike) -> date:
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def format_display_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def _format_run(start: date, end: date) -> str:
    if start == end:
        return format_display_date(start)
    return f"{format_display_date(start)}{DATE_RANGE_SEPARATOR}{format_display_date(end)}"


def summarize_dates(dates: Iterable[DateLike]) -> str:
    days = sorted({_as_date(d) for d in dates})
    if not days:
        return NO_DATA

    runs: list[str] = []
    run_start = prev = days[0]
    # None closes the final run as if it were followed by an infinite gap.
    for current in days[1:] + [None]:
        if current is not None and current - prev <= timedelta(days=1):
            prev = current
            continue
        runs.append(_format_run(run_start, prev))
        if current is not None:
            run_start = prev = current

    return ", ".join(runs)
