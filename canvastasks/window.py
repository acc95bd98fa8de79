"""
Time-window filtering.

Keeps tasks whose local calendar date lies in [today, today + N days]
(both ends inclusive) and returns them in chronological order.

Day arithmetic is done on calendar dates, not on fixed 24h offsets,
so DST changes inside the window do not move the bounds.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable

from canvastasks.model import Task


WINDOW_DAYS = 14


def _local_date(dt: datetime) -> date:
    # astimezone() treats naive values as local time
    return dt.astimezone().date()


def window_bounds(now: datetime, days: int = WINDOW_DAYS) -> tuple[date, date]:
    """
    Return (first_day, last_day) of the window that starts on the local date of `now`.
    """
    start = _local_date(now)
    return start, start + timedelta(days=days)


def filter_window(tasks: Iterable[Task], now: datetime, days: int = WINDOW_DAYS) -> list[Task]:
    """
    Filter tasks to the window and sort them by date.

    Tasks without a parseable (or locally representable) date never match.
    The sort is stable, so tasks with the same instant keep their input order.
    """
    start, end = window_bounds(now, days)

    kept: list[Task] = []
    for task in tasks:
        if task.date is None:
            continue
        try:
            day = _local_date(task.date)
        except (ValueError, OverflowError):
            # Instants near year 1 / 9999 may not exist in local time
            continue
        if start <= day <= end:
            kept.append(task)

    kept.sort(key=lambda t: t.date)
    return kept
