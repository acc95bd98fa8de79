"""
Pipeline: feed text -> records -> classified tasks -> upcoming tasks.

Every function here is pure. The reference time is passed in by the
caller, so the same input always gives the same output.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from canvastasks.classify import classify
from canvastasks.model import UNTITLED_TASK, EventRecord, Task
from canvastasks.parse import parse_feed
from canvastasks.window import WINDOW_DAYS, filter_window


def build_task(record: EventRecord) -> Task:
    course, task_type = classify(record.summary)
    return Task(
        title=record.summary or UNTITLED_TASK,
        date=record.start,
        description=record.description or "",
        url=record.url or "",
        course=course,
        type=task_type,
    )


def build_tasks(records: Iterable[EventRecord]) -> list[Task]:
    return [build_task(r) for r in records]


def load_tasks(text: str, now: datetime, days: int = WINDOW_DAYS) -> list[Task]:
    """
    Parse a full feed and return the tasks of the next `days` days, sorted by date.
    """
    return filter_window(build_tasks(parse_feed(text)), now, days)
