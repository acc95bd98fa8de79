"""
Terminal rendering of the upcoming-task list (rich table).

Pure formatting helpers (clean_description, format_date, format_date_range)
are kept separate from render_tasks so they can be tested without a console.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from canvastasks.model import Task
from canvastasks.window import WINDOW_DAYS, window_bounds


DESCRIPTION_LIMIT = 200

TYPE_STYLES = {
    "exam": "bold red",
    "lecture": "blue",
    "assignment": "green",
    "quiz": "yellow",
    "task": "",
}

_WS_RE = re.compile(r"\s+")


def clean_description(description: Optional[str], limit: int = DESCRIPTION_LIMIT) -> str:
    """
    Make a description fit for a one-line preview.

    Removes HTML markup, turns leftover literal "\\n" sequences into spaces,
    collapses whitespace and cuts the text to `limit` characters.
    "..." is appended when the original description was longer than `limit`.
    """
    if not description:
        return ""

    text = BeautifulSoup(description, "html.parser").get_text()
    text = text.replace("\\n", " ")
    text = _WS_RE.sub(" ", text).strip()

    suffix = "..." if len(description) > limit else ""
    return text[:limit] + suffix


def format_date(value: date | datetime) -> str:
    """
    'Monday, January 15, 2024' (datetimes are shown in local time).
    """
    if isinstance(value, datetime):
        value = value.astimezone().date()
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_date_range(now: datetime, days: int = WINDOW_DAYS) -> str:
    start, end = window_bounds(now, days)
    return f"{format_date(start)} - {format_date(end)}"


def _period_label(days: int) -> str:
    return "two weeks" if days == 14 else f"{days} days"


def render_tasks(
    tasks: Iterable[Task],
    now: datetime,
    days: int = WINDOW_DAYS,
    console: Optional[Console] = None,
) -> int:
    """
    Print the task list (or the empty-state message). Returns the number of rows.
    """
    out = console if console is not None else Console()
    rows = list(tasks)

    if not rows:
        out.print(f"No upcoming tasks in the next {_period_label(days)}")
        return 0

    table = Table(title=f"Upcoming tasks: {format_date_range(now, days)}", box=box.SIMPLE)
    table.add_column("Date")
    table.add_column("Course", style="bold cyan")
    table.add_column("Task")
    table.add_column("Type")
    table.add_column("Description")
    table.add_column("Link")

    for task in rows:
        style = TYPE_STYLES.get(task.type, "")
        table.add_row(
            format_date(task.date) if task.date is not None else "",
            Text(task.course),
            Text(task.title, style=style),
            Text(task.type, style=style),
            Text(clean_description(task.description)),
            Text(task.url, style=Style(link=task.url)) if task.url else Text(""),
        )

    out.print(table)
    return len(rows)
