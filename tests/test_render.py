"""
Tests for the terminal rendering helpers.
"""

import io
import unittest
from datetime import date, datetime

from rich.console import Console

from canvastasks.model import Task
from canvastasks.render import clean_description, format_date, format_date_range, render_tasks


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, color_system=None), buf


class TestCleanDescription(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(clean_description(""), "")
        self.assertEqual(clean_description(None), "")

    def test_strips_html_and_whitespace(self) -> None:
        self.assertEqual(clean_description("<p>Read   <b>chapter</b>\n 2</p>"), "Read chapter 2")

    def test_literal_backslash_n(self) -> None:
        self.assertEqual(clean_description("line one\\nline two"), "line one line two")

    def test_truncates_long_text(self) -> None:
        text = "a" * 250
        out = clean_description(text)
        self.assertEqual(out, "a" * 200 + "...")

    def test_exactly_limit_not_truncated(self) -> None:
        self.assertEqual(clean_description("b" * 200), "b" * 200)


class TestFormatDate(unittest.TestCase):
    def test_date(self) -> None:
        self.assertEqual(format_date(date(2024, 1, 5)), "Friday, January 5, 2024")

    def test_datetime_uses_local_date(self) -> None:
        dt = datetime(2024, 1, 15, 12).astimezone()
        self.assertEqual(format_date(dt), "Monday, January 15, 2024")

    def test_range(self) -> None:
        now = datetime(2024, 1, 1, 10).astimezone()
        self.assertEqual(format_date_range(now), "Monday, January 1, 2024 - Monday, January 15, 2024")


class TestRenderTasks(unittest.TestCase):
    def test_empty_message(self) -> None:
        console, buf = _console()
        n = render_tasks([], datetime(2024, 1, 1), console=console)
        self.assertEqual(n, 0)
        self.assertIn("No upcoming tasks in the next two weeks", buf.getvalue())

    def test_empty_message_custom_days(self) -> None:
        console, buf = _console()
        render_tasks([], datetime(2024, 1, 1), days=7, console=console)
        self.assertIn("No upcoming tasks in the next 7 days", buf.getvalue())

    def test_rows(self) -> None:
        console, buf = _console()
        task = Task(
            title="Exam 1 [math_241]",
            date=datetime(2024, 1, 10, 12).astimezone(),
            description="<p>Covers chapters 1-3</p>",
            url="https://canvas.example.edu/e/1",
            course="math_241",
            type="exam",
        )
        n = render_tasks([task], datetime(2024, 1, 5).astimezone(), console=console)
        out = buf.getvalue()
        self.assertEqual(n, 1)
        # Brackets in titles must not be eaten as markup
        self.assertIn("Exam 1 [math_241]", out)
        self.assertIn("Covers chapters 1-3", out)
        self.assertIn("Wednesday, January 10, 2024", out)
        self.assertIn("https://canvas.example.edu/e/1", out)


if __name__ == "__main__":
    unittest.main()
