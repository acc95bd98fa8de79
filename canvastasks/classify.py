"""
Task classification.

Derives a course identifier and a task type from an event title.
Both functions are total: an absent or unmatched title falls back to
"Unknown Course" / "task".
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from canvastasks.model import (
    TYPE_ASSIGNMENT,
    TYPE_EXAM,
    TYPE_LECTURE,
    TYPE_QUIZ,
    TYPE_TASK,
    UNKNOWN_COURSE,
)


# Course codes in brackets like [eng_100_120258_252389]
_BRACKET_RE = re.compile(r"\[([^\]]+)\]")

_COURSE_PATTERNS = [
    re.compile(r"(eng_\d+)", re.IGNORECASE),
    re.compile(r"(ece_\d+)", re.IGNORECASE),
    re.compile(r"(rhet_\d+)", re.IGNORECASE),
    re.compile(r"(cs_\d+)", re.IGNORECASE),
    re.compile(r"(math_\d+)", re.IGNORECASE),
]

# Checked in order, first hit wins
_TYPE_KEYWORDS = [
    (TYPE_EXAM, ("exam", "final")),
    (TYPE_LECTURE, ("lecture", "class")),
    (TYPE_ASSIGNMENT, ("assignment", "homework")),
    (TYPE_QUIZ, ("quiz", "test")),
]


def extract_course(title: Optional[str]) -> str:
    if not title:
        return UNKNOWN_COURSE

    m = _BRACKET_RE.search(title)
    if m:
        return m.group(1)

    for pattern in _COURSE_PATTERNS:
        m = pattern.search(title)
        if m:
            return m.group(1)

    return UNKNOWN_COURSE


def determine_task_type(title: Optional[str]) -> str:
    if not title:
        return TYPE_TASK

    lower = title.lower()
    for task_type, keywords in _TYPE_KEYWORDS:
        if any(k in lower for k in keywords):
            return task_type

    return TYPE_TASK


def classify(title: Optional[str]) -> Tuple[str, str]:
    """
    Return (course, type) for a title.
    """
    return extract_course(title), determine_task_type(title)
