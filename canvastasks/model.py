"""
Central data model definitions used across the project.

This module defines the canonical structure of EventRecord and Task objects so that:
- the parser, the classifier and the window filter share the same field names
- data handed to the renderer is read-only (frozen dataclasses)
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


UNTITLED_TASK = "Untitled Task"
UNKNOWN_COURSE = "Unknown Course"

# Task type tags (closed set)
TYPE_EXAM = "exam"
TYPE_LECTURE = "lecture"
TYPE_ASSIGNMENT = "assignment"
TYPE_QUIZ = "quiz"
TYPE_TASK = "task"

TASK_TYPES = (TYPE_EXAM, TYPE_LECTURE, TYPE_ASSIGNMENT, TYPE_QUIZ, TYPE_TASK)


@dataclass(frozen=True)
class EventRecord:
    """
    Represents one BEGIN:VEVENT ... END:VEVENT block of the feed.

    Only created when the block had both a SUMMARY and a DTSTART line.
    `start` is None when DTSTART could not be parsed.
    """

    summary: str
    start_raw: str
    start: Optional[datetime]
    description: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class Task:
    """
    Represents one classified calendar entry as shown to the user.
    """

    title: str
    date: Optional[datetime]
    description: str
    url: str
    course: str
    type: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "date": self.date.isoformat() if self.date is not None else None,
            "description": self.description,
            "url": self.url,
            "course": self.course,
            "type": self.type,
        }
