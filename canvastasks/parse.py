"""
Parsing (iCalendar feed text -> EventRecord list).

- Splits the feed into BEGIN:VEVENT / END:VEVENT blocks
- Extracts SUMMARY, DTSTART, DESCRIPTION and URL from each block
- Decodes escaped text values and normalizes the two DTSTART encodings

Important rules (DO NOT CHANGE):
- Parsing is tolerant: malformed input means fewer records, never an exception
- Only the FIRST ':' of a line separates key and value
- No line unfolding, no RRULE / recurrence logic
"""

from __future__ import annotations

import re

from datetime import datetime, timezone

from typing import Any, Dict, List, Optional, Tuple

from canvastasks.model import EventRecord


BEGIN_EVENT = "BEGIN:VEVENT"
END_EVENT = "END:VEVENT"

# 20240115T140000Z
_UTC_DATETIME_RE = re.compile(r"(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})Z")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def unescape(raw: str) -> str:
    """
    Decode backslash escapes in a text value.

    The replacements run in a fixed order; "\\\\" is collapsed only after
    the single-character escapes are resolved.
    """
    return (
        raw.replace("\\n", "\n").replace("\\,", ",").replace("\\;", ";").replace("\\\\", "\\").replace("\\r", "\r")
    )


def _as_local(naive: datetime) -> Optional[datetime]:
    # Conversion can leave the supported year range near year 1 / 9999
    try:
        return naive.astimezone()
    except (ValueError, OverflowError):
        return None


def _generic_date(raw: str) -> Optional[datetime]:
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError:
        return None

    # Naive values are wall-clock times of this machine
    if dt.tzinfo is None:
        return _as_local(dt)
    return dt


def parse_date(raw: str) -> Optional[datetime]:
    """
    Convert a DTSTART value into a timezone-aware datetime.

    - "20240115T140000Z"    -> UTC instant
    - "20240115"            -> local midnight (all-day events)
    - "2024-01-15T14:00:00" -> best-effort ISO parse (extended form only)

    Returns None instead of raising when the value cannot be parsed.
    """
    if "T" in raw:
        m = _UTC_DATETIME_RE.fullmatch(raw)
        if not m:
            # Compact values without a trailing Z are not accepted
            return _generic_date(raw) if "-" in raw else None
        year, month, day, hour, minute, second = (int(x) for x in m.groups())
        try:
            return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
        except ValueError:
            return None

    if len(raw) == 8:
        try:
            naive = datetime(int(raw[0:4]), int(raw[4:6]), int(raw[6:8]))
        except ValueError:
            return None
        return _as_local(naive)

    return _generic_date(raw)


def parse_field_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split one 'KEY:value' line into (lowercased key, raw value).

    Returns None for lines without ':'.
    """
    idx = line.find(":")
    if idx == -1:
        return None
    return line[:idx].lower(), line[idx + 1 :]


def _apply_field(line: str, fields: Dict[str, Any]) -> None:
    """
    Store a recognized field of the current block; everything else is ignored.
    """
    parsed = parse_field_line(line)
    if parsed is None:
        return

    key, value = parsed

    if key == "summary":
        fields["summary"] = unescape(value)
    elif key == "dtstart":
        fields["dtstart_raw"] = value
        fields["dtstart"] = parse_date(value)
    elif key == "description":
        fields["description"] = unescape(value)
    elif key == "url":
        fields["url"] = value


def _record_from_fields(fields: Dict[str, Any]) -> Optional[EventRecord]:
    # A block needs a non-empty SUMMARY and a DTSTART line to count
    summary = fields.get("summary")
    if not summary or "dtstart_raw" not in fields:
        return None

    return EventRecord(
        summary=str(summary),
        start_raw=str(fields["dtstart_raw"]),
        start=fields.get("dtstart"),
        description=fields.get("description"),
        url=fields.get("url"),
    )


# ---------------------------------------------------------------------------
# Feed parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_feed(text: str) -> List[EventRecord]:
    """
    Parse a complete feed and return one EventRecord per valid VEVENT block.

    Two states: outside a block and inside a block. Lines outside a block
    are discarded, and a block without END:VEVENT yields nothing.
    """
    records: List[EventRecord] = []

    fields: Dict[str, Any] = {}
    in_event = False

    for raw_line in text.split("\n"):
        # strip() also removes the '\r' of CRLF line endings
        line = raw_line.strip()

        if line == BEGIN_EVENT:
            fields = {}
            in_event = True
        elif line == END_EVENT and in_event:
            record = _record_from_fields(fields)
            if record is not None:
                records.append(record)
            in_event = False
        elif in_event:
            _apply_field(line, fields)

    return records
