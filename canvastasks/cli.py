"""
CLI (Command Line Interface).

This module provides the terminal commands, e.g.:

    canvastasks upcoming --url <feed.ics url>
    canvastasks upcoming --file calendar.ics --now 2024-01-05 --days 7
    canvastasks dump --file calendar.ics

Note:
- The parsing/classification/filter logic lives in canvastasks/pipeline.py
- Output goes through rich; errors are written to stderr
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime

from rich.console import Console

from canvastasks.fetch import REQUEST_TIMEOUT, FeedError, fetch_feed, read_feed
from canvastasks.parse import parse_feed
from canvastasks.pipeline import build_tasks, load_tasks
from canvastasks.render import render_tasks
from canvastasks.window import WINDOW_DAYS


def _consoles() -> tuple[Console, Console]:
    # Created per call so tests that redirect stdout/stderr see the output
    return Console(), Console(stderr=True)


def _parse_now(value: str) -> datetime:
    """
    argparse type for --now: ISO date or datetime, naive values are local time.
    """
    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date/time: {value!r} (expected e.g. 2024-01-05)")
    return dt if dt.tzinfo is not None else dt.astimezone()


def _load_text(args: argparse.Namespace) -> str:
    """
    Get the feed text from --file or --url. Raises FeedError.
    """
    if args.file:
        return read_feed(args.file)
    return fetch_feed(args.url, timeout=args.timeout)


def _cmd_upcoming(args: argparse.Namespace) -> int:
    """
    Show the tasks of the next N days as a table.
    """
    out, err = _consoles()

    if args.days < 0:
        err.print("--days must not be negative.")
        return 1

    try:
        text = _load_text(args)
    except FeedError as exc:
        err.print(f"Failed to load calendar: {exc}", markup=False)
        return 1

    now = args.now if args.now is not None else datetime.now().astimezone()
    tasks = load_tasks(text, now, args.days)
    render_tasks(tasks, now, args.days, console=out)
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """
    Print every parsed task (unfiltered, feed order) as JSON.
    """
    _, err = _consoles()

    try:
        text = _load_text(args)
    except FeedError as exc:
        err.print(f"Failed to load calendar: {exc}", markup=False)
        return 1

    tasks = build_tasks(parse_feed(text))
    print(json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2))
    return 0


def _add_source_arguments(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--url", type=str, help="Calendar feed URL (.ics)")
    src.add_argument("--file", type=str, help="Local .ics file")
    p.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT, help="HTTP timeout in seconds (default: %(default)s)"
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="canvastasks", description="Upcoming tasks from a calendar feed")
    sub = parser.add_subparsers(dest="command", required=True)

    p_upcoming = sub.add_parser("upcoming", help="Show tasks of the next days")
    _add_source_arguments(p_upcoming)
    p_upcoming.add_argument(
        "--now", type=_parse_now, default=None, help="Reference date/time, ISO format (default: current time)"
    )
    p_upcoming.add_argument(
        "--days", type=int, default=WINDOW_DAYS, help="Window length in days (default: %(default)s)"
    )

    p_dump = sub.add_parser("dump", help="Print all parsed tasks as JSON")
    _add_source_arguments(p_dump)

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "upcoming":
        raise SystemExit(_cmd_upcoming(args))
    if args.command == "dump":
        raise SystemExit(_cmd_dump(args))

    raise SystemExit(2)
