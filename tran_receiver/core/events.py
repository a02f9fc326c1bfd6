"""
Decoding of transfer engine events from JSON lines.

Each non-empty line is one event object, for example::

    {"kind": "file_info", "bytes": 52428800}
    {"kind": "progress", "progress": 0.25}
    {"kind": "finished", "files": ["photos/a.jpg", "notes.txt"], "payload_size": 6186}
    {"kind": "error", "message": "sender closed the connection"}

Lines starting with ``#`` are comments.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tran_receiver.exceptions import EventParseError
from tran_receiver.models.messages import EngineEvent

log = logging.getLogger(__name__)

_adapter = TypeAdapter(EngineEvent)


def parse_event(line: str, line_number: int | None = None) -> EngineEvent:
    """Parses a single JSON event, raising ``EventParseError`` on bad input."""
    try:
        return _adapter.validate_json(line)
    except ValidationError as e:
        where = f" on line {line_number}" if line_number is not None else ""
        raise EventParseError(f"Invalid transfer event{where}:\n{e}") from e


def parse_events(lines: Iterable[str]) -> list[EngineEvent]:
    """Parses every event in ``lines``, skipping blanks and comments."""
    events = []
    for number, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        events.append(parse_event(line, number))
    return events


def load_events(path: Path) -> list[EngineEvent]:
    try:
        with open(path, encoding="utf-8") as f:
            events = parse_events(f)
    except OSError as e:
        raise EventParseError(f"Could not read events file '{path}': {e}") from e
    log.debug(f"Loaded {len(events)} events from {path}")
    return events


async def replay_events(
    events: Iterable[EngineEvent], delay: float = 0.5
) -> AsyncIterator[EngineEvent]:
    """Yields ``events`` one by one, pausing ``delay`` seconds before each."""
    for event in events:
        await asyncio.sleep(delay)
        yield event
