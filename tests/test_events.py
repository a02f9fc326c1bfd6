import pytest

from tran_receiver.core.events import (
    load_events,
    parse_event,
    parse_events,
    replay_events,
)
from tran_receiver.exceptions import EventParseError
from tran_receiver.models.messages import (
    ErrorMsg,
    FileInfoMsg,
    FinishedMsg,
    ProgressMsg,
)


def test_parse_each_event_kind():
    assert parse_event('{"kind": "file_info", "bytes": 10}') == FileInfoMsg(
        payload_bytes=10
    )
    assert parse_event('{"kind": "progress", "progress": 0.25}') == ProgressMsg(
        progress=0.25
    )
    assert parse_event(
        '{"kind": "finished", "files": ["a", "b/c"], "payload_size": 3}'
    ) == FinishedMsg(files=["a", "b/c"], payload_size=3)
    error = parse_event('{"kind": "error", "message": "boom"}')
    assert error == ErrorMsg(message="boom")


def test_file_info_uses_bytes_field_name():
    event = parse_event('{"kind": "file_info", "bytes": 2048}')
    assert event.payload_bytes == 2048
    assert parse_event('{"kind": "file_info", "payload_bytes": 7}').payload_bytes == 7


def test_out_of_range_progress_is_accepted():
    assert parse_event('{"kind": "progress", "progress": 1.5}').progress == 1.5


@pytest.mark.parametrize(
    "line",
    [
        "not json",
        '{"kind": "nope"}',
        '{"bytes": 10}',
        '{"kind": "file_info", "bytes": -1}',
        '{"kind": "error"}',
    ],
)
def test_invalid_events_raise(line):
    with pytest.raises(EventParseError):
        parse_event(line)


def test_parse_events_skips_blanks_and_comments_and_reports_line():
    lines = [
        "# recorded session",
        "",
        '{"kind": "file_info", "bytes": 10}',
        '{"kind": "bad"}',
    ]
    with pytest.raises(EventParseError, match="line 4"):
        parse_events(lines)
    assert parse_events(lines[:3]) == [FileInfoMsg(payload_bytes=10)]


def test_load_events_from_file(tmp_path):
    path = tmp_path / "events.jsonl"
    path.write_text(
        '{"kind": "file_info", "bytes": 10}\n'
        '{"kind": "progress", "progress": 1.0}\n',
        encoding="utf-8",
    )
    assert [e.kind for e in load_events(path)] == ["file_info", "progress"]


def test_load_events_missing_file(tmp_path):
    with pytest.raises(EventParseError, match="Could not read"):
        load_events(tmp_path / "missing.jsonl")


@pytest.mark.asyncio
async def test_replay_events_yields_in_order():
    events = [FileInfoMsg(payload_bytes=1), ProgressMsg(progress=0.5)]
    received = [event async for event in replay_events(events, delay=0)]
    assert received == events
