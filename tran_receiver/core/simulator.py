"""
A simulated transfer engine.

Produces the same sequence of events a real receive session would: connection
metadata, a stream of progress updates and finally completion or an error.
"""

import asyncio
import logging
import random
from collections.abc import AsyncIterator

from tran_receiver.models.messages import (
    ErrorMsg,
    FileInfoMsg,
    FinishedMsg,
    ProgressMsg,
)

log = logging.getLogger(__name__)

SAMPLE_FILES = [
    "holiday-photos/beach.jpg",
    "holiday-photos/sunset.jpg",
    "holiday-photos/raw/IMG_0001.CR2",
    "report.pdf",
    "music/album/01 - intro.flac",
    "music/album/02 - theme.flac",
    "notes.txt",
]


def sample_files(count: int) -> list[str]:
    """The first ``count`` names of an endless sample listing."""
    files = []
    for i in range(count):
        name = SAMPLE_FILES[i % len(SAMPLE_FILES)]
        if i >= len(SAMPLE_FILES):
            name = f"batch-{i // len(SAMPLE_FILES)}/{name}"
        files.append(name)
    return files


async def simulate_transfer(
    payload_size: int = 48_000_000,
    file_count: int = 5,
    connect_delay: float = 1.5,
    duration: float = 6.0,
    fail_at: float | None = None,
    seed: int | None = None,
) -> AsyncIterator[object]:
    """
    Yields transfer events for a fake session.

    Args:
        payload_size: Compressed payload size announced to the receiver.
        file_count: Number of files reported on completion.
        connect_delay: Seconds spent "establishing the connection".
        duration: Approximate seconds spent receiving.
        fail_at: If set, report an error once progress passes this fraction.
        seed: Seed for the random progress increments.
    """
    rng = random.Random(seed)
    await asyncio.sleep(connect_delay)
    yield FileInfoMsg(payload_bytes=payload_size)

    progress = 0.0
    step_delay = 0.2
    mean_step = step_delay / duration if duration > 0 else 1.0
    while progress < 1.0:
        await asyncio.sleep(step_delay)
        progress = min(1.0, progress + rng.uniform(0.5, 1.5) * mean_step)
        if fail_at is not None and progress >= fail_at:
            log.debug(f"Simulated failure at {progress:.0%}")
            yield ErrorMsg(
                message=f"Transfer interrupted at {progress:.0%}: peer disconnected"
            )
            return
        yield ProgressMsg(progress=progress)

    await asyncio.sleep(step_delay)
    yield FinishedMsg(
        files=sample_files(file_count),
        payload_size=int(payload_size * rng.uniform(1.2, 1.8)),
    )
