"""
Messages consumed by the receiver display and the follow-up commands it returns.

Every message carries a ``kind`` discriminator from the closed ``MessageKind``
enumeration. The four transfer events can also be decoded from JSON through
``EngineEvent`` (see ``tran_receiver.core.events``).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MessageKind(str, Enum):
    FILE_INFO = "file_info"
    PROGRESS = "progress"
    FINISHED = "finished"
    ERROR = "error"
    KEY = "key"
    WINDOW_SIZE = "window_size"
    SPINNER_TICK = "spinner_tick"
    PROGRESS_FRAME = "progress_frame"


class _Message(BaseModel):
    model_config = ConfigDict(frozen=True)


class FileInfoMsg(_Message):
    """Connection metadata: total payload size announced by the sender."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["file_info"] = "file_info"
    payload_bytes: int = Field(ge=0, alias="bytes")


class ProgressMsg(_Message):
    """Fraction of the payload received so far. Not range checked here."""

    kind: Literal["progress"] = "progress"
    progress: float


class FinishedMsg(_Message):
    """The transfer completed and the payload was decompressed."""

    kind: Literal["finished"] = "finished"
    files: list[str] = Field(default_factory=list)
    payload_size: int = Field(default=0, ge=0)


class ErrorMsg(_Message):
    """A terminal transfer error, carrying a human-readable message."""

    kind: Literal["error"] = "error"
    message: str


class KeyMsg(_Message):
    kind: Literal["key"] = "key"
    key: str


class WindowSizeMsg(_Message):
    kind: Literal["window_size"] = "window_size"
    width: int
    height: int = 0


class SpinnerTickMsg(_Message):
    kind: Literal["spinner_tick"] = "spinner_tick"
    spinner_id: int
    tag: int


class ProgressFrameMsg(_Message):
    kind: Literal["progress_frame"] = "progress_frame"
    bar_id: int
    tag: int


EngineEvent = Annotated[
    Union[FileInfoMsg, ProgressMsg, FinishedMsg, ErrorMsg],
    Field(discriminator="kind"),
]


@dataclass(frozen=True)
class Schedule:
    """Deliver ``message`` back to the model after ``delay`` seconds."""

    delay: float
    message: Any


@dataclass(frozen=True)
class Quit:
    """Ask the host loop to stop dispatching and exit."""


Command = Union[Schedule, Quit]
