"""
Session state owned by the receiver display.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tran_receiver.tui.progress_bar import ProgressBar
    from tran_receiver.tui.spinner import Spinner


class UIPhase(IntEnum):
    """Phases of the receive session, in the order they are normally visited."""

    ESTABLISHING = 0
    RECEIVING_PROGRESS = 1
    FINISHED = 2
    ERROR = 3


@dataclass
class SessionState:
    """
    Everything the receiver display needs to render a frame.

    Mutated only by ``ReceiverUI.update`` on the loop that drives it.
    """

    spinner: "Spinner"
    progress_bar: "ProgressBar"
    phase: UIPhase = UIPhase.ESTABLISHING
    payload_size: int = 0
    decompressed_payload_size: int = 0
    received_files: list[str] = field(default_factory=list)
    error_message: str = ""
