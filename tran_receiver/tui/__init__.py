"""
Terminal UI Layer.

The ``ReceiverUI`` state machine with its spinner and progress bar sub-models,
and the ``Program`` event loop that drives it on a live terminal.
"""

from .program import Program
from .progress_bar import ProgressBar
from .receiver import ReceiverUI
from .spinner import TRANSFER, WAITING, Spinner

__all__ = ["Program", "ProgressBar", "ReceiverUI", "Spinner", "TRANSFER", "WAITING"]
