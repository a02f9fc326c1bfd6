"""
Data Models Layer.

This package contains the models that define the core data structures used
throughout the application: UI configuration, the session state of the
receiver display, and the messages and commands flowing through the event loop.
"""

from .config import UIConfig
from .messages import (
    Command,
    ErrorMsg,
    FileInfoMsg,
    FinishedMsg,
    KeyMsg,
    MessageKind,
    ProgressFrameMsg,
    ProgressMsg,
    Quit,
    Schedule,
    SpinnerTickMsg,
    WindowSizeMsg,
)
from .state import SessionState, UIPhase

__all__ = [
    "Command",
    "ErrorMsg",
    "FileInfoMsg",
    "FinishedMsg",
    "KeyMsg",
    "MessageKind",
    "ProgressFrameMsg",
    "ProgressMsg",
    "Quit",
    "Schedule",
    "SessionState",
    "SpinnerTickMsg",
    "UIConfig",
    "UIPhase",
    "WindowSizeMsg",
]
