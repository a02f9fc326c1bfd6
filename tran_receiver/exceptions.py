"""
Defines custom exceptions for the application to allow for more specific error handling.

Transfer failures reported by the engine are not exceptions here; they arrive as
``ErrorMsg`` values and are displayed by the receiver UI.
"""


class TranReceiverError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(TranReceiverError):
    """Raised for issues related to configuration loading or validation."""


class EventParseError(TranReceiverError):
    """Raised when a line of an events file is not a valid transfer event."""


class TerminalError(TranReceiverError):
    """Raised when the interactive display needs a terminal that is not available."""
