"""
Event sources for the receiver display.

A transfer engine talks to the display only through messages. This package
provides the two sources shipped with the CLI: a JSON-lines events file and a
simulated transfer used for demonstrations.
"""

from .events import load_events, parse_event, parse_events, replay_events
from .simulator import simulate_transfer

__all__ = [
    "load_events",
    "parse_event",
    "parse_events",
    "replay_events",
    "simulate_transfer",
]
