"""
Determinate progress indicator with eased animation.

``set_percent`` only moves the target; the displayed fraction catches up over
a series of frames, each covering a fixed share of the remaining distance.
"""

import itertools
import math

from tran_receiver.models.messages import ProgressFrameMsg, Schedule

_ids = itertools.count(1)

# Distance below which the bar snaps onto its target.
SETTLE_THRESHOLD = 0.001

FILLED_CHAR = "█"
EMPTY_CHAR = "░"


def clamp_fraction(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


class ProgressBar:
    """Progress bar sub-model holding the current and target fill fractions."""

    def __init__(
        self,
        width: int = 40,
        fps: float = 60.0,
        easing: float = 0.25,
        show_percentage: bool = False,
    ):
        self.id = next(_ids)
        self.width = width
        self.fps = fps
        self.easing = easing
        self.show_percentage = show_percentage
        self.current = 0.0
        self.target = 0.0
        self._tag = 0

    @property
    def animating(self) -> bool:
        return self.current != self.target

    def _next_frame(self) -> Schedule:
        return Schedule(1.0 / self.fps, ProgressFrameMsg(bar_id=self.id, tag=self._tag))

    def set_percent(self, fraction: float) -> Schedule:
        """
        Sets a new target fraction (clamped to [0, 1]) and starts easing toward it.

        Any frame already in flight belongs to the previous generation and is dropped.
        """
        self.target = clamp_fraction(fraction)
        self._tag += 1
        return self._next_frame()

    def update(self, msg: object) -> Schedule | None:
        """Applies one easing step; stops scheduling once the target is reached."""
        if not isinstance(msg, ProgressFrameMsg):
            return None
        if msg.bar_id != self.id or msg.tag != self._tag:
            return None

        remaining = self.target - self.current
        if abs(remaining) <= SETTLE_THRESHOLD:
            self.current = self.target
        else:
            self.current = clamp_fraction(self.current + remaining * self.easing)

        if not self.animating:
            return None
        return self._next_frame()

    def filled_cells(self) -> int:
        return min(self.width, round(self.width * self.current))

    def view(self, fill_style=None) -> str:
        """Renders ``width`` cells; ``fill_style`` styles the filled part."""
        filled = self.filled_cells()
        bar_filled = FILLED_CHAR * filled
        if fill_style is not None:
            bar_filled = fill_style(bar_filled)
        bar = bar_filled + EMPTY_CHAR * (self.width - filled)
        if self.show_percentage:
            bar += f" {self.current * 100:>3.0f}%"
        return bar
