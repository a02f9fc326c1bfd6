"""
Indeterminate activity indicator.

A spinner cycles through a fixed sequence of glyphs. Each tick is addressed to
one spinner instance and one generation of its tick chain, so ticks left over
from a replaced spinner are ignored instead of speeding the animation up.
"""

import itertools
from dataclasses import dataclass

from tran_receiver.models.messages import Schedule, SpinnerTickMsg

_ids = itertools.count(1)


@dataclass(frozen=True)
class SpinnerSymbols:
    frames: tuple[str, ...]
    fps: float


WAITING = SpinnerSymbols(
    frames=("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"), fps=10.0
)
TRANSFER = SpinnerSymbols(frames=("▹▹▹", "▸▹▹", "▹▸▹", "▹▹▸"), fps=10.0)


class Spinner:
    """Spinner sub-model: a symbol set, a frame index and a tick generation."""

    def __init__(self, symbols: SpinnerSymbols = WAITING, fps: float | None = None):
        self.id = next(_ids)
        self.symbols = symbols
        self.fps = fps or symbols.fps
        self.frame = 0
        self._tag = 0

    @property
    def interval(self) -> float:
        return 1.0 / self.fps

    def use(self, symbols: SpinnerSymbols) -> None:
        """Switch symbol sets without interrupting the running tick chain."""
        self.symbols = symbols
        self.frame = 0

    def tick(self) -> Schedule:
        """Schedules the next animation frame for this spinner."""
        msg = SpinnerTickMsg(spinner_id=self.id, tag=self._tag)
        return Schedule(self.interval, msg)

    def update(self, msg: object) -> Schedule | None:
        """
        Advances one frame when ``msg`` is a tick for this spinner.

        Anything else, including ticks meant for another spinner or an older
        generation, leaves the spinner untouched.
        """
        if not isinstance(msg, SpinnerTickMsg):
            return None
        if msg.spinner_id != self.id or msg.tag != self._tag:
            return None

        self.frame = (self.frame + 1) % len(self.symbols.frames)
        self._tag += 1
        return self.tick()

    def view(self) -> str:
        return self.symbols.frames[self.frame]
