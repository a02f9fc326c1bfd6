"""
Host event loop for the receiver display.

The program feeds messages to a ``ReceiverUI`` one at a time, runs the commands
it returns, and redraws the frame after every message. Messages come from the
keyboard, terminal resizes, animation timers and any number of asynchronous
event sources (the transfer engine).
"""

import asyncio
import logging
import os
import signal
import sys
from collections.abc import AsyncIterable

from rich.console import Console
from rich.live import Live
from rich.text import Text

from tran_receiver.exceptions import TerminalError
from tran_receiver.models.messages import (
    Command,
    ErrorMsg,
    KeyMsg,
    Quit,
    Schedule,
    WindowSizeMsg,
)

from .receiver import ReceiverUI

log = logging.getLogger(__name__)

_ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[3~": "delete",
}

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    " ": "space",
}


def decode_keys(data: str) -> list[str]:
    """Translates raw terminal input into key names such as ``q`` or ``ctrl+c``."""
    keys = []
    i = 0
    while i < len(data):
        char = data[i]
        if char == "\x1b":
            for sequence, name in _ESCAPE_SEQUENCES.items():
                if data.startswith(sequence, i):
                    keys.append(name)
                    i += len(sequence)
                    break
            else:
                if i + 1 < len(data) and data[i + 1] != "\x1b":
                    keys.append(f"alt+{data[i + 1]}")
                    i += 2
                else:
                    keys.append("esc")
                    i += 1
            continue
        if char in _CONTROL_KEYS:
            keys.append(_CONTROL_KEYS[char])
        elif ord(char) < 32:
            keys.append(f"ctrl+{chr(ord(char) + 96)}")
        else:
            keys.append(char)
        i += 1
    return keys


class Program:
    """Runs a ``ReceiverUI`` until it asks to quit."""

    def __init__(
        self,
        model: ReceiverUI,
        console: Console | None = None,
        sources: list[AsyncIterable] | None = None,
        read_keys: bool = True,
        alt_screen: bool = True,
    ):
        self.model = model
        self.console = console or Console()
        self.sources = list(sources or [])
        self.read_keys = read_keys
        self.alt_screen = alt_screen

        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue | None = None
        self._timers: set[asyncio.TimerHandle] = set()
        self._tasks: list[asyncio.Task] = []
        self._restore_terminal = None
        self._live: Live | None = None

    def send(self, msg: object) -> None:
        """Queues a message for the model. Safe to call from any thread."""
        if self._loop is None or self._queue is None:
            raise RuntimeError("Program is not running.")
        self._loop.call_soon_threadsafe(self._queue.put_nowait, msg)

    def _run_command(self, cmd: Command | None) -> bool:
        """Executes ``cmd``; returns True when the program should stop."""
        if cmd is None:
            return False
        if isinstance(cmd, Quit):
            return True
        if isinstance(cmd, Schedule):
            handle = self._loop.call_later(cmd.delay, self._fire_timer, cmd.message)
            self._timers.add(handle)
            return False
        log.warning(f"Ignoring unknown command: {cmd!r}")
        return False

    def _fire_timer(self, msg: object) -> None:
        now = self._loop.time()
        self._timers = {t for t in self._timers if t.when() > now}
        self._queue.put_nowait(msg)

    def _render(self) -> None:
        if self._live is not None:
            self._live.update(Text.from_ansi(self.model.view()), refresh=True)

    async def _pump(self, source: AsyncIterable) -> None:
        try:
            async for msg in source:
                self._queue.put_nowait(msg)
        except Exception as e:
            log.debug("Event source failed:", exc_info=True)
            self._queue.put_nowait(ErrorMsg(message=f"Transfer failed: {e}"))

    def _on_resize(self) -> None:
        size = self.console.size
        self._queue.put_nowait(WindowSizeMsg(width=size.width, height=size.height))

    def _install_handlers(self) -> None:
        try:
            self._loop.add_signal_handler(
                signal.SIGINT, self._queue.put_nowait, KeyMsg(key="ctrl+c")
            )
            if hasattr(signal, "SIGWINCH"):
                self._loop.add_signal_handler(signal.SIGWINCH, self._on_resize)
        except NotImplementedError:
            log.debug("Signal handlers are not supported on this platform.")

        if self.read_keys:
            self._start_key_reader()

    def _remove_handlers(self) -> None:
        try:
            self._loop.remove_signal_handler(signal.SIGINT)
            if hasattr(signal, "SIGWINCH"):
                self._loop.remove_signal_handler(signal.SIGWINCH)
        except NotImplementedError:
            pass
        if self._restore_terminal is not None:
            self._restore_terminal()
            self._restore_terminal = None

    def _start_key_reader(self) -> None:
        if os.name == "nt":
            log.warning(
                "Keyboard input is not supported on Windows; use Ctrl+C to quit."
            )
            return
        if not sys.stdin.isatty():
            raise TerminalError("Interactive mode needs a terminal on standard input.")

        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)

        def restore():
            self._loop.remove_reader(fd)
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

        def on_input():
            data = os.read(fd, 64).decode("utf-8", errors="replace")
            for key in decode_keys(data):
                self._queue.put_nowait(KeyMsg(key=key))

        self._loop.add_reader(fd, on_input)
        self._restore_terminal = restore

    async def run(self) -> ReceiverUI:
        """Dispatches messages until the model returns ``Quit``."""
        self._loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()

        try:
            self._install_handlers()
            with Live(
                Text.from_ansi(self.model.view()),
                console=self.console,
                auto_refresh=False,
                screen=self.alt_screen,
                transient=False,
            ) as live:
                self._live = live
                self._on_resize()
                self._run_command(self.model.init())
                self._tasks = [
                    asyncio.create_task(self._pump(source)) for source in self.sources
                ]

                while True:
                    msg = await self._queue.get()
                    cmd = self.model.update(msg)
                    self._render()
                    if self._run_command(cmd):
                        log.debug("Quit requested; stopping dispatch.")
                        break
        finally:
            self._live = None
            for timer in self._timers:
                timer.cancel()
            self._timers.clear()
            for task in self._tasks:
                task.cancel()
            await asyncio.gather(*self._tasks, return_exceptions=True)
            self._remove_handlers()

        return self.model
