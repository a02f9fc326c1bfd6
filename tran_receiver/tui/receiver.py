"""
The receiver display: a state machine driven by transfer events.

``ReceiverUI.update`` consumes one message at a time and returns at most one
follow-up command for the host loop. ``ReceiverUI.view`` renders the current
state to a text frame and never changes it.
"""

import logging
import textwrap

from tran_receiver.models.config import UIConfig
from tran_receiver.models.messages import (
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
from tran_receiver.models.state import SessionState, UIPhase
from tran_receiver.utils.formatting import format_size
from tran_receiver.utils.path import top_level_files_text

from .progress_bar import ProgressBar
from .spinner import TRANSFER, WAITING, Spinner
from .styles import Styles

log = logging.getLogger(__name__)

# Columns taken by the bar's surroundings besides the left and right padding.
BAR_BORDER_ALLOWANCE = 4


class ReceiverUI:
    """Owns the authoritative ``SessionState`` of one receive session."""

    def __init__(self, config: UIConfig | None = None):
        self.config = config or UIConfig()
        self.styles = Styles(self.config)
        self.state = SessionState(
            spinner=self._new_spinner(UIPhase.ESTABLISHING),
            progress_bar=ProgressBar(
                width=min(self.config.default_width, self.config.max_width),
                fps=self.config.progress_fps,
                easing=self.config.easing,
                show_percentage=self.config.show_percentage,
            ),
        )
        self._handlers = {
            MessageKind.FILE_INFO: (FileInfoMsg, self._on_file_info),
            MessageKind.PROGRESS: (ProgressMsg, self._on_progress),
            MessageKind.FINISHED: (FinishedMsg, self._on_finished),
            MessageKind.ERROR: (ErrorMsg, self._on_error),
            MessageKind.KEY: (KeyMsg, self._on_key),
            MessageKind.WINDOW_SIZE: (WindowSizeMsg, self._on_window_size),
            MessageKind.PROGRESS_FRAME: (ProgressFrameMsg, self._on_progress_frame),
            MessageKind.SPINNER_TICK: (SpinnerTickMsg, self._on_spinner_tick),
        }

    def init(self) -> Command:
        """The command that starts the spinner when the session begins."""
        return self.state.spinner.tick()

    def _new_spinner(self, phase: UIPhase) -> Spinner:
        symbols = TRANSFER if phase == UIPhase.RECEIVING_PROGRESS else WAITING
        return Spinner(symbols, fps=self.config.spinner_fps)

    def _transition(self, phase: UIPhase) -> bool:
        """
        Moves to ``phase`` if that keeps the phase order monotonic.

        ERROR is reachable from anywhere and nothing leaves it.
        """
        current = self.state.phase
        if phase == current or current == UIPhase.ERROR:
            return False
        if phase != UIPhase.ERROR and phase < current:
            return False
        log.debug(f"Receiver phase {current.name} -> {phase.name}")
        self.state.phase = phase
        return True

    def update(self, msg: object) -> Command | None:
        """
        Applies one message to the session state.

        Messages are dispatched on their ``kind``. Anything that is not one of
        the known message types goes to the spinner, which ignores what it
        does not understand.
        """
        try:
            kind = MessageKind(getattr(msg, "kind", None))
        except ValueError:
            return self.state.spinner.update(msg)
        msg_type, handler = self._handlers[kind]
        if not isinstance(msg, msg_type):
            return self.state.spinner.update(msg)
        return handler(msg)

    def _on_file_info(self, msg: FileInfoMsg) -> Command | None:
        self.state.payload_size = msg.payload_bytes
        if self._transition(UIPhase.RECEIVING_PROGRESS):
            self.state.spinner = self._new_spinner(UIPhase.RECEIVING_PROGRESS)
            return self.state.spinner.tick()
        return None

    def _on_progress(self, msg: ProgressMsg) -> Command | None:
        if self._transition(UIPhase.RECEIVING_PROGRESS):
            self.state.spinner.use(TRANSFER)
        if self.state.phase == UIPhase.FINISHED:
            return None
        return self.state.progress_bar.set_percent(msg.progress)

    def _on_finished(self, msg: FinishedMsg) -> Command:
        self._transition(UIPhase.FINISHED)
        self.state.received_files = list(msg.files)
        self.state.decompressed_payload_size = msg.payload_size
        return self.state.progress_bar.set_percent(1.0)

    def _on_error(self, msg: ErrorMsg) -> None:
        self._transition(UIPhase.ERROR)
        self.state.error_message = msg.message
        log.info(f"Transfer failed: {msg.message}")

    def _on_key(self, msg: KeyMsg) -> Command | None:
        if msg.key.lower() in self.config.quit_keys:
            log.debug(f"Quit requested with '{msg.key}'")
            return Quit()
        return None

    def _on_window_size(self, msg: WindowSizeMsg) -> None:
        width = msg.width - 2 * self.config.padding - BAR_BORDER_ALLOWANCE
        self.state.progress_bar.width = max(0, min(width, self.config.max_width))

    def _on_progress_frame(self, msg: ProgressFrameMsg) -> Command | None:
        return self.state.progress_bar.update(msg)

    def _on_spinner_tick(self, msg: SpinnerTickMsg) -> Command | None:
        return self.state.spinner.update(msg)

    def view(self) -> str:
        """Renders the current state as a text frame."""
        state = self.state
        styles = self.styles
        pad = styles.pad_text

        if state.phase == UIPhase.ESTABLISHING:
            text = f"{self._spinner_view()} Establishing connection with sender"
            return "\n" + pad + styles.info(text) + "\n\n"

        if state.phase == UIPhase.RECEIVING_PROGRESS:
            payload_size = styles.bold(format_size(state.payload_size))
            text = f"{self._spinner_view()} Receiving files (total size {payload_size})"
            return (
                "\n"
                + pad + styles.info(text) + "\n\n"
                + pad + self._progress_view() + "\n\n"
                + pad + styles.quit_commands_help_text + "\n\n"
            )

        if state.phase == UIPhase.FINISHED:
            payload_size = styles.bold(format_size(state.decompressed_payload_size))
            summary = (
                f"Received {len(state.received_files)} files "
                f"({payload_size} decompressed)"
            )
            return (
                "\n"
                + pad + styles.info(summary) + "\n\n"
                + self._files_view() + "\n\n"
                + pad + self._progress_view() + "\n\n"
                + pad + styles.quit_commands_help_text + "\n\n"
            )

        if state.phase == UIPhase.ERROR:
            return state.error_message

        return ""

    def _spinner_view(self) -> str:
        return self.styles.primary(self.state.spinner.view())

    def _progress_view(self) -> str:
        return self.state.progress_bar.view(fill_style=self.styles.primary)

    def _files_view(self) -> str:
        listing = "Received: " + top_level_files_text(self.state.received_files)
        lines = textwrap.wrap(
            listing, width=self.styles.max_width, break_on_hyphens=False
        ) or [listing]
        indent = " " * self.styles.padding
        return "\n".join(indent + self.styles.italic(line) for line in lines)

    def update_all(self, messages, width: int | None = None) -> None:
        """
        Applies ``messages`` in order without a host loop.

        Progress bar animations are played through to the end so the state
        matches what the live display shows once it settles. Spinner ticks
        are not followed.
        """
        if width is not None:
            self.update(WindowSizeMsg(width=width))
        for msg in messages:
            cmd = self.update(msg)
            while isinstance(cmd, Schedule) and isinstance(
                cmd.message, ProgressFrameMsg
            ):
                cmd = self.update(cmd.message)
