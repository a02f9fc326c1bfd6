"""
Text styling for the receiver display.

Styles render straight to ANSI strings through Rich so a frame stays a plain
``str``; the live display turns it back into Rich text with ``Text.from_ansi``.
With colour disabled every helper returns its input unchanged.
"""

from rich.color import ColorSystem
from rich.style import Style

from tran_receiver.models.config import UIConfig


class Styles:
    """Pure styling helpers derived from a ``UIConfig``."""

    def __init__(self, config: UIConfig):
        self.padding = config.padding
        self.max_width = config.max_width
        self.pad_text = " " * config.padding
        self._color_system = ColorSystem.TRUECOLOR if config.color else None

        self._info = Style(color=config.info_color)
        self._primary = Style(color=config.primary_color)
        self._help = Style(color=config.help_color)
        self._bold = Style(bold=True)
        self._italic = Style(italic=True)

        self.quit_commands_help_text = self.help(
            "Press " + _join_keys(config.quit_keys) + " to quit"
        )

    def _render(self, style: Style, text: str) -> str:
        if not text:
            return text
        return style.render(text, color_system=self._color_system)

    def info(self, text: str) -> str:
        return self._render(self._info, text)

    def primary(self, text: str) -> str:
        return self._render(self._primary, text)

    def help(self, text: str) -> str:
        return self._render(self._help, text)

    def bold(self, text: str) -> str:
        return self._render(self._bold, text)

    def italic(self, text: str) -> str:
        return self._render(self._italic, text)


def _join_keys(keys: list[str]) -> str:
    if len(keys) == 1:
        return keys[0]
    return ", ".join(keys[:-1]) + f" or {keys[-1]}"
