from rich.text import Text

from tran_receiver.models.config import UIConfig
from tran_receiver.tui.styles import Styles


def test_plain_styles_pass_text_through():
    styles = Styles(UIConfig(color=False, padding=3))
    assert styles.pad_text == "   "
    for style in (styles.info, styles.bold, styles.italic, styles.primary, styles.help):
        assert style("hello") == "hello"


def test_colour_styles_emit_ansi_that_round_trips():
    styles = Styles(UIConfig(color=True))
    styled = styles.bold("hello")
    assert styled != "hello"
    assert "\x1b[" in styled
    assert Text.from_ansi(styled).plain == "hello"


def test_empty_text_is_not_styled():
    assert Styles(UIConfig(color=True)).info("") == ""


def test_quit_help_text_lists_keys():
    assert Styles(UIConfig(color=False, quit_keys=["q"])).quit_commands_help_text == (
        "Press q to quit"
    )
    assert Styles(UIConfig(color=False)).quit_commands_help_text == (
        "Press ctrl+c, q or esc to quit"
    )
