"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tran_receiver.models.config import UIConfig


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `tran-receiver init --force` to restore the defaults.",
            "• Use `tran-receiver --show-config` to see what is loaded.",
        ],
        "EventParseError": [
            "• Each line of an events file must be one JSON object.",
            "• Every event needs a `kind`: file_info, progress, finished or error.",
        ],
        "TerminalError": [
            "• Run the command from an interactive terminal.",
            "• Use `tran-receiver render` for non-interactive output.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config: UIConfig, file_values: dict[str, Any]):
    """Displays the effective configuration and marks values taken from the file."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()
    table.add_column(style="dim")

    for key, value in config.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value)
        source = "file" if key in file_values else "default"
        table.add_row(f"{key}:", str(value), source)

    console.print(
        Panel(
            table,
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )
