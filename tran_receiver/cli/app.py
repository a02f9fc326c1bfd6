"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from tran_receiver import __version__
from tran_receiver.core.events import load_events, replay_events
from tran_receiver.core.simulator import simulate_transfer
from tran_receiver.exceptions import TranReceiverError
from tran_receiver.models.config import UIConfig
from tran_receiver.storage.config_manager import ConfigManager
from tran_receiver.tui.program import Program
from tran_receiver.tui.receiver import ReceiverUI

from .formatters import print_config

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("tran_receiver")

app = typer.Typer(
    name="tran-receiver",
    help=(
        "Terminal progress display for receiving files. Use 'tran-receiver"
        " <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "tran-receiver"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """Tran Receiver CLI"""
    if version:
        console.print(f"[bold]tran-receiver[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "WARNING"
    if verbose == 1:
        log_level = "INFO"
    elif verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("tran_receiver").setLevel(log_level)

    if show_config:
        config_manager = ConfigManager(CONFIG_FILE)
        try:
            config = config_manager.load_config()
        except TranReceiverError as e:
            console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
            raise typer.Exit(code=1) from e
        print_config(CONFIG_FILE, config, config_manager.get_config_as_dict())
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def _load_config(no_color: bool = False) -> UIConfig:
    cli_options = {"color": False} if no_color else None
    return ConfigManager(CONFIG_FILE).load_config(cli_options)


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration file."
    ),
):
    """Write a configuration file with the default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    ConfigManager(CONFIG_FILE).save_new_config()
    console.print(
        f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]"
    )


@app.command()
def demo(
    size: int = typer.Option(
        48_000_000, "--size", "-s", min=0, help="Payload size in bytes."
    ),
    files: int = typer.Option(5, "--files", "-n", min=0, help="Number of files."),
    fail_at: float | None = typer.Option(
        None,
        "--fail-at",
        min=0.0,
        max=1.0,
        help="Simulate a transfer error once this fraction is received.",
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for simulated progress."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable styling."),
):
    """Show the receiver display for a simulated transfer."""
    config = _load_config(no_color)
    source = simulate_transfer(
        payload_size=size, file_count=files, fail_at=fail_at, seed=seed
    )
    _run_interactive(config, source)


@app.command()
def replay(
    events_file: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, help="JSON-lines file of transfer events."
    ),
    delay: float = typer.Option(
        0.5, "--delay", "-d", min=0.0, help="Seconds to wait before each event."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable styling."),
):
    """Replay recorded transfer events through the receiver display."""
    config = _load_config(no_color)
    events = load_events(events_file)
    _run_interactive(config, replay_events(events, delay))


@app.command()
def render(
    events_file: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, help="JSON-lines file of transfer events."
    ),
    width: int | None = typer.Option(
        None, "--width", "-w", help="Terminal width to lay out for."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable styling."),
):
    """Apply transfer events without animation and print the resulting frame."""
    config = _load_config(no_color)
    model = ReceiverUI(config)
    model.update_all(load_events(events_file), width=width or console.width)
    console.print(Text.from_ansi(model.view()), end="")


def _run_interactive(config: UIConfig, source) -> None:
    model = ReceiverUI(config)
    program = Program(model, console=console, sources=[source])
    asyncio.run(program.run())
