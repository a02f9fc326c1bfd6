"""
Entry point for ``tran-receiver`` and ``python -m tran_receiver``.
"""

import logging
import sys

import typer
from rich.console import Console

from tran_receiver.cli.app import app
from tran_receiver.cli.formatters import format_error_with_suggestions
from tran_receiver.exceptions import TranReceiverError

log = logging.getLogger("tran_receiver")


def main() -> None:
    """Runs the CLI and turns application errors into a panel and exit code 1."""
    console = Console(stderr=True)
    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except KeyboardInterrupt:
        console.print("\n[yellow]Receive cancelled.[/yellow]")
        sys.exit(0)
    except TranReceiverError as e:
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
