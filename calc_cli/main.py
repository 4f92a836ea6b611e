#!/usr/bin/env python3
"""
Calculator CLI

Main entrypoint for the calc command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from calc_engine.logging_config import setup_logging

from .commands import keys, repl, run

app = typer.Typer(
    name="calc",
    help="Four-function calculator on the terminal",
    add_completion=False,
)

console = Console()

app.command(name="run")(run.run_command)
app.command(name="repl")(repl.repl_command)
app.command(name="keys")(keys.keys_command)


@app.callback()
def main_callback():
    """Configure logging before any command runs."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from calc_cli import __version__
    from calc_engine import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Calculator CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
