"""
Repl command: interactive keypad on the terminal
"""

from typing import Optional

import typer
from rich.console import Console

from calc_engine.config import Settings
from calc_engine.core.clock import DeterministicClock
from calc_engine.core.errors import InvalidActionError
from calc_engine.intent import actions_from_inputs, key_events, parse_keys
from calc_engine.session import CalculatorSession

from ..render import render_display

console = Console()

QUIT_WORDS = ("quit", "exit", "q")


def repl_command(
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Display cells"),
):
    """
    Read keystroke scripts line by line and redraw the display.

    Type "quit" or send EOF to leave.
    """
    settings = Settings.from_env()
    width = width or settings.display_width

    session = CalculatorSession(session_id="repl")
    clock = DeterministicClock()
    changed = []
    session.subscribe(changed.append)
    console.print(render_display(session.state, width))

    while True:
        try:
            line = console.input("[bold]keys>[/bold] ")
        except EOFError:
            break
        if line.strip().lower() in QUIT_WORDS:
            break
        try:
            events, clock = key_events(parse_keys(line), clock)
        except InvalidActionError as e:
            console.print(f"[red]Error:[/red] {e}")
            continue
        session.dispatch_all(actions_from_inputs(events))
        if changed:
            console.print(render_display(session.state, width))
            changed.clear()

    console.print(f"[grey50]{session.applied} applied, {session.rejected} rejected[/grey50]")
