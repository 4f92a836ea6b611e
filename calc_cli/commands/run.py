"""
Run command: replay a keystroke script and show the final display
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from calc_engine.config import Settings
from calc_engine.core.canonical import canonicalize
from calc_engine.core.clock import DeterministicClock
from calc_engine.core.errors import InvalidActionError
from calc_engine.core.reducer import Applied
from calc_engine.intent import key_events, normalize, parse_keys
from calc_engine.session import CalculatorSession

from ..render import render_display

console = Console()


def run_command(
    keys: str = typer.Argument(..., help='Keystroke script, e.g. "5+3==" or "9/0<Enter>". Put "--" before a script starting with "-"'),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show every keystroke"),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Display cells"),
):
    """
    Replay keystrokes through the calculator.

    Examples:
        calc run "5+3="
        calc run "5+3==" --trace
        calc run "50%" --json
        calc run -- "-5+3="
    """
    settings = Settings.from_env()
    width = width or settings.display_width

    try:
        events, _ = key_events(parse_keys(keys), DeterministicClock())
    except InvalidActionError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    session = CalculatorSession()
    steps = []
    for event in events:
        key = event.key
        action = normalize(event)
        if action is None:
            steps.append({"ts": event.ts, "key": key, "action": None, "result": "ignored", "display": session.state.display})
            continue
        transition = session.dispatch(action)
        steps.append({
            "ts": event.ts,
            "key": key,
            "action": action.type,
            "result": "applied" if isinstance(transition, Applied) else "rejected",
            "display": session.state.display,
        })

    if json_output:
        output = {
            "state": canonicalize(session.state),
            "applied": session.applied,
            "rejected": session.rejected,
        }
        if trace:
            output["steps"] = steps
        print(json.dumps(output, indent=2, sort_keys=True))
        raise typer.Exit(0)

    if trace:
        table = Table(title="Keystrokes")
        table.add_column("Key", style="green")
        table.add_column("Action", style="cyan")
        table.add_column("Result")
        table.add_column("Display", justify="right")
        for step in steps:
            result_style = {"applied": "green", "rejected": "yellow"}.get(step["result"], "grey50")
            table.add_row(
                step["key"],
                step["action"] or "-",
                f"[{result_style}]{step['result']}[/{result_style}]",
                step["display"],
            )
        console.print(table)

    console.print(render_display(session.state, width))
    raise typer.Exit(0)
