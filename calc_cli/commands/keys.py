"""
Keys command: print the keyboard map
"""

from rich.console import Console
from rich.table import Table

from calc_engine.core.actions import DIGITS
from calc_engine.intent import action_for_key
from calc_engine.intent.normalizer import KEY_ACTIONS, OPERATOR_KEYS

console = Console()


def keys_command():
    """Show which keys drive which calculator actions."""
    table = Table(title="Keyboard Map")
    table.add_column("Key", style="green")
    table.add_column("Action", style="cyan")
    table.add_column("Payload", style="yellow")

    table.add_row("0-9", "NUMBER_INPUT", "digit")
    for key in list(OPERATOR_KEYS) + list(KEY_ACTIONS):
        action = action_for_key(key)
        display_key = f"<{key}>" if len(key) > 1 else key
        table.add_row(display_key, action.type, action.payload or "")

    console.print(table)
    console.print(f"[grey50]{len(DIGITS) + len(OPERATOR_KEYS) + len(KEY_ACTIONS)} keys mapped[/grey50]")
