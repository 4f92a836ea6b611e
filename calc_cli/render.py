"""
Rich rendering of the calculator display.
"""

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calc_engine.core.state import CalculatorState
from calc_engine.view import DisplayModel

DISPLAY_STYLE = "bold bright_white"
REGISTER_STYLE = "grey62"


def render_display(state: CalculatorState, width: int) -> Panel:
    """Build a panel showing the register line above the main display."""
    model = DisplayModel.from_state(state, width=width)

    grid = Table.grid(expand=True)
    grid.add_column(justify="right")

    top = Text(model.register_text, style=REGISTER_STYLE)
    if model.operation_text:
        top.append(f" {model.operation_text}", style="bold orange1")
    grid.add_row(top)
    grid.add_row(Text(model.display_text or "0", style=DISPLAY_STYLE))

    return Panel(grid, width=width + 6, title=state.mode.name.lower(), title_align="left")
