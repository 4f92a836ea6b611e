"""
Display view model derived from calculator state.

The LCD shows a fixed number of cells. Characters are right-aligned, so a
cell id encodes its position from the left edge of the panel.
"""

from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_DISPLAY_WIDTH
from .core.state import CalculatorState
from .core.types import Mode


@dataclass(frozen=True)
class Digit:
    char: str
    id: str


def _digits(text: str, prefix: str, width: int) -> Tuple[Digit, ...]:
    # Ids count from the left edge of a right-aligned panel of `width` cells.
    return tuple(
        Digit(char=ch, id=f"{prefix}{width - len(text) + i}")
        for i, ch in enumerate(text[:width])
    )


@dataclass(frozen=True)
class DisplayModel:
    """
    Display-ready fields.

    Fields:
        display_digits: Cells of the main display
        register_digits: Cells of the small register line (empty once a
            result is shown)
        operation_text: Pending operator symbol, "" when none or when a
            result is shown
    """
    display_digits: Tuple[Digit, ...]
    register_digits: Tuple[Digit, ...]
    operation_text: str

    @staticmethod
    def from_state(state: CalculatorState, width: int = DEFAULT_DISPLAY_WIDTH) -> "DisplayModel":
        result_shown = state.mode is Mode.RESULT_SHOWN
        register_digits = () if result_shown else _digits(state.register, "reg", width)
        if result_shown or state.operation is None:
            operation_text = ""
        else:
            operation_text = state.operation.symbol
        return DisplayModel(
            display_digits=_digits(state.display, "disp", width),
            register_digits=register_digits,
            operation_text=operation_text,
        )

    @property
    def display_text(self) -> str:
        return "".join(d.char for d in self.display_digits)

    @property
    def register_text(self) -> str:
        return "".join(d.char for d in self.register_digits)
