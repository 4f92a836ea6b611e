"""
Enumerations shared by the calculator state and actions.
"""

from enum import Enum


class Mode(str, Enum):
    """Input mode of the calculator."""
    DIGIT_ENTRY = "num"
    OPERATOR_SELECTED = "op"
    RESULT_SHOWN = "eq"


class Operation(str, Enum):
    """Binary operations, keyed by their keypad symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value
