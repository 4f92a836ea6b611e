"""
State model for the calculator.

CalculatorState is a single immutable value. The reducer never edits it;
every accepted action produces a new instance.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .numeric import parse_number
from .types import Mode, Operation


@dataclass(frozen=True)
class CalculatorState:
    """
    Immutable calculator state.

    Fields:
        display: Operand being typed, or the last result
        register: Previously committed operand (left-hand side, or the
            frozen right-hand side once a result is shown)
        mode: Current input mode
        operation: Pending or last-applied operation, None when unset

    display_value and register_value are derived on access and never stored.
    """
    display: str = ""
    register: str = ""
    mode: Mode = Mode.DIGIT_ENTRY
    operation: Optional[Operation] = None

    @staticmethod
    def initial() -> "CalculatorState":
        return CalculatorState()

    @property
    def display_value(self) -> float:
        """Numeric value of display (nan if it does not parse)."""
        return parse_number(self.display)

    @property
    def register_value(self) -> float:
        """Numeric value of register (nan if it does not parse)."""
        return parse_number(self.register)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "display": self.display,
            "register": self.register,
            "mode": self.mode.value,
            "operation": self.operation.value if self.operation is not None else None,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "CalculatorState":
        data = data or {}
        operation = data.get("operation")
        return CalculatorState(
            display=str(data.get("display", "")),
            register=str(data.get("register", "")),
            mode=Mode(data.get("mode", Mode.DIGIT_ENTRY.value)),
            operation=Operation(operation) if operation is not None else None,
        )
