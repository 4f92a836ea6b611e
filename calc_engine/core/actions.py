"""
Action model for calculator transitions.

Actions are immutable records of a single user intent. The set is closed:
the reducer has exactly one handler per class listed in ACTION_TYPES.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple, Type, Union

from .errors import InvalidActionError
from .types import Operation

DIGITS = tuple("0123456789")


@dataclass(frozen=True)
class NumberInput:
    """A digit key: digit is one of "0".."9"."""
    type: ClassVar[str] = "NUMBER_INPUT"
    digit: str

    def __post_init__(self) -> None:
        if self.digit not in DIGITS:
            raise InvalidActionError(f"Not a digit: {self.digit!r}")

    @property
    def payload(self) -> Optional[str]:
        return self.digit


@dataclass(frozen=True)
class AddDecimal:
    type: ClassVar[str] = "ADD_DECIMAL"

    @property
    def payload(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class RunCalc:
    """The '=' key."""
    type: ClassVar[str] = "RUN_CALC"

    @property
    def payload(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class SetOperator:
    """
    An operator key.

    operation accepts an Operation or its keypad symbol ("+", "-", "x", "/").
    """
    type: ClassVar[str] = "SET_OPERATOR"
    operation: Operation

    def __post_init__(self) -> None:
        try:
            op = Operation(self.operation)
        except ValueError:
            raise InvalidActionError(f"Unknown operator: {self.operation!r}") from None
        object.__setattr__(self, "operation", op)

    @property
    def payload(self) -> Optional[str]:
        return self.operation.value


@dataclass(frozen=True)
class ClearAll:
    type: ClassVar[str] = "CLEAR_ALL"

    @property
    def payload(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class SwitchSign:
    type: ClassVar[str] = "SWITCH_SIGN"

    @property
    def payload(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class MakePercent:
    type: ClassVar[str] = "MAKE_PERCENT"

    @property
    def payload(self) -> Optional[str]:
        return None


Action = Union[NumberInput, AddDecimal, RunCalc, SetOperator, ClearAll, SwitchSign, MakePercent]

ACTION_TYPES: Tuple[Type, ...] = (
    NumberInput,
    AddDecimal,
    RunCalc,
    SetOperator,
    ClearAll,
    SwitchSign,
    MakePercent,
)

_BY_NAME: Dict[str, Type] = {cls.type: cls for cls in ACTION_TYPES}


def action_from_name(name: str, payload: Optional[str] = None) -> Action:
    """
    Build an action from a normalized (name, payload) pair.

    Payload is ignored for actions that carry none.

    Raises:
        InvalidActionError: If name is unknown or payload is invalid

    Example:
        action_from_name("SET_OPERATOR", "x") -> SetOperator(Operation.MULTIPLY)
    """
    cls = _BY_NAME.get(name)
    if cls is None:
        raise InvalidActionError(f"Unknown action: {name}")
    if cls is NumberInput or cls is SetOperator:
        if payload is None:
            raise InvalidActionError(f"{name} requires a payload")
        return cls(payload)
    return cls()
