"""
Core calculator primitives.

- Actions: the closed set of user intents
- CalculatorState: immutable calculator state
- Reducer: pure state transitions returning Applied or Rejected
- Numeric: parse/format/evaluate helpers
- Canonical: deterministic serialization
"""

from .types import Mode, Operation
from .actions import (
    Action,
    ACTION_TYPES,
    NumberInput,
    AddDecimal,
    RunCalc,
    SetOperator,
    ClearAll,
    SwitchSign,
    MakePercent,
    action_from_name,
)
from .state import CalculatorState
from .reducer import Reducer, Applied, Rejected, Transition, apply
from .numeric import parse_number, format_number, evaluate
from .canonical import canonicalize, canonical_json_str
from .clock import DeterministicClock
from .errors import InvalidTransitionError, InvalidActionError, DispatchError

__all__ = [
    "Mode",
    "Operation",
    "Action",
    "ACTION_TYPES",
    "NumberInput",
    "AddDecimal",
    "RunCalc",
    "SetOperator",
    "ClearAll",
    "SwitchSign",
    "MakePercent",
    "action_from_name",
    "CalculatorState",
    "Reducer",
    "Applied",
    "Rejected",
    "Transition",
    "apply",
    "parse_number",
    "format_number",
    "evaluate",
    "canonicalize",
    "canonical_json_str",
    "DeterministicClock",
    "InvalidTransitionError",
    "InvalidActionError",
    "DispatchError",
]
