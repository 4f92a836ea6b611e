"""
Reducer: pure calculator state transitions.

The reducer is the only place where arithmetic and mode decisions happen.
It must be:
- Pure (no side effects, no I/O)
- Deterministic (same state and action -> same transition)
- Total over the action set (invalid keystrokes are Rejected, never raised)
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Tuple, Type, Union

from .actions import (
    Action,
    AddDecimal,
    ClearAll,
    MakePercent,
    NumberInput,
    RunCalc,
    SetOperator,
    SwitchSign,
)
from .errors import InvalidTransitionError
from .numeric import calculate, format_number
from .state import CalculatorState
from .types import Mode


@dataclass(frozen=True)
class Applied:
    """The action was accepted; state is the replacement state."""
    state: CalculatorState


@dataclass(frozen=True)
class Rejected:
    """The action was absorbed; the caller keeps its current state."""
    reason: str


Transition = Union[Applied, Rejected]

# Handler signature: (current_state, action) -> transition
Handler = Callable[[CalculatorState, Action], Transition]


def _number_input(state: CalculatorState, action: NumberInput) -> Transition:
    if action.digit == "0" and state.display == "0":
        return Rejected("redundant leading zero")
    if state.mode is Mode.DIGIT_ENTRY:
        return Applied(replace(state, display=state.display + action.digit))
    if state.mode is Mode.OPERATOR_SELECTED:
        return Applied(replace(state, display=action.digit, mode=Mode.DIGIT_ENTRY))
    # Result shown: start a new, unchained entry.
    return Applied(CalculatorState(
        display=action.digit,
        register="",
        mode=Mode.DIGIT_ENTRY,
        operation=None,
    ))


def _add_decimal(state: CalculatorState, action: AddDecimal) -> Transition:
    if state.mode is Mode.RESULT_SHOWN:
        return Applied(CalculatorState(
            display="0.",
            register="",
            mode=Mode.DIGIT_ENTRY,
            operation=None,
        ))
    if "." in state.display:
        return Rejected("display already has a decimal point")
    if state.display == "":
        return Applied(replace(state, display="0.", mode=Mode.DIGIT_ENTRY))
    return Applied(replace(state, display=state.display + "."))


def _set_operator(state: CalculatorState, action: SetOperator) -> Transition:
    if state.mode is not Mode.OPERATOR_SELECTED and state.display == "":
        return Rejected("no operand entered")
    if state.mode is Mode.OPERATOR_SELECTED and state.display == "":
        # Operator pressed twice: retarget without losing the operand.
        return Applied(replace(state, operation=action.operation))

    if state.mode is Mode.DIGIT_ENTRY and state.operation is not None:
        register = calculate(state.operation, state.register_value, state.display_value)
    else:
        register = state.display

    return Applied(CalculatorState(
        display="",
        register=register,
        mode=Mode.OPERATOR_SELECTED,
        operation=action.operation,
    ))


def _run_calc(state: CalculatorState, action: RunCalc) -> Transition:
    if state.operation is None:
        return Rejected("no pending operation")
    if state.display == "":
        return Rejected("no second operand")

    if state.mode is Mode.RESULT_SHOWN:
        # Repeat-equals: re-apply the frozen operand to the running result.
        display = calculate(state.operation, state.display_value, state.register_value)
        return Applied(replace(state, display=display))

    display = calculate(state.operation, state.register_value, state.display_value)
    return Applied(CalculatorState(
        display=display,
        register=state.display,
        mode=Mode.RESULT_SHOWN,
        operation=state.operation,
    ))


def _clear_all(state: CalculatorState, action: ClearAll) -> Transition:
    return Applied(CalculatorState.initial())


def _switch_sign(state: CalculatorState, action: SwitchSign) -> Transition:
    if state.display.startswith("-"):
        return Applied(replace(state, display=state.display[1:]))
    return Applied(replace(state, display="-" + state.display))


def _make_percent(state: CalculatorState, action: MakePercent) -> Transition:
    return Applied(replace(state, display=format_number(state.display_value / 100)))


_DEFAULT_HANDLERS: Dict[Type, Handler] = {
    NumberInput: _number_input,
    AddDecimal: _add_decimal,
    RunCalc: _run_calc,
    SetOperator: _set_operator,
    ClearAll: _clear_all,
    SwitchSign: _switch_sign,
    MakePercent: _make_percent,
}


class Reducer:
    """
    Closed table of action handlers.

    Usage:
        reducer = Reducer()
        transition = reducer.apply(state, NumberInput("5"))
        if isinstance(transition, Applied):
            state = transition.state
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type, Handler] = dict(_DEFAULT_HANDLERS)

    @property
    def action_types(self) -> Tuple[Type, ...]:
        return tuple(self._handlers)

    def apply(self, state: CalculatorState, action: Action) -> Transition:
        """
        Apply action to state.

        Args:
            state: Current state
            action: One of the action variants

        Returns:
            Applied(new_state) or Rejected(reason)

        Raises:
            InvalidTransitionError: If action is not a known action variant
        """
        handler = self._handlers.get(type(action))
        if handler is None:
            raise InvalidTransitionError(f"No handler for action: {action!r}")
        return handler(state, action)

    def next_state(self, state: CalculatorState, action: Action) -> CalculatorState:
        """Apply action and return the resulting state (state itself if rejected)."""
        transition = self.apply(state, action)
        if isinstance(transition, Applied):
            return transition.state
        return state


_default_reducer = Reducer()


def apply(state: CalculatorState, action: Action) -> Transition:
    """Apply action to state with the default reducer."""
    return _default_reducer.apply(state, action)
