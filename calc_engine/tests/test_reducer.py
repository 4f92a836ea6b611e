"""
Tests for calculator reducer transitions.

Every handler branch, every rejection, and the documented scenarios.
"""

import pytest

from calc_engine.core.actions import (
    ACTION_TYPES,
    AddDecimal,
    ClearAll,
    MakePercent,
    NumberInput,
    RunCalc,
    SetOperator,
    SwitchSign,
)
from calc_engine.core.errors import InvalidTransitionError
from calc_engine.core.reducer import Applied, Reducer, Rejected, apply
from calc_engine.core.state import CalculatorState
from calc_engine.core.types import Mode, Operation


def test_initial_state():
    s = CalculatorState.initial()
    assert s.display == ""
    assert s.register == ""
    assert s.mode is Mode.DIGIT_ENTRY
    assert s.operation is None


def test_every_action_has_a_handler():
    """The dispatch table must cover the whole action set."""
    action_types = Reducer().action_types
    assert isinstance(action_types, tuple)
    assert set(action_types) == set(ACTION_TYPES)


def test_unknown_action_raises():
    with pytest.raises(InvalidTransitionError):
        apply(CalculatorState.initial(), "RUN_CALC")


def test_reducer_does_not_mutate_input():
    s0 = CalculatorState(display="5", register="2", mode=Mode.DIGIT_ENTRY, operation=Operation.ADD)
    snapshot = s0.to_dict()
    apply(s0, SetOperator("x"))
    apply(s0, RunCalc())
    assert s0.to_dict() == snapshot


# NUMBER_INPUT

def test_digit_appends_in_digit_entry():
    t = apply(CalculatorState(display="12"), NumberInput("3"))
    assert isinstance(t, Applied)
    assert t.state.display == "123"
    assert t.state.mode is Mode.DIGIT_ENTRY


def test_leading_zero_suppressed(press):
    assert press("00").display == "0"
    assert isinstance(apply(CalculatorState(display="0"), NumberInput("0")), Rejected)


def test_digit_after_operator_starts_fresh_operand():
    s = CalculatorState(display="", register="7", mode=Mode.OPERATOR_SELECTED, operation=Operation.SUBTRACT)
    t = apply(s, NumberInput("4"))
    assert t.state == CalculatorState(
        display="4", register="7", mode=Mode.DIGIT_ENTRY, operation=Operation.SUBTRACT
    )


def test_digit_after_result_starts_unchained_entry(press):
    s = press("5+3=7")
    assert s == CalculatorState(display="7", register="", mode=Mode.DIGIT_ENTRY, operation=None)


# ADD_DECIMAL

def test_decimal_on_empty_display(press):
    s = press(".")
    assert s.display == "0."
    assert s.mode is Mode.DIGIT_ENTRY


def test_decimal_guard(press):
    assert press("1..5.").display == "1.5"
    assert isinstance(apply(CalculatorState(display="1.5"), AddDecimal()), Rejected)


def test_decimal_after_operator(press):
    s = press("5+.")
    assert s.display == "0."
    assert s.register == "5"
    assert s.mode is Mode.DIGIT_ENTRY
    assert s.operation is Operation.ADD


def test_decimal_after_result_starts_new_entry(press):
    s = press("5+3=.")
    assert s == CalculatorState(display="0.", register="", mode=Mode.DIGIT_ENTRY, operation=None)


def test_decimal_after_result_ignores_existing_point(press):
    s = press("1.5+1=.")
    assert s.display == "0."


# SET_OPERATOR

def test_operator_without_operand_rejected():
    t = apply(CalculatorState.initial(), SetOperator("+"))
    assert isinstance(t, Rejected)


def test_operator_promotes_display(press):
    s = press("12x")
    assert s == CalculatorState(
        display="", register="12", mode=Mode.OPERATOR_SELECTED, operation=Operation.MULTIPLY
    )


def test_operator_pressed_twice_retargets(press):
    s = press("5+-")
    assert s.operation is Operation.SUBTRACT
    assert s.register == "5"
    assert s.display == ""
    assert press("5+-3=").display == "2"


def test_operator_after_result_promotes_result(press):
    s = press("5+3=x")
    assert s.register == "8"
    assert s.mode is Mode.OPERATOR_SELECTED
    assert s.operation is Operation.MULTIPLY
    assert press("5+3=x2=").display == "16"


def test_chained_operators_fold_left_to_right(press):
    # No precedence: (2 + 3) x 4
    assert press("2+3x4=").display == "20"
    assert press("20/4-1=").display == "4"


def test_chained_fold_with_unparseable_register_gives_nan():
    s = CalculatorState(display="5", register="-", mode=Mode.DIGIT_ENTRY, operation=Operation.ADD)
    t = apply(s, SetOperator("+"))
    assert t.state.register == "NaN"


# RUN_CALC

def test_equals_without_operation_rejected(press):
    assert isinstance(apply(CalculatorState(display="5"), RunCalc()), Rejected)
    assert press("5=").display == "5"


def test_equals_without_second_operand_rejected():
    s = CalculatorState(display="", register="5", mode=Mode.OPERATOR_SELECTED, operation=Operation.ADD)
    assert isinstance(apply(s, RunCalc()), Rejected)


def test_repeat_equals_subtraction(press):
    assert press("10-3=").display == "7"
    assert press("10-3==").display == "4"
    assert press("10-3===").display == "1"


def test_repeat_equals_division(press):
    s = press("100/2==")
    assert s.display == "25"
    assert s.register == "2"


def test_division_by_zero(press):
    assert press("9/0=").display == "Infinity"
    assert press("9~/0=").display == "-Infinity"
    assert press("0/0=").display == "NaN"


def test_multiplication_overflow():
    s = CalculatorState(display="10", register="1e308", mode=Mode.DIGIT_ENTRY, operation=Operation.MULTIPLY)
    assert apply(s, RunCalc()).state.display == "Infinity"


def test_float_result_text(press):
    assert press(".1+.2=").display == "0.30000000000000004"
    assert press("7/2=").display == "3.5"


# CLEAR_ALL

def test_clear_all_resets_and_is_idempotent(press):
    s = press("5+3=x2")
    once = apply(s, ClearAll()).state
    twice = apply(once, ClearAll()).state
    assert once == CalculatorState.initial()
    assert twice == CalculatorState.initial()


def test_clear_all_never_rejected():
    assert isinstance(apply(CalculatorState.initial(), ClearAll()), Applied)


# SWITCH_SIGN

def test_switch_sign_twice_is_identity(press):
    for keys in ("5", "0.25", "5+3="):
        s = press(keys)
        assert press("~~", initial=s).display == s.display


def test_switch_sign_keeps_other_fields(press):
    s = press("5+3")
    t = apply(s, SwitchSign()).state
    assert t.display == "-3"
    assert (t.register, t.mode, t.operation) == (s.register, s.mode, s.operation)


def test_switch_sign_on_empty_display():
    s = CalculatorState(display="", register="5", mode=Mode.OPERATOR_SELECTED, operation=Operation.ADD)
    t = apply(s, SwitchSign()).state
    assert t.display == "-"
    assert apply(t, SwitchSign()).state.display == ""


# MAKE_PERCENT

def test_percent(press):
    assert press("50%").display == "0.5"
    assert press("5%").display == "0.05"


def test_percent_keeps_mode(press):
    s = press("5+3=%")
    assert s.display == "0.08"
    assert s.mode is Mode.RESULT_SHOWN
    assert s.register == "3"


def test_percent_on_empty_display():
    s = CalculatorState(display="", register="5", mode=Mode.OPERATOR_SELECTED, operation=Operation.ADD)
    assert apply(s, MakePercent()).state.display == "NaN"


# Scenarios

def test_scenario_add_then_equals(press):
    s = press("5+3=")
    assert s.display == "8"
    assert s.mode is Mode.RESULT_SHOWN
    assert s.register == "3"


def test_scenario_repeat_equals(press):
    s = press("5+3==")
    assert s.display == "11"
    assert s.register == "3"


def test_scenario_chained_ops(press):
    assert press("5+3+").register == "8"
    assert press("5+3+2=").display == "10"


def test_scenario_decimal_entry(press):
    assert press(".5").display == "0.5"


def test_next_state_keeps_state_object_on_reject():
    r = Reducer()
    s = CalculatorState(display="1.")
    assert r.next_state(s, AddDecimal()) is s
    assert r.next_state(s, NumberInput("2")).display == "1.2"
