"""
Tests for the display view model.
"""

from calc_engine.core.state import CalculatorState
from calc_engine.core.types import Mode, Operation
from calc_engine.view import Digit, DisplayModel


def test_digit_ids_are_right_aligned():
    model = DisplayModel.from_state(CalculatorState(display="12"))
    assert model.display_digits == (Digit("1", "disp8"), Digit("2", "disp9"))


def test_register_and_operator_while_entering():
    s = CalculatorState(display="3", register="12", mode=Mode.DIGIT_ENTRY, operation=Operation.ADD)
    model = DisplayModel.from_state(s)
    assert model.register_text == "12"
    assert [d.id for d in model.register_digits] == ["reg8", "reg9"]
    assert model.operation_text == "+"


def test_register_hidden_when_result_shown():
    s = CalculatorState(display="8", register="3", mode=Mode.RESULT_SHOWN, operation=Operation.ADD)
    model = DisplayModel.from_state(s)
    assert model.register_digits == ()
    assert model.operation_text == ""
    assert model.display_text == "8"


def test_display_truncated_to_width():
    s = CalculatorState(display="0.30000000000000004", mode=Mode.RESULT_SHOWN)
    assert DisplayModel.from_state(s).display_text == "0.30000000"
    assert DisplayModel.from_state(s, width=4).display_text == "0.30"


def test_no_operation_text_without_operation():
    model = DisplayModel.from_state(CalculatorState.initial())
    assert model.operation_text == ""
    assert model.display_digits == ()
