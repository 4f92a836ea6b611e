import pytest

from calc_engine.core.state import CalculatorState
from calc_engine.intent import actions_from_keys
from calc_engine.replay import replay


@pytest.fixture
def press():
    """Replay a keystroke script from a fresh calculator and return the state."""
    def _press(keys: str, initial: CalculatorState = None) -> CalculatorState:
        return replay(actions_from_keys(keys), initial=initial).state
    return _press
