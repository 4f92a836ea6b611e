"""
Replay runner: fold an action sequence into a calculator state.

Replay is pure: applies the reducer to each action in order.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.actions import Action
from ..core.reducer import Applied, Reducer
from ..core.state import CalculatorState


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions accepted
        rejected: Number of actions absorbed as no-ops
    """
    state: CalculatorState
    applied: int
    rejected: int

    @property
    def total(self) -> int:
        return self.applied + self.rejected


def replay(
    actions: Iterable[Action],
    reducer: Optional[Reducer] = None,
    initial: Optional[CalculatorState] = None,
    to_index: Optional[int] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct calculator state.

    Args:
        actions: Actions in input order
        reducer: Reducer to use (default reducer if None)
        initial: Starting state (fresh calculator if None)
        to_index: Stop after this action index (inclusive, None = all)

    Returns:
        ReplayResult with final state and counts
    """
    reducer = reducer or Reducer()
    st = initial if initial is not None else CalculatorState.initial()
    applied = 0
    rejected = 0

    for index, action in enumerate(actions):
        if to_index is not None and index > to_index:
            break
        transition = reducer.apply(st, action)
        if isinstance(transition, Applied):
            st = transition.state
            applied += 1
        else:
            rejected += 1

    return ReplayResult(state=st, applied=applied, rejected=rejected)
