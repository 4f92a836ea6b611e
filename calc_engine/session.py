"""
Calculator session: owns the current state and publishes changes.

A session feeds actions to the reducer one at a time. Subscribers (a
renderer, a test) only read published states; they never mutate them.
Rejected actions publish nothing and leave the same state object in place.
"""

from typing import Callable, Iterable, List, Optional

from .core.actions import Action
from .core.errors import DispatchError
from .core.reducer import Applied, Reducer, Transition
from .core.state import CalculatorState
from .logging_config import get_logger

Subscriber = Callable[[CalculatorState], None]


class CalculatorSession:
    """
    Single owner of calculator state.

    Usage:
        session = CalculatorSession()
        session.subscribe(render)
        session.dispatch(NumberInput("5"))
    """

    def __init__(
        self,
        initial: Optional[CalculatorState] = None,
        reducer: Optional[Reducer] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self._state = initial if initial is not None else CalculatorState.initial()
        self._reducer = reducer or Reducer()
        self._subscribers: List[Subscriber] = []
        self._dispatching = False
        self.session_id = session_id or "calc"
        self.applied = 0
        self.rejected = 0
        self.logger = get_logger(__name__, trace_id=self.session_id)

    @property
    def state(self) -> CalculatorState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for published states.

        Returns:
            Function that removes the callback
        """
        self._subscribers.append(callback)
        self.logger.debug(f"Subscriber added ({len(self._subscribers)} total)")

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, action: Action) -> Transition:
        """
        Apply one action.

        Raises:
            DispatchError: If called from a subscriber during another dispatch
        """
        if self._dispatching:
            raise DispatchError(f"Cannot dispatch {action.type} while dispatching")

        self._dispatching = True
        try:
            transition = self._reducer.apply(self._state, action)
            if not isinstance(transition, Applied):
                self.rejected += 1
                self.logger.debug(f"{action.type} rejected: {transition.reason}")
                return transition

            self._state = transition.state
            self.applied += 1
            self.logger.debug(
                f"{action.type} applied: display={self._state.display!r} "
                f"mode={self._state.mode.value}"
            )
            for callback in list(self._subscribers):
                callback(self._state)
            return transition
        finally:
            self._dispatching = False

    def dispatch_all(self, actions: Iterable[Action]) -> CalculatorState:
        """Dispatch actions in order and return the final state."""
        for action in actions:
            self.dispatch(action)
        return self._state
