"""
Exception types for the calculator engine.

Rejected keystrokes are not errors; they come back from the reducer as
Rejected transitions. These exceptions cover programming mistakes only.
"""


class InvalidTransitionError(Exception):
    """Raised when the reducer is handed an object that is not a known action."""
    pass


class InvalidActionError(Exception):
    """Raised when an action is built with a bad payload or unknown name."""
    pass


class DispatchError(Exception):
    """Raised when a session is asked to dispatch while already dispatching."""
    pass
