"""
Replay system for calculator state reconstruction.

Same actions -> same state.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
