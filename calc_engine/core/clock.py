"""
Deterministic clock for ordering raw input events.

Timestamps are plain monotonic integers supplied by the caller, so merged
input streams replay in the same order every time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeterministicClock:
    """
    Immutable logical clock.

    In production: the front end stamps each raw event from a running clock.
    In tests: tick manually.
    """
    current: int = 0

    def now(self) -> int:
        return self.current

    def tick(self, step: int = 1) -> "DeterministicClock":
        """Return a new clock advanced by step."""
        return DeterministicClock(self.current + step)
