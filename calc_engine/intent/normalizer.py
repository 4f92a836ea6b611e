"""
Action normalizer: raw key and click events -> calculator actions.

This is data lookup only. Keys and controls that have no mapping produce
None and are dropped by the caller.
"""

import heapq
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..core.actions import (
    DIGITS,
    Action,
    AddDecimal,
    ClearAll,
    MakePercent,
    NumberInput,
    RunCalc,
    SetOperator,
    SwitchSign,
)
from ..core.clock import DeterministicClock
from ..core.errors import InvalidActionError
from ..core.types import Operation

OPERATOR_KEYS: Dict[str, Operation] = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "/": Operation.DIVIDE,
    "x": Operation.MULTIPLY,
    "*": Operation.MULTIPLY,
}

KEY_ACTIONS: Dict[str, Action] = {
    ".": AddDecimal(),
    "=": RunCalc(),
    "Enter": RunCalc(),
    "Backspace": ClearAll(),
    "~": SwitchSign(),
    "%": MakePercent(),
}

NAMED_KEYS = ("Enter", "Backspace")


@dataclass(frozen=True)
class KeyEvent:
    """A key-down event; key is the browser-style key name."""
    ts: int
    key: str


@dataclass(frozen=True)
class ClickEvent:
    """A click on a keypad control carrying an optional data value."""
    ts: int
    control: str
    value: Optional[str] = None


InputEvent = Union[KeyEvent, ClickEvent]


def action_for_key(key: str) -> Optional[Action]:
    """
    Map a key name to an action.

    Example:
        action_for_key("*") -> SetOperator(Operation.MULTIPLY)
        action_for_key("Shift") -> None
    """
    if key in DIGITS:
        return NumberInput(key)
    if key in OPERATOR_KEYS:
        return SetOperator(OPERATOR_KEYS[key])
    return KEY_ACTIONS.get(key)


def action_for_click(control: str, value: Optional[str] = None) -> Optional[Action]:
    """
    Map a keypad control click to an action.

    Raises:
        InvalidActionError: If a number/operator control carries a bad value
    """
    if control == "number":
        return NumberInput(value)
    if control == "operator":
        return SetOperator(value)
    if control == "decimal":
        return AddDecimal()
    if control == "equal":
        return RunCalc()
    if control == "clear":
        return ClearAll()
    if control == "sign":
        return SwitchSign()
    if control == "percent":
        return MakePercent()
    return None


def normalize(event: InputEvent) -> Optional[Action]:
    """Map one raw input event to an action (None if unmapped)."""
    if isinstance(event, KeyEvent):
        return action_for_key(event.key)
    return action_for_click(event.control, event.value)


def merge_inputs(*sources: Iterable[InputEvent]) -> Iterator[InputEvent]:
    """
    Merge independently ordered raw input streams into one stream.

    Each source must already be in timestamp order. Events are yielded by
    timestamp; equal timestamps keep the order of the sources as passed.
    Nothing is dropped or batched.
    """
    def keyed(index: int, source: Iterable[InputEvent]):
        for position, event in enumerate(source):
            yield (event.ts, index, position), event

    streams = [keyed(i, s) for i, s in enumerate(sources)]
    for _, event in heapq.merge(*streams, key=lambda item: item[0]):
        yield event


def actions_from_inputs(*sources: Iterable[InputEvent]) -> Iterator[Action]:
    """Merge raw input sources and yield the mapped actions in order."""
    for event in merge_inputs(*sources):
        action = normalize(event)
        if action is not None:
            yield action


def parse_keys(script: str) -> List[str]:
    """
    Split a keystroke script into key names.

    Single characters are keys; "<Enter>" and "<Backspace>" name the
    non-printing keys. Whitespace separates nothing and is skipped. A "<"
    always opens a named key.

    Raises:
        InvalidActionError: If a "<" does not open a known named key

    Example:
        parse_keys("5 + 3<Enter>") -> ["5", "+", "3", "Enter"]
    """
    keys: List[str] = []
    i = 0
    while i < len(script):
        ch = script[i]
        if ch == "<":
            end = script.find(">", i + 1)
            token = script[i:end + 1] if end != -1 else script[i:]
            if token[1:-1] not in NAMED_KEYS or not token.endswith(">"):
                raise InvalidActionError(f"Unknown key: {token}")
            keys.append(token[1:-1])
            i = end + 1
            continue
        if not ch.isspace():
            keys.append(ch)
        i += 1
    return keys


def actions_from_keys(script: str) -> List[Action]:
    """Parse a keystroke script and map it to actions, dropping unmapped keys."""
    actions = []
    for key in parse_keys(script):
        action = action_for_key(key)
        if action is not None:
            actions.append(action)
    return actions


def key_events(
    keys: Iterable[str],
    clock: DeterministicClock,
) -> Tuple[List[KeyEvent], DeterministicClock]:
    """
    Stamp key names with successive clock ticks.

    Returns:
        The events and the advanced clock, to stamp the next batch from

    Example:
        events, clock = key_events(["5", "Enter"], DeterministicClock())
        [e.ts for e in events] -> [1, 2]
    """
    events: List[KeyEvent] = []
    for key in keys:
        clock = clock.tick()
        events.append(KeyEvent(ts=clock.now(), key=key))
    return events, clock
