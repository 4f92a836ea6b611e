"""
Input normalization: keys and clicks to calculator actions.
"""

from .normalizer import (
    KeyEvent,
    ClickEvent,
    InputEvent,
    action_for_key,
    action_for_click,
    normalize,
    merge_inputs,
    actions_from_inputs,
    parse_keys,
    actions_from_keys,
    key_events,
)

__all__ = [
    "KeyEvent",
    "ClickEvent",
    "InputEvent",
    "action_for_key",
    "action_for_click",
    "normalize",
    "merge_inputs",
    "actions_from_inputs",
    "parse_keys",
    "actions_from_keys",
    "key_events",
]
