"""
Canonical serialization of calculator values.

Used wherever a state or action has to be compared or printed as text:
CLI JSON output and determinism tests.
"""

import dataclasses
import json
from enum import Enum
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert states, actions and nested containers to canonical form.

    Rules:
    - objects with to_dict() use it
    - other dataclasses become dicts of their fields, plus "type" if declared
    - enums become their value
    - dict keys sorted alphabetically, tuples converted to lists
    """
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        data = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        if hasattr(obj, "type"):
            data["type"] = obj.type
        return canonicalize(data)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string.

    Keys sorted, no whitespace, UTF-8 kept as-is.
    """
    canon = canonicalize(obj)
    return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
