"""
Numeric helpers: parsing, formatting and evaluation.

The display and register are strings. These helpers turn them into floats
and back using the conventions of a browser calculator: parsing reads the
longest numeric prefix, formatting produces the shortest round-trip digits,
and arithmetic never raises.
"""

import math
import re
from decimal import Decimal
from typing import Callable, Dict, Tuple

from .types import Operation

_NUMBER_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)

# Decimal exponent bounds for plain (non-scientific) notation.
_MAX_PLAIN_EXPONENT = 21
_MIN_PLAIN_EXPONENT = -6


def parse_number(text: str) -> float:
    """
    Parse the longest numeric prefix of text.

    Returns:
        float value, or nan if text has no numeric prefix ("", "-", "-.")

    Example:
        parse_number("0.") -> 0.0
        parse_number("1e+21.") -> 1e21
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1))


def _shortest_digits(value: float) -> Tuple[str, int]:
    """
    Shortest round-trip digits of a positive finite float.

    Returns (digits, n) such that value == 0.<digits> * 10**n.
    """
    _, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(d) for d in digits)
    return text, exponent + len(text)


def format_number(value: float) -> str:
    """
    Render a float the way Number.prototype.toString does.

    Example:
        format_number(8.0) -> "8"
        format_number(1e21) -> "1e+21"
        format_number(float("inf")) -> "Infinity"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(abs(value))
    k = len(digits)

    if k <= n <= _MAX_PLAIN_EXPONENT:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_PLAIN_EXPONENT:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_PLAIN_EXPONENT < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    exponent = n - 1
    exponent_text = ("+" if exponent >= 0 else "-") + str(abs(exponent))
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return sign + mantissa + "e" + exponent_text


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if math.isnan(a) or a == 0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


OPERATIONS: Dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: lambda a, b: a + b,
    Operation.SUBTRACT: lambda a, b: a - b,
    Operation.MULTIPLY: lambda a, b: a * b,
    Operation.DIVIDE: _divide,
}


def evaluate(operation: Operation, a: float, b: float) -> float:
    """Apply operation to (a, b) with IEEE-754 results for zero division."""
    return OPERATIONS[operation](a, b)


def calculate(operation: Operation, a: float, b: float) -> str:
    """Evaluate and format in one step."""
    return format_number(evaluate(operation, a, b))
