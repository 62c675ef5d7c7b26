"""Binary arithmetic for the calculator keypad.

Every operation works on double-precision floats and follows IEEE-754:
division by zero yields an infinity or NaN instead of raising, and overflow
saturates to infinity. Only unknown operators and unparsable input raise.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from deskcalc.errors import InvalidNumericInput, UnsupportedOperator

BinaryOp = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    # Sign follows the dividend, like truncating division.
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and math.fmod(value, 2.0) != 0.0


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0.0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0.0:
            # Zero raised to a negative power.
            if math.copysign(1.0, a) < 0.0 and _is_odd_integer(b):
                return -math.inf
            return math.inf
        # Negative base with a non-integral exponent.
        return math.nan


_OPERATORS: dict[str, BinaryOp] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _remainder,
    "^": _power,
}


def supported_operators() -> tuple[str, ...]:
    """Return the operator symbols accepted by :func:`evaluate`."""
    return tuple(_OPERATORS)


def evaluate(a: float, b: float, symbol: str) -> float:
    """Apply ``symbol`` to ``a`` and ``b``.

    Raises:
        UnsupportedOperator: ``symbol`` is not one of ``+ - * / % ^``.
    """
    if not isinstance(symbol, str):
        raise UnsupportedOperator(symbol)
    op = _OPERATORS.get(symbol)
    if op is None:
        raise UnsupportedOperator(symbol)
    return float(op(float(a), float(b)))


def parse_number(text: str) -> float:
    """Convert user-entered text to a float.

    Uses Python's standard float syntax; nothing beyond that is trimmed.

    Raises:
        InvalidNumericInput: ``text`` is not a string or not a number.
    """
    if not isinstance(text, str):
        raise InvalidNumericInput(text)
    try:
        return float(text)
    except ValueError as exc:
        raise InvalidNumericInput(text) from exc


def evaluate_text(first: str, second: str, symbol: str) -> float:
    """Parse both display operands and evaluate them."""
    return evaluate(parse_number(first), parse_number(second), symbol)
