"""Field access and value helpers shared by the report stages.

Viewers and items may be models, plain objects, or mappings.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping
from decimal import Decimal
from enum import Enum
from numbers import Number
from typing import Any


def get_field(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def set_field(target: Any, key: str, value: Any) -> None:
    """Write ``key`` on the caller's object in place."""
    if isinstance(target, MutableMapping):
        target[key] = value
    else:
        setattr(target, key, value)


def render_value(value: Any) -> str:
    """Text used for template interpolation. Absent values render as ``None``."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def is_numeric(value: Any) -> bool:
    return isinstance(value, Number)


def is_poisoned(total: Any) -> bool:
    if isinstance(total, Decimal):
        return total.is_nan()
    return isinstance(total, float) and math.isnan(total)


def safe_le(a: Any, b: Any) -> bool:
    """``a <= b``, or False when the operands do not compare."""
    try:
        return bool(a <= b)
    except (TypeError, ArithmeticError):
        # Decimal thresholds raise InvalidOperation against NaN
        return False


def safe_gt(a: Any, b: Any) -> bool:
    """``a > b``, or False when the operands do not compare."""
    try:
        return bool(a > b)
    except (TypeError, ArithmeticError):
        return False


def accumulate(total: Any, contribution: Any) -> Any:
    """Add ``contribution`` to a running total.

    A non-numeric contribution poisons the total to NaN instead of raising;
    every later addition keeps it NaN.
    """
    if not (is_numeric(total) and is_numeric(contribution)):
        return math.nan
    try:
        return total + contribution
    except ArithmeticError:
        # signalling Decimal NaN
        return math.nan
    except TypeError:
        pass
    # Decimal + float
    try:
        return float(total) + float(contribution)
    except (TypeError, ValueError):
        return math.nan
