"""
Runtime type predicates.

Each predicate takes any value and answers a single yes/no question about its
runtime type. None of them raise.
"""

from __future__ import annotations

import cmath
import inspect
import math
import numbers
import re
from typing import Any

from typeverify.core.sentinels import UNDEFINED


def is_defined(value: Any = UNDEFINED) -> bool:
    """Check that ``value`` is bound, i.e. not ``UNDEFINED``."""
    return value is not UNDEFINED


def is_object(value: Any) -> bool:
    """Check if ``value`` is a plain record (a dict)."""
    return isinstance(value, dict)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


# TODO: decide whether is_function should also accept async functions.
def is_function(value: Any) -> bool:
    """Check if ``value`` is a synchronous callable.

    Async functions are reported by :func:`is_async_function` instead.
    """
    return callable(value) and not is_async_function(value)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_number(value: Any) -> bool:
    """Check if ``value`` has a numeric runtime type.

    ``bool`` is excluded even though it subclasses ``int``; numeric text is
    not a number (see :func:`can_be_number`).
    """
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_null(value: Any) -> bool:
    return value is None


def is_async_function(value: Any) -> bool:
    """Check if calling ``value`` returns a coroutine.

    Relies on the coroutine marker of the function object (the code flag, or
    ``inspect.markcoroutinefunction``), not on what a call happens to return.
    """
    return inspect.iscoroutinefunction(value)


def is_empty_object(value: Any) -> bool:
    return is_object(value) and len(value) == 0


def is_empty_string(value: Any) -> bool:
    return is_string(value) and value == ""


def is_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) == 0


def is_empty(value: Any) -> bool:
    """Check if ``value`` is None, undefined, or an empty string, list or dict."""
    return (
        is_null(value)
        or not is_defined(value)
        or is_empty_string(value)
        or is_empty_array(value)
        or is_empty_object(value)
    )


def _coerce_text(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        # Radix-prefixed integer literals: 0x1f, 0o17, 0b101
        return float(int(text.strip(), 0))


def can_be_number(value: Any) -> bool:
    """Check if ``value`` can be coerced to a number that is not NaN.

    Unlike :func:`is_number` this accepts numeric text such as ``"42"`` or
    ``" 1e3 "``.
    """
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return not cmath.isnan(value)
    try:
        if isinstance(value, str):
            number = _coerce_text(value)
        else:
            number = float(value)
    except OverflowError:
        return True
    except (TypeError, ValueError):
        return False
    return not math.isnan(number)
