from __future__ import annotations

import functools
import inspect
import math
import re
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction

import pytest

from typeverify import (
    UNDEFINED,
    can_be_number,
    is_array,
    is_async_function,
    is_defined,
    is_empty,
    is_empty_array,
    is_empty_object,
    is_empty_string,
    is_function,
    is_null,
    is_number,
    is_object,
    is_regex,
    is_string,
)


def _sync(x):
    return x


async def _async(x):
    return x


async def _async_gen():
    yield 1


class _Record:
    pass


def test_is_defined_only_rejects_undefined_sentinel():
    assert is_defined(None)
    assert is_defined(0)
    assert is_defined("")
    assert not is_defined(UNDEFINED)
    assert not is_defined()


def test_undefined_is_distinct_from_none():
    assert is_null(None)
    assert not is_null(UNDEFINED)
    assert not UNDEFINED
    assert repr(UNDEFINED) == "undefined"


def test_is_object_accepts_dicts_only():
    assert is_object({})
    assert is_object({"a": 1})
    assert is_object(OrderedDict(a=1))
    assert not is_object([])
    assert not is_object(None)
    assert not is_object(_sync)
    assert not is_object(_Record())
    assert not is_object("text")


def test_is_string():
    assert is_string("")
    assert is_string("abc")
    assert not is_string(b"abc")
    assert not is_string(None)


def test_is_function_excludes_async_functions():
    assert is_function(_sync)
    assert is_function(lambda: None)
    assert is_function(len)
    assert not is_function(_async)
    assert not is_function("_sync")
    assert not is_function(None)


def test_is_async_function_uses_coroutine_marker():
    assert is_async_function(_async)
    assert is_async_function(functools.partial(_async, 1))
    assert not is_async_function(_sync)
    assert not is_async_function(_async_gen)
    assert not is_async_function(None)


@pytest.mark.skipif(not hasattr(inspect, "markcoroutinefunction"), reason="Python 3.12+")
def test_is_async_function_honours_explicit_marker():
    def wrapper(x):
        return _async(x)

    inspect.markcoroutinefunction(wrapper)
    assert is_async_function(wrapper)
    assert not is_function(wrapper)


def test_is_array():
    assert is_array([])
    assert is_array([1, "a", None])
    assert not is_array((1, 2))
    assert not is_array("abc")
    assert not is_array({})


def test_is_number_is_a_strict_type_check():
    assert is_number(42)
    assert is_number(4.2)
    assert is_number(math.nan)
    assert is_number(Decimal("1.5"))
    assert is_number(Fraction(1, 3))
    assert is_number(1 + 2j)
    assert not is_number("42")
    assert not is_number(True)
    assert not is_number(None)


def test_is_regex():
    assert is_regex(re.compile(r"\d+"))
    assert not is_regex(r"\d+")
    assert not is_regex(None)


def test_empty_variants():
    assert is_empty_object({})
    assert not is_empty_object({"a": 1})
    assert not is_empty_object([])

    assert is_empty_string("")
    assert not is_empty_string(" ")
    assert not is_empty_string(None)
    assert not is_empty_string([])

    assert is_empty_array([])
    assert not is_empty_array([None])
    assert not is_empty_array({})


@pytest.mark.parametrize("value", [None, UNDEFINED, "", [], {}])
def test_is_empty_matches_every_nothing_here_case(value):
    assert is_empty(value)


@pytest.mark.parametrize("value", [0, False, " ", [None], {"a": None}, math.nan, ()])
def test_is_empty_rejects_falsy_but_present_values(value):
    assert not is_empty(value)


def test_can_be_number_diverges_from_is_number():
    assert can_be_number("42")
    assert not can_be_number("abc")
    assert not is_number("42")
    assert is_number(42)


@pytest.mark.parametrize(
    "value",
    [42, 4.2, " 42 ", "1e3", "-0.5", "inf", "1_000", "0x1f", "0o17", "0b101", True, b"7", Decimal("2.5"), 10**400, 1 + 2j],
)
def test_can_be_number_accepts_coercible_values(value):
    assert can_be_number(value)


@pytest.mark.parametrize(
    "value",
    [math.nan, "nan", "abc", "", "12abc", None, UNDEFINED, [], {}, object(), Decimal("NaN"), complex(math.nan, 0)],
)
def test_can_be_number_rejects_nan_and_non_numeric_values(value):
    assert not can_be_number(value)
