#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Edge case tests for per-cell type inference.
"""

import json
import sys

import pytest

from csvToJson import coerce_cell, convert


@pytest.mark.parametrize("cell,expected", [
    ("42", 42),
    ("-7", -7),
    ("+3", 3),
    ("0", 0),
    ("007", 7),
    ("3.14", 3.14),
    ("-0.5", -0.5),
    (".5", 0.5),
    ("5.", 5),
    ("3.0", 3),
    ("1e3", 1000),
    ("2.5E-3", 0.0025),
    ("12345678901234567890", 12345678901234567890),
])
def test_numbers(cell, expected):
    """Decimal literals become numbers."""
    value = coerce_cell(cell)
    assert value == expected
    assert not isinstance(value, (bool, str))


@pytest.mark.parametrize("cell", ["3.0", "1e3", "5."])
def test_integral_floats_serialize_without_fraction(cell):
    """Integral values are written the way the browser application showed them."""
    assert isinstance(coerce_cell(cell), int)


def test_large_float_stays_float():
    """Floats beyond exact integer range are not turned into ints."""
    assert isinstance(coerce_cell("1e300"), float)


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"),
                    reason="no integer string conversion limit")
@pytest.mark.parametrize("digits", ["1" * 5000, "-" + "9" * 5000])
def test_overlong_integer_stays_string(digits):
    """Integers too long to convert are kept as text, like 1e400."""
    assert coerce_cell(digits) == digits
    assert json.loads(convert("a\n" + digits)) == [{"a": digits}]


@pytest.mark.parametrize("cell", [
    "Infinity", "-Infinity", "inf", "NaN", "nan",
    "0x1A", "0b101", "0o17", "1_000", "1 000", "1e400",
    "1.2.3", "12abc", "+", "-", ".", "e5", "١٢",
])
def test_non_numeric_forms_stay_strings(cell):
    """Non-finite, prefixed and grouped forms are not numbers."""
    assert coerce_cell(cell) == cell


@pytest.mark.parametrize("cell,expected", [
    ("true", True),
    ("TRUE", True),
    ("True", True),
    ("false", False),
    ("FaLsE", False),
])
def test_booleans(cell, expected):
    assert coerce_cell(cell) is expected


@pytest.mark.parametrize("cell", ["", "null", "NULL", "Null"])
def test_nulls(cell):
    """Empty cells and 'null' become None, never 0."""
    assert coerce_cell(cell) is None


@pytest.mark.parametrize("cell", ["New York", "yes", "none", "undefined", "1,5", "TRUE!"])
def test_strings(cell):
    assert coerce_cell(cell) == cell


def test_mixed_row_serialization():
    """Each JSON type is written natively."""
    output = convert("n,f,b,z,s\n42,3.14,TRUE,,New York")
    
    assert '"n": 42,' in output
    assert '"f": 3.14,' in output
    assert '"b": true,' in output
    assert '"z": null,' in output
    assert '"s": "New York"' in output
    assert json.loads(output) == [{"n": 42, "f": 3.14, "b": True, "z": None, "s": "New York"}]


def test_blank_cell_is_null_not_zero():
    records = json.loads(convert("a,b,c\n,,"))
    assert records == [{"a": None, "b": None, "c": None}]


def test_strings_are_escaped():
    """Quotes and backslashes in cells are JSON-escaped."""
    records = json.loads(convert('quote\nsay "hi" \\ bye'))
    assert records == [{"quote": 'say "hi" \\ bye'}]
