"""
Unit tests for core/stdlib/arithmetic.py.
"""
import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from core.stdlib import arithmetic
from core.stdlib.errors import ErrorCode, StdlibError


class TestBasicOperations:
    """Tests for add, sub, mul, div and modulo."""

    @pytest.mark.parametrize("a,b,expected", [
        ("10", "5", "15"),
        ("10.5", "5.5", "16"),
        ("-10", "5", "-5"),
        ("0.1", "0.2", "0.30000000000000004"),
    ])
    def test_add(self, a, b, expected):
        assert arithmetic.add(a, b) == expected

    def test_sub(self):
        assert arithmetic.sub("10", "5") == "5"
        assert arithmetic.sub("5", "10") == "-5"
        assert arithmetic.sub("10.5", "5.5") == "5"

    def test_mul(self):
        assert arithmetic.mul("10", "-5") == "-50"
        assert arithmetic.mul("2.5", "4") == "10"

    def test_div(self):
        assert arithmetic.div("10", "4") == "2.5"
        with pytest.raises(StdlibError) as exc_info:
            arithmetic.div("10", "0")
        assert exc_info.value.code == ErrorCode.DIVISION_BY_ZERO
        assert str(exc_info.value) == "MATH-001: Division by zero"

    def test_modulo(self):
        assert arithmetic.modulo("10", "3") == "1"
        assert arithmetic.modulo("10", "5") == "0"
        assert arithmetic.modulo("-7", "3") == "-1"
        with pytest.raises(StdlibError):
            arithmetic.modulo("1", "0")

    def test_whitespace_is_trimmed(self):
        assert arithmetic.add(" 1 ", "2\n") == "3"


class TestRoundingAndBounds:
    """Tests for abs, rounding, min/max, clamp and pow."""

    def test_abs(self):
        assert arithmetic.abs_("-42") == "42"
        assert arithmetic.abs_("42") == "42"

    @pytest.mark.parametrize("value,expected", [
        ("3.7", "4"),
        ("3.4", "3"),
        ("2.5", "3"),
        ("-2.5", "-3"),
    ])
    def test_round_half_away_from_zero(self, value, expected):
        assert arithmetic.round_(value) == expected

    def test_floor_and_ceil(self):
        assert arithmetic.floor("3.7") == "3"
        assert arithmetic.ceil("3.4") == "4"

    def test_min_max(self):
        assert arithmetic.min_("10", "5") == "5"
        assert arithmetic.max_("10", "5") == "10"

    @pytest.mark.parametrize("value,expected", [("15", "10"), ("5", "5"), ("-5", "0")])
    def test_clamp(self, value, expected):
        assert arithmetic.clamp(value, "0", "10") == expected

    def test_pow(self):
        assert arithmetic.pow_("2", "3") == "8"
        assert arithmetic.pow_("10", "2") == "100"

    def test_pow_overflow(self):
        with pytest.raises(StdlibError) as exc_info:
            arithmetic.pow_("10", "400")
        assert exc_info.value.code == ErrorCode.OVERFLOW

    def test_mul_overflow(self):
        with pytest.raises(StdlibError) as exc_info:
            arithmetic.mul("1e308", "10")
        assert "MATH-003" in str(exc_info.value)


class TestCompare:
    """Tests for compare()."""

    @pytest.mark.parametrize("a,op,b,expected", [
        ("10", ">", "5", "true"),
        ("5", ">", "10", "false"),
        ("10", "==", "10", "true"),
        ("10", "!=", "5", "true"),
        ("3", "<=", "3", "true"),
        ("3", ">=", "4", "false"),
    ])
    def test_compare(self, a, op, b, expected):
        assert arithmetic.compare(a, op, b) == expected

    def test_invalid_operator(self):
        with pytest.raises(StdlibError) as exc_info:
            arithmetic.compare("1", "<>", "2")
        assert exc_info.value.code == ErrorCode.INVALID_OPERATOR


class TestInvalidNumbers:
    """Tests for parse_number()."""

    @pytest.mark.parametrize("record", ["abc", "", "nan", "inf", "1,5"])
    def test_rejected(self, record):
        with pytest.raises(StdlibError) as exc_info:
            arithmetic.add(record, "5")
        assert exc_info.value.code == ErrorCode.INVALID_NUMBER
        assert str(exc_info.value).startswith("MATH-002: Invalid numeric format")
