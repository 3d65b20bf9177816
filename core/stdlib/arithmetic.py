"""
Arithmetic helpers.

Numbers travel as records (strings): every function parses its inputs
and formats its result back to a string.
"""
import math

from core.stdlib.errors import ErrorCode, StdlibError

COMPARISONS = {
    ">": lambda a, b: a > b,
    "<": lambda a, b: a < b,
    ">=": lambda a, b: a >= b,
    "<=": lambda a, b: a <= b,
    "==": lambda a, b: abs(a - b) < 1e-12,
    "!=": lambda a, b: abs(a - b) >= 1e-12,
}


def parse_number(record):
    try:
        value = float(record.strip())
    except ValueError:
        raise StdlibError(ErrorCode.INVALID_NUMBER, f"Invalid numeric format: {record}")
    if math.isnan(value) or math.isinf(value):
        raise StdlibError(ErrorCode.INVALID_NUMBER, f"Invalid numeric format: {record}")
    return value


def format_number(value):
    """Drop the decimal part of whole numbers: 16.0 -> '16'."""
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def _checked(value):
    if math.isinf(value) or math.isnan(value):
        raise StdlibError(ErrorCode.OVERFLOW, "Overflow or underflow")
    return format_number(value)


def add(a, b):
    return _checked(parse_number(a) + parse_number(b))


def sub(a, b):
    return _checked(parse_number(a) - parse_number(b))


def mul(a, b):
    return _checked(parse_number(a) * parse_number(b))


def div(a, b):
    divisor = parse_number(b)
    if divisor == 0.0:
        raise StdlibError(ErrorCode.DIVISION_BY_ZERO, "Division by zero")
    return _checked(parse_number(a) / divisor)


def modulo(a, b):
    """Remainder with the sign of the dividend, like C's fmod."""
    divisor = parse_number(b)
    if divisor == 0.0:
        raise StdlibError(ErrorCode.DIVISION_BY_ZERO, "Division by zero")
    return format_number(math.fmod(parse_number(a), divisor))


def abs_(n):
    return format_number(abs(parse_number(n)))


def round_(n):
    """Round half away from zero."""
    value = parse_number(n)
    return format_number(math.copysign(math.floor(abs(value) + 0.5), value))


def floor(n):
    return format_number(math.floor(parse_number(n)))


def ceil(n):
    return format_number(math.ceil(parse_number(n)))


def min_(a, b):
    return format_number(min(parse_number(a), parse_number(b)))


def max_(a, b):
    return format_number(max(parse_number(a), parse_number(b)))


def clamp(n, low, high):
    return format_number(min(max(parse_number(n), parse_number(low)), parse_number(high)))


def pow_(n, exponent):
    try:
        result = math.pow(parse_number(n), parse_number(exponent))
    except (OverflowError, ValueError):
        raise StdlibError(ErrorCode.OVERFLOW, "Overflow or underflow")
    return _checked(result)


def compare(a, operator, b):
    """Compare two numbers; returns the record 'true' or 'false'."""
    if operator not in COMPARISONS:
        raise StdlibError(ErrorCode.INVALID_OPERATOR, f"Invalid operator: {operator}")
    return "true" if COMPARISONS[operator](parse_number(a), parse_number(b)) else "false"
