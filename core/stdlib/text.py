"""
Text helpers: create, transform, inspect, match and format string records.
"""
import re

from core.stdlib.errors import ErrorCode, StdlibError


def _compile(pattern):
    try:
        return re.compile(pattern)
    except re.error as e:
        raise StdlibError(ErrorCode.INVALID_PATTERN, f"Invalid regex pattern: {pattern}: {e}")


def concat(parts):
    return "".join(parts)


def length(s):
    return len(s)


def upper(s):
    return s.upper()


def lower(s):
    return s.lower()


def split(s, delimiter):
    return s.split(delimiter)


def join(parts, separator):
    return separator.join(parts)


def matches(s, pattern):
    """Check whether pattern matches anywhere in s."""
    return _compile(pattern).search(s) is not None


def replace(s, old, new):
    return s.replace(old, new)


def replace_regex(s, pattern, replacement):
    return _compile(pattern).sub(replacement, s)


def capture(s, pattern):
    """Return the whole match followed by every group; [] when nothing matches."""
    match = _compile(pattern).search(s)
    if match is None:
        return []
    return [g for g in [match.group(0), *match.groups()] if g is not None]


def slice(s, start, end):
    """Substring from start to end, both inclusive."""
    if start < 0 or start > end or end >= len(s):
        raise StdlibError(ErrorCode.INDEX_OUT_OF_BOUNDS, "Index out of bounds")
    return s[start:end + 1]


def trim(s):
    return s.strip()


def trim_start(s):
    return s.lstrip()


def trim_end(s):
    return s.rstrip()


def starts_with(s, prefix):
    return s.startswith(prefix)


def ends_with(s, suffix):
    return s.endswith(suffix)


def contains(s, substring):
    return substring in s


def repeat(s, count):
    return s * count


def reverse(s):
    return s[::-1]


def pad_left(s, width, pad_char=" "):
    return s.rjust(width, pad_char)


def pad_right(s, width, pad_char=" "):
    return s.ljust(width, pad_char)


def compare(a, b):
    return a == b


def compare_ignore_case(a, b):
    return a.lower() == b.lower()
