"""Convert command-line tokens to the values their keywords expect."""

import re

from extarg import settings

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[0-9A-Za-z+.-]+", re.ASCII)


def to_bool(value: str) -> bool:
    """Convert an exact `true` or `false` token to a bool."""
    try:
        return settings.BOOL_LITERALS[value]
    except KeyError as error:
        raise ValueError(value) from error


def to_int(value: str) -> int:
    """Convert a base-10 integer token with an optional sign."""
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(value)
    return int(value, 10)


def to_float(value: str) -> float:
    """Convert an ASCII floating-point literal token."""
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError(value)
    return float(value)
