"""
String casting.

Converts stored strings to primitive values without ever raising:
the leading number is parsed when there is one, otherwise the string's
truthiness is used (empty, "0" and "false" are false, anything else true).
"""

import math
import re
from typing import Any, Union

INT_PREFIX = re.compile(r'\s*[+-]?\d+')
FLOAT_PREFIX = re.compile(r'\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

FALSE_STRINGS = ('0', 'false')

CastKind = Union[type, str]


def is_true(text: str) -> bool:
    """Truthiness rule for strings that are not numbers."""
    return bool(text) and text not in FALSE_STRINGS


def as_int(text: str) -> int:
    match = INT_PREFIX.match(text)
    if match:
        return int(match.group(0))
    return int(is_true(text))


def as_float(text: str) -> float:
    match = FLOAT_PREFIX.match(text)
    if match:
        return float(match.group(0))
    return float(is_true(text))


def as_bool(text: str) -> bool:
    # Only a leading 0 or 1 parses as a boolean number
    match = INT_PREFIX.match(text)
    if match and int(match.group(0)) in (0, 1):
        return bool(int(match.group(0)))
    return is_true(text)


def as_char(text: str) -> str:
    if len(text) == 1:
        return text
    return chr(as_int(text) & 0xFF)


_CASTS = {
    int: as_int,
    float: as_float,
    bool: as_bool,
    str: str,
    'int': as_int,
    'float': as_float,
    'double': as_float,
    'bool': as_bool,
    'str': str,
    'string': str,
    'char': as_char,
}


def cast(text: str, kind: CastKind) -> Any:
    """
    Convert a string to a primitive value.

    Args:
        text: String to convert
        kind: int, float, bool, str, or one of the names
            'int', 'float', 'double', 'bool', 'str', 'string', 'char'

    Returns:
        Converted value

    Raises:
        ValueError: If kind is not a supported cast
    """
    try:
        converter = _CASTS[kind]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported cast type: {kind!r}")
    return converter(text)


def precise(value: float) -> str:
    """
    Render a float as exact hexadecimal text.

    Args:
        value: Number to render

    Returns:
        'INF', '-INF', 'NaN' or float.hex() output
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'INF' if value > 0 else '-INF'
    return float(value).hex()


def from_precise(text: str) -> float:
    """Inverse of precise()."""
    special = {'INF': math.inf, '-INF': -math.inf, 'NAN': math.nan}
    key = text.strip().upper()
    if key in special:
        return special[key]
    return float.fromhex(text)
