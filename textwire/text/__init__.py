"""String helpers: glob matching, casting and the extended string types."""

from .casting import cast, from_precise, precise
from .matching import matches, matchesi
from .wstring import WireString, WireStrings, format_items, format_keys, format_values, interpolate

__all__ = [
    'matches', 'matchesi',
    'cast', 'precise', 'from_precise',
    'WireString', 'WireStrings', 'interpolate',
    'format_keys', 'format_values', 'format_items',
]
