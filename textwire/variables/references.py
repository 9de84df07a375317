"""
Reference extraction.
Splits a '$'-prefixed reference such as '$user.name' into its path segments.
"""

from typing import List, Sequence

# Secondary separator value meaning "no secondary separator"
NO_SEPARATOR = '\0'


def extract(reference_text: str, sep0: str = '$', sep1: str = NO_SEPARATOR) -> List[str]:
    """
    Split a reference into path segments.

    Args:
        reference_text: Raw reference, expected to start with sep0
        sep0: Primary separator marking the reference start
        sep1: Optional secondary separator; NO_SEPARATOR disables it

    Returns:
        Non-empty list of segments. Input that does not start with sep0,
        or that contains nothing but separators, comes back as a single
        segment holding the whole input.
    """
    if not reference_text or not reference_text.startswith(sep0):
        return [reference_text]

    separators = {sep0}
    if sep1 and sep1 != NO_SEPARATOR:
        separators.add(sep1)

    segments: List[str] = []
    current: List[str] = []
    for ch in reference_text[len(sep0):]:
        if ch in separators:
            if current:
                segments.append(''.join(current))
                current = []
        else:
            current.append(ch)
    if current:
        segments.append(''.join(current))

    return segments or [reference_text]


def canonical_key(segments: Sequence[str]) -> str:
    """Join segments into the store key form, e.g. ['a', 'b'] -> 'a.b'."""
    return '.'.join(segments)


def reference_key(reference_text: str, sep0: str = '$', sep1: str = '.') -> str:
    """
    Convert a bare or sep0-prefixed name into its canonical key.

    Args:
        reference_text: 'name', '$name' or '$a.b'
        sep0: Primary separator
        sep1: Secondary separator

    Returns:
        Canonical key
    """
    if not reference_text.startswith(sep0):
        reference_text = sep0 + reference_text
    segments = extract(reference_text, sep0, sep1)
    if segments == [reference_text]:
        # Nothing but separators; keep the name as given
        return reference_text[len(sep0):]
    return canonical_key(segments)
