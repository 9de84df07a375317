"""
Glob-style pattern matching.

Supports two wildcards:
- '*' matches zero or more of any character
- '?' matches exactly one character that is not a record separator
"""

# Characters a '?' wildcard refuses to match
RECORD_SEPARATORS = frozenset('.\n\r')


def matches(text: str, pattern: str) -> bool:
    """
    Check whether text matches a glob pattern.

    Args:
        text: Text to test
        pattern: Pattern with optional '*' and '?' wildcards

    Returns:
        True if the whole text matches the whole pattern
    """
    t = p = 0
    # Position of the last '*' seen and the text index it is currently covering
    star_p = -1
    star_t = 0

    while t < len(text):
        if p < len(pattern) and pattern[p] == '*':
            star_p = p
            star_t = t
            p += 1
        elif p < len(pattern) and (
            (pattern[p] == '?' and text[t] not in RECORD_SEPARATORS)
            or (pattern[p] != '?' and pattern[p] == text[t])
        ):
            t += 1
            p += 1
        elif star_p >= 0:
            # Backtrack: let the last '*' swallow one more character
            star_t += 1
            t = star_t
            p = star_p + 1
        else:
            return False

    # Trailing stars match the empty remainder
    while p < len(pattern) and pattern[p] == '*':
        p += 1

    return p == len(pattern)


def matchesi(text: str, pattern: str) -> bool:
    """Case-insensitive variant of matches()."""
    return matches(text.upper(), pattern.upper())
