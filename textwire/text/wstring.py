"""
Extended string types.

WireString adds circular indexing, glob matching, casting and a handful
of splitting helpers on top of str. All methods return new strings.
"""

from typing import Any, Iterable, List, Mapping, Tuple, Union

from ..variables.substitution import MultiPatternSubstitutor, substitute
from .casting import CastKind, cast
from .matching import matches, matchesi

# Placeholders \x01..\x07 in an interpolate() format pick arguments 1..7
MAX_PLACEHOLDERS = 7


def _circular(size: int, pos: int) -> int:
    return pos % size


def interpolate(fmt: str, *args: Any) -> 'WireString':
    """
    Substitute positional placeholders in a format string.

    Control characters '\\x01' through '\\x07' are replaced by the string
    form of the first through seventh argument. Placeholders without a
    matching argument are dropped.

    Args:
        fmt: Format string
        *args: Values to insert

    Returns:
        Formatted string
    """
    if len(args) > MAX_PLACEHOLDERS:
        raise ValueError(f"At most {MAX_PLACEHOLDERS} arguments are supported, got {len(args)}")

    texts = [WireString.of(arg) for arg in args]
    out = []
    for ch in fmt:
        code = ord(ch)
        if 1 <= code <= MAX_PLACEHOLDERS:
            if code <= len(texts):
                out.append(texts[code - 1])
        else:
            out.append(ch)
    return WireString(''.join(out))


class WireString(str):
    """str with extra conveniences."""

    @classmethod
    def of(cls, value: Any) -> 'WireString':
        """Build from any value; booleans become 'true'/'false'."""
        if isinstance(value, bool):
            return cls('true' if value else 'false')
        return cls(value)

    # indexing

    def at(self, pos: int) -> 'WireString':
        """
        Character at a circular position.

        "hello".at(5) is "h" and "hello".at(-1) is "o". An empty string
        yields an empty string instead of raising.
        """
        if not self:
            return WireString()
        return WireString(str.__getitem__(self, _circular(len(self), pos)))

    def front(self) -> 'WireString':
        return self.at(0)

    def back(self) -> 'WireString':
        return self.at(-1)

    def pop_front(self) -> 'WireString':
        return WireString(self[1:])

    def pop_back(self) -> 'WireString':
        return WireString(self[:-1])

    def push_front(self, value: Any) -> 'WireString':
        return WireString(WireString.of(value) + self)

    def push_back(self, value: Any) -> 'WireString':
        return WireString(self + WireString.of(value))

    def wrap(self, pre: str = '', post: str = '') -> 'WireString':
        return WireString(pre + self + post)

    # case

    def uppercase(self) -> 'WireString':
        return WireString(self.upper())

    def lowercase(self) -> 'WireString':
        return WireString(self.lower())

    # matching

    def matches(self, pattern: str) -> bool:
        """Glob match with '*' and '?'."""
        return matches(self, pattern)

    def matchesi(self, pattern: str) -> bool:
        return matchesi(self, pattern)

    def starts_with(self, prefix: str) -> bool:
        return self.startswith(prefix)

    def starts_withi(self, prefix: str) -> bool:
        return self.upper().startswith(prefix.upper())

    def ends_with(self, suffix: str) -> bool:
        return self.endswith(suffix)

    def ends_withi(self, suffix: str) -> bool:
        return self.upper().endswith(suffix.upper())

    # slicing around a marker

    def left_of(self, substring: str) -> 'WireString':
        """Text before the first occurrence of substring, or the whole string."""
        pos = self.find(substring)
        return WireString(self if pos == -1 else self[:pos])

    def right_of(self, substring: str) -> 'WireString':
        """Text after the first occurrence of substring, or the whole string."""
        pos = self.find(substring)
        return WireString(self if pos == -1 else self[pos + len(substring):])

    # replacement

    def replace1(self, target: str, replacement: str) -> 'WireString':
        """Replace the first occurrence only."""
        return WireString(self.replace(target, replacement, 1))

    def replace_all(self, target: str, replacement: str) -> 'WireString':
        if not target:
            return WireString(self)
        return WireString(self.replace(target, replacement))

    def replace_map(
        self,
        replacements: Union[MultiPatternSubstitutor, Mapping[str, str], Iterable[Tuple[str, str]]]
    ) -> 'WireString':
        """Replace several patterns at once; later rules win at a shared position."""
        return WireString(substitute(self, replacements))

    # trimming

    def trim(self, chars: str = '') -> 'WireString':
        """Strip both ends; whitespace when chars is empty."""
        return WireString(self.strip(chars or None))

    def ltrim(self, chars: str = '') -> 'WireString':
        return WireString(self.lstrip(chars or None))

    def rtrim(self, chars: str = '') -> 'WireString':
        return WireString(self.rstrip(chars or None))

    # splitting

    def tokenize(self, delimiters: str) -> 'WireStrings':
        """
        Split on any of the delimiter characters, dropping empty tokens.

        Args:
            delimiters: Set of delimiter characters

        Returns:
            Tokens in order
        """
        tokens = WireStrings()
        current: List[str] = []
        for ch in self:
            if ch in delimiters:
                if current:
                    tokens.append(WireString(''.join(current)))
                    current = []
            else:
                current.append(ch)
        if current:
            tokens.append(WireString(''.join(current)))
        return tokens

    def split_keep(self, delimiters: str) -> 'WireStrings':
        """
        Split on delimiter characters, keeping each delimiter as its own token.

        "a=b".split_keep("=") gives ["a", "=", "b"].
        """
        tokens = WireStrings()
        current: List[str] = []
        for ch in self:
            if ch in delimiters:
                if current:
                    tokens.append(WireString(''.join(current)))
                    current = []
                tokens.append(WireString(ch))
            else:
                current.append(ch)
        if current:
            tokens.append(WireString(''.join(current)))
        return tokens

    # conversion

    def as_(self, kind: CastKind) -> Any:
        """Cast to int, float, bool, str or 'char' without raising."""
        return cast(self, kind)

    def __repr__(self) -> str:
        return f"WireString({str.__repr__(self)})"


class WireStrings(list):
    """List of WireString with circular access and formatting."""

    def __init__(self, items: Iterable[Any] = ()):
        super().__init__(WireString.of(item) for item in items)

    def append(self, item: Any) -> None:
        super().append(WireString.of(item))

    def at(self, pos: int) -> WireString:
        """Element at a circular position; empty string when the list is empty."""
        if not self:
            return WireString()
        return self[_circular(len(self), pos)]

    def str(self, fmt: str = '\x01\n', pre: str = '', post: str = '') -> str:
        """
        Render every element through an interpolate() format.

        A single element is rendered bare between pre and post.
        """
        if len(self) == 1:
            return pre + self[0] + post
        return pre + ''.join(interpolate(fmt, item) for item in self) + post


def format_keys(mapping: Mapping[Any, Any], fmt: str = '\x01\n', pre: str = '', post: str = '') -> str:
    """Render every key of mapping through an interpolate() format."""
    return pre + ''.join(interpolate(fmt, key) for key in mapping) + post


def format_values(mapping: Mapping[Any, Any], fmt: str = '\x01\n', pre: str = '', post: str = '') -> str:
    """Render every value of mapping through an interpolate() format."""
    return pre + ''.join(interpolate(fmt, value) for value in mapping.values()) + post


def format_items(mapping: Mapping[Any, Any], fmt: str = '\x01=\x02\n', pre: str = '', post: str = '') -> str:
    """
    Render every key/value pair of mapping through an interpolate() format.

    '\\x01' receives the key and '\\x02' the value, so
    format_items({'a': 1}, '\\x01:\\x02;') gives 'a:1;'.
    """
    return pre + ''.join(interpolate(fmt, key, value) for key, value in mapping.items()) + post
