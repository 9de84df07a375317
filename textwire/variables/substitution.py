"""
Multi-pattern substitution.
Replaces any of several literal patterns in a single left-to-right pass.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

logger = logging.getLogger(__name__)


RuleSource = Union['MultiPatternSubstitutor', Mapping[str, str], Iterable[Tuple[str, str]]]


class MultiPatternSubstitutor:
    """
    Ordered set of literal pattern -> replacement rules.

    At each scan position rules are tried from the most recently added to
    the least recently added; the first pattern found at that position is
    replaced and its span skipped. Output is never rescanned.
    """

    def __init__(self, rules: Union[Mapping[str, str], Iterable[Tuple[str, str]], None] = None):
        """
        Initialize the substitutor.

        Args:
            rules: Optional initial rules, as a mapping or (pattern, replacement) pairs
        """
        self._rules: Dict[str, str] = {}
        # First character -> rules starting with it, in try order
        self._index: Dict[str, List[Tuple[str, str]]] = {}

        if rules is not None:
            self.update(rules)

    def add(self, pattern: str, replacement: str) -> None:
        """
        Register a rule. Re-adding a pattern keeps its original priority.

        Args:
            pattern: Literal text to replace
            replacement: Text to emit instead
        """
        if not pattern:
            logger.debug("Skipping substitution rule with empty pattern")
            return

        self._rules[pattern] = str(replacement)
        self._index = {}
        logger.debug(f"Registered substitution rule: {pattern!r} -> {replacement!r}")

    def update(self, rules: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> None:
        """Register several rules in order."""
        items = rules.items() if isinstance(rules, Mapping) else rules
        for pattern, replacement in items:
            self.add(pattern, replacement)

    def rules(self) -> List[Tuple[str, str]]:
        """Return rules in registration order."""
        return list(self._rules.items())

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._rules.items())

    def _build_index(self) -> Dict[str, List[Tuple[str, str]]]:
        index: Dict[str, List[Tuple[str, str]]] = {}
        for pattern, replacement in reversed(list(self._rules.items())):
            index.setdefault(pattern[0], []).append((pattern, replacement))
        return index

    def substitute(self, text: str) -> str:
        """
        Apply all rules to text in one pass.

        Args:
            text: Input text

        Returns:
            Text with every matched pattern replaced
        """
        if not text or not self._rules:
            return text

        if not self._index:
            self._index = self._build_index()
        index = self._index

        out: List[str] = []
        i = 0
        length = len(text)
        while i < length:
            for pattern, replacement in index.get(text[i], ()):
                if text.startswith(pattern, i):
                    out.append(replacement)
                    i += len(pattern)
                    break
            else:
                out.append(text[i])
                i += 1

        return ''.join(out)


def substitute(text: str, rules: RuleSource) -> str:
    """
    Replace patterns in text using a rule set.

    Args:
        text: Input text
        rules: A MultiPatternSubstitutor, a mapping in registration order,
            or a sequence of (pattern, replacement) pairs

    Returns:
        Substituted text
    """
    if isinstance(rules, MultiPatternSubstitutor):
        return rules.substitute(text)
    return MultiPatternSubstitutor(rules).substitute(text)
