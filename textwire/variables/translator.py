"""
Recursive variable translation.
Resolves $name and $a.b references in text against a VariableStore.

Values are translated recursively. Each expansion carries the set of keys
already being expanded; a key that is met again is replaced by its stored
value as-is, which guarantees termination for cyclic definitions.

After a pass the output is rescanned. Inserted values are already final,
so only references that span an insertion boundary (as in '$$which') are
resolved again.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from .references import canonical_key, extract
from .store import VariableStore, default_store

logger = logging.getLogger(__name__)


@dataclass
class TranslatorConfig:
    """Reference syntax and recursion limits."""
    sep0: str = '$'
    sep1: str = '.'
    max_depth: int = 256


class Translator:
    """
    Translates text containing variable references.

    Example:
        store = VariableStore({'user': 'ada', 'greeting': 'hi $user'})
        Translator(store).translate('$greeting!')  # 'hi ada!'
    """

    def __init__(self, store: Optional[VariableStore] = None, config: Optional[TranslatorConfig] = None):
        """
        Initialize the translator.

        Args:
            store: Variable store to resolve against (defaults to the process-wide store)
            config: Reference syntax and limits
        """
        self.store = store if store is not None else default_store()
        self.config = config or TranslatorConfig()

    def _reference_pattern(self) -> re.Pattern:
        # sep0, then identifier characters, never ending on a separator
        separators = re.escape('.' + self.config.sep1)
        return re.compile(re.escape(self.config.sep0) + r'[\w' + separators + r']*\w')

    def find_references(self, text: str) -> List[str]:
        """
        Find the distinct references in text, in order of first appearance.

        A reference is sep0 followed by one or more identifier characters
        (letters, digits, '.', '_'). Trailing dots end the sentence, not the
        reference.

        Args:
            text: Text to scan

        Returns:
            List of reference strings including their sep0 prefix
        """
        found: List[str] = []
        for match in self._reference_pattern().finditer(text):
            if match.group(0) not in found:
                found.append(match.group(0))
        return found

    def reference_key(self, reference: str) -> str:
        """Return the canonical store key for a reference."""
        return canonical_key(extract(reference, self.config.sep0, self.config.sep1))

    def translate(self, text: str) -> str:
        """
        Translate every reference in text.

        Unknown variables resolve to (and are created as) empty strings.

        Args:
            text: Text containing references

        Returns:
            Fully translated text
        """
        result, _ = self._translate(text, frozenset(), 0)
        return result

    def _resolve(self, key: str, in_flight: FrozenSet[str], depth: int) -> Tuple[str, bool]:
        """Return (value, truncated) for one key."""
        if key in in_flight:
            logger.debug(f"Cycle at '{key}', keeping stored value unexpanded")
            return self.store.locate_value(key), False

        if depth >= self.config.max_depth:
            logger.warning(f"Translation depth limit ({self.config.max_depth}) reached at '{key}'")
            return self.store.locate_value(key), True

        return self._translate(self.store.locate_value(key), in_flight | {key}, depth + 1)

    def _translate(self, text: str, in_flight: FrozenSet[str], depth: int) -> Tuple[str, bool]:
        """
        Translate text, rescanning the output for references it introduced.

        Every character of the working text is tagged with the insertion it
        came from (0 for caller text). A reference lying wholly inside one
        insertion was settled when that value was translated and is skipped.

        Returns:
            (text, truncated) where truncated means the depth limit was hit
        """
        pattern = self._reference_pattern()
        resolved: Dict[str, Tuple[str, bool]] = {}
        current = text
        origins = [0] * len(text)
        insertion = 0

        while True:
            parts: List[str] = []
            next_origins: List[int] = []
            last = 0
            truncated = False

            for match in pattern.finditer(current):
                start, end = match.span()
                owner = origins[start]
                if owner and all(origin == owner for origin in origins[start:end]):
                    continue

                key = self.reference_key(match.group(0))
                if key not in resolved:
                    resolved[key] = self._resolve(key, in_flight, depth)
                value, value_truncated = resolved[key]
                truncated = truncated or value_truncated

                insertion += 1
                parts.append(current[last:start])
                next_origins.extend(origins[last:start])
                parts.append(value)
                next_origins.extend([insertion] * len(value))
                last = end

            if not parts:
                return current, False

            parts.append(current[last:])
            next_origins.extend(origins[last:])
            current = ''.join(parts)
            origins = next_origins

            if truncated:
                return current, True
            depth += 1


def translate(text: str, store: Optional[VariableStore] = None, config: Optional[TranslatorConfig] = None) -> str:
    """Translate text against a store (defaults to the process-wide store)."""
    return Translator(store, config).translate(text)
