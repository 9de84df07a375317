"""
Variable store.

Maps variable names to string values. Looking up a name that does not
exist yet creates it with an empty value, so callers can obtain a handle
to a variable before anything has been assigned to it.
"""

import logging
import threading
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


class VariableRef:
    """Mutable handle to one slot of a VariableStore."""

    __slots__ = ('_store', 'name')

    def __init__(self, store: 'VariableStore', name: str):
        self._store = store
        self.name = name

    @property
    def value(self) -> str:
        return self._store.locate_value(self.name)

    @value.setter
    def value(self, new_value: object) -> None:
        self._store.assign(self.name, new_value)

    def get(self) -> str:
        return self.value

    def set(self, new_value: object) -> 'VariableRef':
        self.value = new_value
        return self

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"VariableRef({self.name!r}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VariableRef):
            return self._store is other._store and self.name == other.name
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class VariableStore:
    """
    Name -> string value mapping with auto-vivification.

    A single lock guards each lookup or insert. It is never held while
    text is being translated.
    """

    def __init__(self, initial: Optional[Mapping[str, object]] = None):
        """
        Initialize the store.

        Args:
            initial: Optional variables to assign up front
        """
        self._values: Dict[str, str] = {}
        self._lock = threading.Lock()
        if initial:
            self.update(initial)

    def locate(self, name: str) -> VariableRef:
        """
        Return a handle to a variable, creating it empty if absent.

        Args:
            name: Canonical variable name

        Returns:
            Handle that reads and writes through to the store
        """
        self.locate_value(name)
        return VariableRef(self, name)

    def locate_value(self, name: str) -> str:
        """Return a variable's value, creating it empty if absent."""
        with self._lock:
            if name not in self._values:
                logger.debug(f"Auto-creating variable: {name}")
                self._values[name] = ''
            return self._values[name]

    def assign(self, name: str, value: object) -> None:
        """
        Set a variable's value.

        Args:
            name: Canonical variable name
            value: New value; non-strings are converted with to_text()
        """
        text = to_text(value)
        with self._lock:
            self._values[name] = text

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Read a variable without creating it."""
        with self._lock:
            return self._values.get(name, default)

    def update(self, values: Mapping[str, object]) -> None:
        """Assign several variables in order."""
        for name, value in values.items():
            self.assign(name, value)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._values)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of all variables."""
        with self._lock:
            return dict(self._values)

    def reset(self) -> None:
        """Remove every variable (useful for testing)."""
        with self._lock:
            self._values.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"VariableStore({self.snapshot()!r})"


def to_text(value: object) -> str:
    """
    Convert a value to its stored string form.

    Args:
        value: Value to convert

    Returns:
        'true'/'false' for booleans, str() for everything else
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, str):
        return value
    elif isinstance(value, VariableRef):
        return value.value
    else:
        return str(value)


_default_store = VariableStore()


def default_store() -> VariableStore:
    """Return the process-wide store used when none is passed explicitly."""
    return _default_store


def reset_default_store() -> None:
    """Empty the process-wide store."""
    _default_store.reset()
