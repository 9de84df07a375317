"""
Declare, read and cast variables by name.

Names may be given bare ('user.name') or with their reference prefix
('$user.name'); both resolve to the same store key.
"""

from typing import Any, Optional

from ..text.casting import CastKind, cast
from .references import reference_key
from .store import VariableRef, VariableStore, default_store


def _store(store: Optional[VariableStore]) -> VariableStore:
    return store if store is not None else default_store()


def declare(store: Optional[VariableStore], name: str, value: Any = None) -> VariableRef:
    """
    Declare or update a variable.

    Args:
        store: Store to use (None for the process-wide store)
        name: Variable name, optionally '$'-prefixed
        value: Value to assign; None leaves an existing value untouched

    Returns:
        Handle to the variable
    """
    store = _store(store)
    ref = store.locate(reference_key(name))
    if value is not None:
        ref.value = value
    return ref


def read(store: Optional[VariableStore], name: str) -> str:
    """Read a variable's value, creating it empty if absent."""
    return _store(store).locate_value(reference_key(name))


def read_as(store: Optional[VariableStore], name: str, kind: CastKind) -> Any:
    """
    Read a variable and convert it to a primitive type.

    Args:
        store: Store to use (None for the process-wide store)
        name: Variable name, optionally '$'-prefixed
        kind: Target type, see textwire.text.casting.cast

    Returns:
        Converted value; never fails for supported kinds
    """
    return cast(read(store, name), kind)
