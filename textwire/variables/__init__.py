"""
Variable interpolation module.
Implements the variable store, reference extraction, recursive translation
and multi-pattern substitution.
"""

from .access import declare, read, read_as
from .references import canonical_key, extract, reference_key
from .store import VariableRef, VariableStore, default_store, reset_default_store
from .substitution import MultiPatternSubstitutor, substitute
from .translator import Translator, TranslatorConfig, translate

__all__ = [
    'MultiPatternSubstitutor', 'substitute',
    'VariableStore', 'VariableRef', 'default_store', 'reset_default_store',
    'extract', 'canonical_key', 'reference_key',
    'Translator', 'TranslatorConfig', 'translate',
    'declare', 'read', 'read_as',
]
