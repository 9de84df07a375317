"""
textwire: string interpolation, multi-pattern substitution and arithmetic
evaluation for plain text.
"""

from .expr import NAN, ExpressionEvaluator, evaluate, is_nan
from .text import WireString, WireStrings, interpolate, matches, matchesi
from .variables import (
    MultiPatternSubstitutor,
    Translator,
    TranslatorConfig,
    VariableStore,
    declare,
    extract,
    read,
    read_as,
    substitute,
    translate,
)

__version__ = '0.1.0'

__all__ = [
    'NAN', 'ExpressionEvaluator', 'evaluate', 'is_nan',
    'WireString', 'WireStrings', 'interpolate', 'matches', 'matchesi',
    'MultiPatternSubstitutor', 'substitute',
    'Translator', 'TranslatorConfig', 'translate',
    'VariableStore', 'declare', 'read', 'read_as', 'extract',
]
