"""CLI command handlers."""

from .evaluate import eval_expression, match_pattern
from .subst import substitute_text
from .translate import translate_text

__all__ = ['translate_text', 'substitute_text', 'eval_expression', 'match_pattern']
