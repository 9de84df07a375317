"""Arithmetic expression evaluator."""

from .evaluator import NAN, ExpressionEvaluator, evaluate, is_nan

__all__ = ['NAN', 'ExpressionEvaluator', 'evaluate', 'is_nan']
