"""Eval and match commands."""

import logging
from argparse import Namespace

from textwire.expr import ExpressionEvaluator, is_nan
from textwire.text import matches, matchesi

from .common import configure_logging


logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render integral results without a trailing '.0'."""
    if value != value:
        return 'nan'
    if value in (float('inf'), float('-inf')):
        return 'inf' if value > 0 else '-inf'
    if value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def eval_expression(args: Namespace) -> int:
    """Run the eval command; exit 1 when the expression is malformed or the result is NaN."""
    configure_logging(args)

    ok, value, error = ExpressionEvaluator().evaluate_safe(args.expression)
    print(format_number(value))
    if not ok:
        logger.error(f"Malformed expression: {error}")
        return 1
    if is_nan(value):
        logger.warning(f"Expression {args.expression!r} has no numeric value")
        return 1
    return 0


def match_pattern(args: Namespace) -> int:
    """Run the match command; exit 0 on a match, 1 otherwise."""
    configure_logging(args)

    matcher = matchesi if args.ignore_case else matches
    matched = matcher(args.text, args.pattern)
    logger.debug(f"{args.text!r} {'matches' if matched else 'does not match'} {args.pattern!r}")
    return 0 if matched else 1
