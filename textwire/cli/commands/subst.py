"""Subst command: single-pass multi-pattern replacement."""

import logging
from argparse import Namespace
from pathlib import Path

from textwire.exceptions import ConfigValidationError
from textwire.loader import VariablesLoader
from textwire.variables import MultiPatternSubstitutor

from .common import configure_logging, parse_assignments, read_input, write_output


logger = logging.getLogger(__name__)


def build_rules(args: Namespace) -> MultiPatternSubstitutor:
    """Rules from --rules-file first, then --rule options (which take priority)."""
    if args.rules_file:
        logger.info(f"Loading rules: {args.rules_file}")
        rules = VariablesLoader().load_rules(Path(args.rules_file))
    else:
        rules = MultiPatternSubstitutor()

    rules.update(parse_assignments(args.rule, 'FROM=TO'))
    return rules


def substitute_text(args: Namespace) -> int:
    """Run the subst command."""
    configure_logging(args)

    try:
        rules = build_rules(args)
        text = read_input(args)
        write_output(args, rules.substitute(text))
        return 0

    except ConfigValidationError as e:
        for error in e.errors:
            logger.error(str(ConfigValidationError([error])))
        return e.exit_code
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 2
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
