"""Translate command: expand $variable references."""

import logging
from argparse import Namespace
from pathlib import Path

from textwire.exceptions import ConfigValidationError
from textwire.loader import VariablesLoader
from textwire.variables import Translator, TranslatorConfig, VariableStore

from .common import configure_logging, parse_assignments, read_input, write_output


logger = logging.getLogger(__name__)


def build_store(args: Namespace) -> VariableStore:
    """
    Build a variable store from --vars-file and --var options.

    Files are loaded in order, then --var assignments override them.
    """
    store = VariableStore()
    loader = VariablesLoader()

    for vars_file in args.vars_file or []:
        logger.info(f"Loading variables: {vars_file}")
        loader.load_into(Path(vars_file), store)

    store.update(parse_assignments(args.var))
    return store


def translate_text(args: Namespace) -> int:
    """Run the translate command."""
    configure_logging(args)

    try:
        if len(args.sep0) != 1:
            raise ValueError(f"--sep0 must be a single character, got {args.sep0!r}")
        if args.max_depth < 0:
            raise ValueError(f"--max-depth must not be negative, got {args.max_depth}")

        store = build_store(args)
        config = TranslatorConfig(sep0=args.sep0, max_depth=args.max_depth)
        text = read_input(args)

        result = Translator(store, config).translate(text)
        logger.debug(f"Translated {len(text)} characters into {len(result)}")
        write_output(args, result)
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
