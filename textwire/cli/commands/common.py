"""Helpers shared by the CLI commands."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level, --debug and --quiet."""
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_assignments(items: Optional[List[str]], what: str = 'KEY=VALUE') -> Dict[str, str]:
    """
    Parse KEY=VALUE pairs from repeated command line options.

    Raises:
        ValueError: If an item has no '=' or an empty key
    """
    values: Dict[str, str] = {}
    for item in items or []:
        if '=' not in item:
            raise ValueError(f"Invalid format: {item}. Expected {what}")
        key, value = item.split('=', 1)
        if not key:
            raise ValueError(f"Empty key in: {item}")
        values[key] = value
    return values


def read_input(args: Namespace) -> str:
    """
    Return the text to process: the positional argument, --in file, or stdin.

    Raises:
        FileNotFoundError: If --in names a missing file
    """
    if args.text is not None:
        return args.text

    if args.src:
        src_path = Path(args.src)
        if not src_path.exists():
            raise FileNotFoundError(f"Input file not found: {src_path}")
        with src_path.open('r', encoding='utf-8') as f:
            return f.read()

    return sys.stdin.read()


def write_output(args: Namespace, text: str) -> None:
    """Write result text to --out, or to stdout."""
    if args.dst:
        dst_path = Path(args.dst)
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        with dst_path.open('w', encoding='utf-8') as f:
            f.write(text)
        logger.info(f"Wrote output to {dst_path}")
    else:
        sys.stdout.write(text)
        if not text.endswith('\n'):
            sys.stdout.write('\n')
