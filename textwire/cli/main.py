"""Main CLI entry point for textwire."""

import argparse
import sys
from typing import Optional

from .commands import eval_expression, match_pattern, substitute_text, translate_text


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'text',
        nargs='?',
        help='Text to process (omit to use --in or stdin)'
    )
    parser.add_argument(
        '--in',
        dest='src',
        type=str,
        metavar='PATH',
        help='Read input text from file'
    )
    parser.add_argument(
        '--out',
        dest='dst',
        type=str,
        metavar='PATH',
        help='Write output to file instead of stdout'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the textwire CLI."""
    parser = argparse.ArgumentParser(
        prog='textwire',
        description='Text interpolation, substitution and arithmetic toolkit'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Translate command
    translate_parser = subparsers.add_parser('translate', help='Expand $variable references')
    _add_io_arguments(translate_parser)
    translate_parser.add_argument(
        '--var',
        action='append',
        metavar='KEY=VALUE',
        help='Variable assignment (can be specified multiple times)'
    )
    translate_parser.add_argument(
        '--vars-file',
        action='append',
        metavar='PATH',
        help='YAML, JSON or INI file of variables (can be specified multiple times)'
    )
    translate_parser.add_argument(
        '--sep0',
        type=str,
        default='$',
        help='Character that starts a reference'
    )
    translate_parser.add_argument(
        '--max-depth',
        type=int,
        default=256,
        help='Maximum recursive expansion depth'
    )
    _add_common_arguments(translate_parser)

    # Subst command
    subst_parser = subparsers.add_parser('subst', help='Replace literal patterns in one pass')
    _add_io_arguments(subst_parser)
    subst_parser.add_argument(
        '--rule',
        action='append',
        metavar='FROM=TO',
        help='Substitution rule; later rules take priority (can be specified multiple times)'
    )
    subst_parser.add_argument(
        '--rules-file',
        type=str,
        metavar='PATH',
        help='YAML, JSON or INI file of rules, loaded before --rule'
    )
    _add_common_arguments(subst_parser)

    # Eval command
    eval_parser = subparsers.add_parser('eval', help='Evaluate an arithmetic expression')
    eval_parser.add_argument(
        'expression',
        type=str,
        help='Expression such as "(2+3)*4"'
    )
    _add_common_arguments(eval_parser)

    # Match command
    match_parser = subparsers.add_parser('match', help='Test text against a glob pattern')
    match_parser.add_argument('text', type=str, help='Text to test')
    match_parser.add_argument('pattern', type=str, help="Pattern with '*' and '?' wildcards")
    match_parser.add_argument(
        '-i', '--ignore-case',
        action='store_true',
        help='Case-insensitive match'
    )
    _add_common_arguments(match_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'translate':
        return translate_text(parsed_args)
    elif parsed_args.command == 'subst':
        return substitute_text(parsed_args)
    elif parsed_args.command == 'eval':
        return eval_expression(parsed_args)
    elif parsed_args.command == 'match':
        return match_pattern(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
