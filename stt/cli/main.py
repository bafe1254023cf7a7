"""Main CLI entry point for stt."""

import argparse
import sys
from typing import Optional

from .commands import render_template, partial_template, list_variables


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every subcommand."""
    parser.add_argument(
        'template',
        type=str,
        help="Path to template file ('-' reads stdin)"
    )
    parser.add_argument(
        '--sigil',
        type=str,
        default='$',
        help='Placeholder delimiter character (default: $)'
    )
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
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def add_lookup_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments that build the lookup, listed in precedence order."""
    parser.add_argument(
        '--set',
        dest='assignments',
        action='append',
        metavar='KEY=VALUE',
        help='Placeholder value (can be specified multiple times)'
    )
    parser.add_argument(
        '--values-file',
        type=str,
        help='Path to YAML or JSON file mapping placeholder names to values'
    )
    parser.add_argument(
        '--env',
        action='store_true',
        help='Resolve placeholders from environment variables'
    )
    parser.add_argument(
        '--env-prefix',
        type=str,
        default='',
        help='Prefix prepended to placeholder names for --env'
    )
    parser.add_argument(
        '--default',
        type=str,
        help='Value for any placeholder nothing else resolves'
    )
    parser.add_argument(
        '--out',
        type=str,
        help='Write output to this file instead of stdout'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the stt CLI."""
    parser = argparse.ArgumentParser(
        prog='stt',
        description='Simple Text Template renderer'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    render_parser = subparsers.add_parser('render', help='Render a template')
    add_common_arguments(render_parser)
    add_lookup_arguments(render_parser)
    render_parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail if any placeholder is left unresolved'
    )

    partial_parser = subparsers.add_parser(
        'partial',
        help='Substitute known placeholders and write the remaining template'
    )
    add_common_arguments(partial_parser)
    add_lookup_arguments(partial_parser)

    variables_parser = subparsers.add_parser(
        'variables',
        help='List placeholder names used by a template'
    )
    add_common_arguments(variables_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'render':
        return render_template(parsed_args)
    elif parsed_args.command == 'partial':
        return partial_template(parsed_args)
    elif parsed_args.command == 'variables':
        return list_variables(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
