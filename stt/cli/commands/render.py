"""Render, partial and variables command implementations."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Optional

from stt.config import load_values, parse_assignments
from stt.exceptions import TemplateParseError, ValuesFileError
from stt.lookups import (
    ChainedLookup,
    ConstantLookup,
    EnvironmentLookup,
    Lookup,
    MappingLookup,
)
from stt.template import Template, parse_template


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace) -> None:
    """Set up logging from --log-level and the --debug/--quiet/--verbose overrides."""
    level_name = 'warning' if args.log_level == 'warn' else args.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_lookup(args: Namespace) -> Lookup:
    """
    Build the lookup described by the command line.

    Precedence: --set pairs, then --values-file, then the environment (--env),
    then the --default fallback.

    Raises:
        ValueError: If a --set pair is malformed
        FileNotFoundError: If the values file does not exist
        ValuesFileError: If the values file is malformed
    """
    lookup = ChainedLookup()

    assignments = parse_assignments(args.assignments)
    if assignments:
        lookup.add(MappingLookup(assignments))

    if args.values_file:
        values_path = Path(args.values_file)
        logger.info(f"Loading values: {values_path}")
        lookup.add(MappingLookup(load_values(values_path)))

    if args.env:
        lookup.add(EnvironmentLookup(prefix=args.env_prefix))

    if args.default is not None:
        lookup.add(ConstantLookup(args.default))

    return lookup


def load_template(source: str, sigil: str) -> Template:
    """
    Read and parse a template file, or stdin when source is '-'.

    Raises:
        FileNotFoundError: If the template file does not exist
        OSError: If the template file cannot be read
        TemplateParseError: If the template spec is invalid
    """
    if source == '-':
        text = sys.stdin.read()
    else:
        template_path = Path(source)
        if not template_path.exists():
            raise FileNotFoundError(f"Template not found: {template_path}")
        logger.info(f"Loading template: {template_path}")
        text = template_path.read_text(encoding='utf-8')

    return parse_template(text, sigil)


def write_output(text: str, out: Optional[str]) -> None:
    """Write text to the --out file, or stdout."""
    if out:
        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding='utf-8')
        logger.info(f"Wrote output to {out_path}")
    else:
        sys.stdout.write(text)


def _prepare(args: Namespace, with_lookup: bool = True):
    """
    Load the template (and lookup) for a command.

    Returns:
        (exit_code, template, lookup) where exit_code is None on success
    """
    try:
        template = load_template(args.template, args.sigil)
        lookup = build_lookup(args) if with_lookup else None
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1, None, None
    except OSError as e:
        logger.error(f"Failed to read input: {e}")
        return 1, None, None
    except TemplateParseError as e:
        logger.error(f"Template parse error in {args.template}: {e}")
        return e.exit_code, None, None
    except ValuesFileError as e:
        for problem in e.problems:
            logger.error(f"Values file error: {problem.message}")
        return e.exit_code, None, None
    except ValueError as e:
        logger.error(str(e))
        return 2, None, None

    return None, template, lookup


def render_template(args: Namespace) -> int:
    """Render a template with the values given on the command line."""
    configure_logging(args)

    exit_code, template, lookup = _prepare(args)
    if exit_code is not None:
        return exit_code

    if args.strict:
        unresolved = template.partial(lookup).variables
        if unresolved:
            logger.error(f"Unresolved variables: {unresolved}")
            return 2

    try:
        write_output(template.render(lookup), args.out)
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1
    return 0


def partial_template(args: Namespace) -> int:
    """Substitute the known values and write the remaining template spec."""
    configure_logging(args)

    exit_code, template, lookup = _prepare(args)
    if exit_code is not None:
        return exit_code

    result = template.partial(lookup)
    if result.variables:
        logger.info(f"Variables left unresolved: {result.variables}")

    try:
        write_output(result.to_spec(), args.out)
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1
    return 0


def list_variables(args: Namespace) -> int:
    """Print the placeholder names a template uses, one per line."""
    configure_logging(args)

    exit_code, template, _ = _prepare(args, with_lookup=False)
    if exit_code is not None:
        return exit_code

    for name in template.variables:
        print(name)
    return 0
