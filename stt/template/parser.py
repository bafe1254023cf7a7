"""
Template spec parser.

Scans the spec once, left to right, switching between two modes:
- CONSTANT: collecting literal text
- VARIABLE: collecting a placeholder name

The sigil toggles the mode. A sigil that arrives while a placeholder name is
still empty is taken literally, so a doubled sigil yields one literal sigil.
"""

import logging
from enum import Enum
from typing import List

from ..exceptions import ParseErrorKind, TemplateParseError
from .fragments import Constant, Fragment, Variable
from .template import Template


logger = logging.getLogger(__name__)

DEFAULT_SIGIL = "$"


class Mode(str, Enum):
    """Parser modes."""
    CONSTANT = "constant"
    VARIABLE = "variable"


def validate_sigil(sigil: str) -> None:
    """Ensure the sigil is exactly one character."""
    if not isinstance(sigil, str) or len(sigil) != 1:
        raise ValueError(f"Sigil must be a single character, got {sigil!r}")


def parse_fragments(spec: str, sigil: str = DEFAULT_SIGIL) -> List[Fragment]:
    """
    Split a template spec into fragments.

    Args:
        spec: Template text, e.g. "Hello $who$!"
        sigil: Character that opens and closes placeholders

    Returns:
        Fragments in spec order

    Raises:
        TemplateParseError: If the spec ends inside a placeholder
        ValueError: If the sigil is not a single character
    """
    validate_sigil(sigil)

    fragments: List[Fragment] = []
    buf: List[str] = []
    mode = Mode.CONSTANT
    opened_at = 0

    for index, char in enumerate(spec):
        if char != sigil:
            buf.append(char)
            continue

        if mode == Mode.CONSTANT:
            if buf:
                fragments.append(Constant("".join(buf)))
                buf.clear()
            mode = Mode.VARIABLE
            opened_at = index
        elif not buf:
            # Escaped sigil: "$$" stands for one literal "$"
            buf.append(char)
            mode = Mode.CONSTANT
        else:
            fragments.append(Variable("".join(buf)))
            buf.clear()
            mode = Mode.CONSTANT

    if mode == Mode.VARIABLE:
        raise TemplateParseError(ParseErrorKind.UNTERMINATED_VARIABLE, spec, opened_at)

    if buf:
        fragments.append(Constant("".join(buf)))

    return fragments


def parse_template(spec: str, sigil: str = DEFAULT_SIGIL) -> Template:
    """Parse a template spec into an immutable Template."""
    fragments = parse_fragments(spec, sigil)
    logger.debug(f"Parsed template into {len(fragments)} fragments")
    return Template(tuple(fragments), sigil=sigil)
