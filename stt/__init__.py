"""
stt: simple text templates.

    >>> template = parse_template("Hello $who$!")
    >>> template.render(SingleLookup("who", "world"))
    'Hello world!'
"""

from .exceptions import ParseErrorKind, TemplateParseError, ValuesFileError
from .lookups import (
    Lookup,
    EmptyLookup,
    ConstantLookup,
    SingleLookup,
    MappingLookup,
    EnvironmentLookup,
    ChainedLookup,
    empty_lookup,
    constant_lookup,
    single_lookup,
    chained_lookup,
    as_lookup,
)
from .template import (
    Constant,
    Fragment,
    Variable,
    Template,
    parse_template,
    render,
    partial,
    set_variable,
    to_spec,
)

__version__ = "0.1.0"

__all__ = [
    'ParseErrorKind',
    'TemplateParseError',
    'ValuesFileError',
    'Lookup',
    'EmptyLookup',
    'ConstantLookup',
    'SingleLookup',
    'MappingLookup',
    'EnvironmentLookup',
    'ChainedLookup',
    'empty_lookup',
    'constant_lookup',
    'single_lookup',
    'chained_lookup',
    'as_lookup',
    'Constant',
    'Fragment',
    'Variable',
    'Template',
    'parse_template',
    'render',
    'partial',
    'set_variable',
    'to_spec',
]
