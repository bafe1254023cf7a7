"""
Template module.
Parses template specs and renders them against lookups.
"""

from .fragments import Constant, Fragment, Variable
from .template import Template, render, partial, set_variable, to_spec
from .parser import parse_template, parse_fragments

__all__ = [
    'Constant',
    'Fragment',
    'Variable',
    'Template',
    'render',
    'partial',
    'set_variable',
    'to_spec',
    'parse_template',
    'parse_fragments',
]
