"""CLI command handlers."""

from .render import render_template, partial_template, list_variables

__all__ = ['render_template', 'partial_template', 'list_variables']
