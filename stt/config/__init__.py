"""Configuration module: placeholder values from files and the command line."""

from .values import load_values, parse_assignments, stringify

__all__ = ['load_values', 'parse_assignments', 'stringify']
