"""
Lookup module.
Placeholder value sources and ways to combine them.
"""

from .lookup import (
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

__all__ = [
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
]
