"""
Lookup implementations.

A lookup answers one question: what is the value of the placeholder with this
name? It returns None when it has no answer. Lookups never mutate state, so
the same lookup can serve any number of renders.
"""

import collections.abc
import logging
import os
from typing import Iterable, List, Mapping, Optional


logger = logging.getLogger(__name__)


class Lookup:
    """Base class for placeholder value sources."""

    def resolve(self, name: str) -> Optional[str]:
        """
        Resolve a placeholder name.

        Args:
            name: Placeholder name (never empty)

        Returns:
            The value, or None if this lookup has no value for the name
        """
        raise NotImplementedError


class EmptyLookup(Lookup):
    """Lookup that never resolves anything."""

    def resolve(self, name: str) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return "EmptyLookup()"


class ConstantLookup(Lookup):
    """Lookup that resolves every name to the same value."""

    def __init__(self, value: str):
        self.value = value

    def resolve(self, name: str) -> Optional[str]:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantLookup({self.value!r})"


class SingleLookup(Lookup):
    """Lookup that resolves exactly one key."""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value

    def resolve(self, name: str) -> Optional[str]:
        if name == self.key:
            return self.value
        return None

    def __repr__(self) -> str:
        return f"SingleLookup({self.key!r}, {self.value!r})"


class MappingLookup(Lookup):
    """Lookup backed by a mapping of names to values."""

    def __init__(self, mapping: Mapping[str, str]):
        self.mapping = mapping

    def resolve(self, name: str) -> Optional[str]:
        return self.mapping.get(name)

    def __repr__(self) -> str:
        return f"MappingLookup({len(self.mapping)} keys)"


class EnvironmentLookup(Lookup):
    """
    Lookup backed by environment variables.

    The placeholder name is prefixed before the environment is consulted, so
    with prefix "APP_" the placeholder $host$ reads APP_host. Empty strings
    count as present.
    """

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        self.environ = environ

    def resolve(self, name: str) -> Optional[str]:
        environ = os.environ if self.environ is None else self.environ
        return environ.get(self.prefix + name)

    def __repr__(self) -> str:
        return f"EnvironmentLookup(prefix={self.prefix!r})"


class ChainedLookup(Lookup):
    """
    Lookup that asks its members in order.

    The first member returning a value wins, so earlier members shadow later
    ones. Members are held by reference and only ever queried.
    """

    def __init__(self, lookups: Optional[Iterable[Lookup]] = None):
        self.lookups: List[Lookup] = []
        for lookup in lookups or []:
            self.add(lookup)

    def add(self, lookup: Lookup) -> "ChainedLookup":
        """Append a member to the end of the chain and return the chain."""
        if not isinstance(lookup, Lookup):
            raise TypeError(f"Expected a Lookup, got {type(lookup).__name__}")
        self.lookups.append(lookup)
        logger.debug(f"Chained lookup now has {len(self.lookups)} members")
        return self

    def resolve(self, name: str) -> Optional[str]:
        for lookup in self.lookups:
            value = lookup.resolve(name)
            if value is not None:
                return value
        return None

    def __repr__(self) -> str:
        return f"ChainedLookup({self.lookups!r})"


def empty_lookup() -> EmptyLookup:
    return EmptyLookup()


def constant_lookup(value: str) -> ConstantLookup:
    return ConstantLookup(value)


def single_lookup(key: str, value: str) -> SingleLookup:
    return SingleLookup(key, value)


def chained_lookup(lookups: Iterable[Lookup]) -> ChainedLookup:
    return ChainedLookup(lookups)


def as_lookup(source) -> Lookup:
    """
    Coerce a lookup source into a Lookup.

    Args:
        source: A Lookup, or a mapping of names to values

    Returns:
        The lookup itself, or a MappingLookup wrapping the mapping

    Raises:
        TypeError: If source is neither
    """
    if isinstance(source, Lookup):
        return source
    if isinstance(source, collections.abc.Mapping):
        return MappingLookup(source)
    raise TypeError(f"Expected a Lookup or a mapping, got {type(source).__name__}")
