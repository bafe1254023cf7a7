"""Fragments: the pieces a parsed template is made of."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Constant:
    """Literal text copied to the output as is."""
    text: str


@dataclass(frozen=True)
class Variable:
    """Named placeholder resolved against a lookup."""
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Variable name must not be empty")


Fragment = Union[Constant, Variable]
