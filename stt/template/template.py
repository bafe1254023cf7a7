"""
Template type and the operations defined on it.

A Template is an immutable tuple of fragments. Every operation returns a new
value; the template it was called on never changes.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from ..lookups import Lookup, SingleLookup, as_lookup
from .fragments import Constant, Fragment, Variable


@dataclass(frozen=True)
class Template:
    """
    Parsed template.

    Attributes:
        fragments: Constants and variables in output order
        sigil: Character used to delimit placeholders when serialising
    """
    fragments: Tuple[Fragment, ...] = ()
    sigil: str = "$"

    def __post_init__(self):
        if not isinstance(self.sigil, str) or len(self.sigil) != 1:
            raise ValueError(f"Sigil must be a single character, got {self.sigil!r}")
        if not isinstance(self.fragments, tuple):
            object.__setattr__(self, 'fragments', tuple(self.fragments))
        for fragment in self.fragments:
            if not isinstance(fragment, (Constant, Variable)):
                raise TypeError(f"Expected a Constant or Variable, got {type(fragment).__name__}")

    @classmethod
    def parse(cls, spec: str, sigil: str = "$") -> "Template":
        """
        Parse a template spec.

        Raises:
            TemplateParseError: If a placeholder is never closed
        """
        from .parser import parse_template
        return parse_template(spec, sigil)

    def render(self, lookup: Union[Lookup, dict]) -> str:
        """
        Render the template to a string.

        Variables the lookup cannot resolve contribute nothing to the output.

        Args:
            lookup: Lookup (or plain mapping) supplying placeholder values

        Returns:
            Rendered text
        """
        lookup = as_lookup(lookup)
        parts: List[str] = []
        for fragment in self.fragments:
            if isinstance(fragment, Constant):
                parts.append(fragment.text)
            else:
                value = lookup.resolve(fragment.name)
                if value is not None:
                    parts.append(value)
        return "".join(parts)

    def partial(self, lookup: Union[Lookup, dict]) -> "Template":
        """
        Substitute the variables the lookup can resolve.

        Resolved variables become constants; unresolved ones are kept so a
        later partial or render can fill them in.

        Args:
            lookup: Lookup (or plain mapping) supplying placeholder values

        Returns:
            New template
        """
        lookup = as_lookup(lookup)
        fragments: List[Fragment] = []
        for fragment in self.fragments:
            if isinstance(fragment, Variable):
                value = lookup.resolve(fragment.name)
                if value is not None:
                    fragments.append(Constant(value))
                    continue
            fragments.append(fragment)
        return Template(tuple(fragments), sigil=self.sigil)

    def set(self, key: str, value: str) -> "Template":
        """Substitute a single variable."""
        return self.partial(SingleLookup(key, value))

    def to_spec(self) -> str:
        """
        Serialise the template back to spec text.

        Sigils inside constants are doubled, variables are wrapped in sigils.
        Parsing the result gives back any template the parser produced.
        A substituted value holding the sigil is escaped too, so
        parse("cost: $amount$").set("amount", "$5") serialises as "cost: $$5".
        """
        escaped = self.sigil * 2
        parts: List[str] = []
        for fragment in self.fragments:
            if isinstance(fragment, Constant):
                parts.append(fragment.text.replace(self.sigil, escaped))
            else:
                parts.append(f"{self.sigil}{fragment.name}{self.sigil}")
        return "".join(parts)

    @property
    def variables(self) -> List[str]:
        """Names of the placeholders still in the template, first occurrence order."""
        names: List[str] = []
        for fragment in self.fragments:
            if isinstance(fragment, Variable) and fragment.name not in names:
                names.append(fragment.name)
        return names

    @property
    def is_resolved(self) -> bool:
        """True when no placeholders remain."""
        return not any(isinstance(fragment, Variable) for fragment in self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __str__(self) -> str:
        return self.to_spec()


def render(template: Template, lookup: Union[Lookup, dict]) -> str:
    return template.render(lookup)


def partial(template: Template, lookup: Union[Lookup, dict]) -> Template:
    return template.partial(lookup)


def set_variable(template: Template, key: str, value: str) -> Template:
    return template.set(key, value)


def to_spec(template: Template) -> str:
    return template.to_spec()
