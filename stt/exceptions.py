"""Template exceptions."""

from dataclasses import dataclass
from enum import Enum
from typing import List


class ParseErrorKind(str, Enum):
    """Ways a template spec can fail to parse."""
    UNTERMINATED_VARIABLE = "unterminated_variable"


class TemplateParseError(Exception):
    """Raised when a template spec cannot be parsed.

    No partial template is ever returned alongside this error.
    """

    def __init__(self, kind: ParseErrorKind, spec: str, position: int):
        self.kind = kind
        self.spec = spec
        self.position = position  # Index of the sigil that opened the placeholder
        self.exit_code = 2

        super().__init__(f"Unterminated variable starting at position {position}")


@dataclass
class ValueProblem:
    """Single problem found in a values file."""
    message: str
    key: str = ""


class ValuesFileError(Exception):
    """Raised when a values file does not hold a flat mapping of scalars."""

    def __init__(self, path: str, problems: List[ValueProblem]):
        self.path = path
        self.problems = problems
        self.exit_code = 2

        messages = []
        for problem in problems:
            if problem.key:
                messages.append(f"{path}: '{problem.key}': {problem.message}")
            else:
                messages.append(f"{path}: {problem.message}")

        super().__init__("\n".join(messages))
