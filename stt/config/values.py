"""
Placeholder values from the command line and from values files.

Values files are YAML (JSON is accepted too, being a YAML subset) holding a
flat mapping of names to scalars. Scalars are stringified the way they read in
a template: booleans as true/false, numbers via str(), null as "".
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from ..exceptions import ValueProblem, ValuesFileError


logger = logging.getLogger(__name__)


def parse_assignments(pairs: Optional[Iterable[str]]) -> Dict[str, str]:
    """
    Parse KEY=VALUE pairs.

    Args:
        pairs: Strings of the form KEY=VALUE; the value may itself contain '='

    Returns:
        Mapping of keys to values, later pairs overriding earlier ones

    Raises:
        ValueError: If a pair has no '=' or an empty key
    """
    values: Dict[str, str] = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise ValueError(f"Invalid assignment: {pair}. Expected KEY=VALUE")
        key, value = pair.split('=', 1)
        if not key:
            raise ValueError(f"Invalid assignment: {pair}. KEY must not be empty")
        values[key] = value
    return values


def stringify(value: Any) -> str:
    """Convert a scalar from a values file to its template text."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def load_values(path: Path) -> Dict[str, str]:
    """
    Load placeholder values from a YAML or JSON file.

    Args:
        path: Values file

    Returns:
        Mapping of names to string values

    Raises:
        FileNotFoundError: If the file does not exist
        ValuesFileError: If the file is not a flat mapping of scalars
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Values file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValuesFileError(str(path), [ValueProblem(f"Failed to parse: {e}")]) from e

    if data is None:
        logger.debug(f"Values file is empty: {path}")
        return {}

    if not isinstance(data, dict):
        raise ValuesFileError(
            str(path),
            [ValueProblem(f"Must contain a mapping, got {type(data).__name__}")]
        )

    values: Dict[str, str] = {}
    problems: List[ValueProblem] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            problems.append(ValueProblem(
                f"Value must be a scalar, got {type(value).__name__}",
                key=str(key)
            ))
            continue
        values[str(key)] = stringify(value)

    if problems:
        raise ValuesFileError(str(path), problems)

    logger.debug(f"Loaded {len(values)} values from {path}")
    return values
