"""Tests for loading placeholder values from assignments and values files."""

import json
import pytest
from pathlib import Path

from stt.config import load_values, parse_assignments, stringify
from stt.exceptions import ValuesFileError


class TestParseAssignments:
    """Test KEY=VALUE parsing."""

    def test_simple_pairs(self):
        assert parse_assignments(['who=world', 'a=1']) == {'who': 'world', 'a': '1'}

    def test_value_may_contain_equals(self):
        """Only the first '=' separates key from value."""
        assert parse_assignments(['query=a=b&c=d']) == {'query': 'a=b&c=d'}

    def test_empty_value_allowed(self):
        assert parse_assignments(['empty=']) == {'empty': ''}

    def test_later_pair_overrides_earlier(self):
        assert parse_assignments(['a=1', 'a=2']) == {'a': '2'}

    def test_none_yields_empty_mapping(self):
        assert parse_assignments(None) == {}

    def test_missing_equals_rejected(self):
        with pytest.raises(ValueError, match="Expected KEY=VALUE"):
            parse_assignments(['novalue'])

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError, match="KEY must not be empty"):
            parse_assignments(['=value'])


class TestStringify:
    """Test scalar conversion."""

    @pytest.mark.parametrize("value,expected", [
        ("text", "text"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (0.5, "0.5"),
        (None, ""),
    ])
    def test_scalars(self, value, expected):
        assert stringify(value) == expected


class TestLoadValues:
    """Test values files."""

    def test_yaml_file(self, tmp_path):
        values_file = tmp_path / "values.yaml"
        values_file.write_text(
            "who: world\n"
            "count: 3\n"
            "enabled: true\n"
            "ratio: 0.5\n"
            "nothing: null\n"
        )

        values = load_values(values_file)

        assert values == {
            'who': 'world',
            'count': '3',
            'enabled': 'true',
            'ratio': '0.5',
            'nothing': '',
        }

    def test_json_file(self, tmp_path):
        """JSON is read through the YAML loader."""
        values_file = tmp_path / "values.json"
        values_file.write_text(json.dumps({"who": "world", "n": 1}))

        assert load_values(values_file) == {'who': 'world', 'n': '1'}

    def test_empty_file(self, tmp_path):
        values_file = tmp_path / "empty.yaml"
        values_file.write_text("")

        assert load_values(values_file) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_values(tmp_path / "missing.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        values_file = tmp_path / "list.yaml"
        values_file.write_text("- a\n- b\n")

        with pytest.raises(ValuesFileError) as exc_info:
            load_values(values_file)

        assert exc_info.value.exit_code == 2
        assert "must contain a mapping" in str(exc_info.value).lower()

    def test_nested_values_rejected(self, tmp_path):
        """Every offending key is reported."""
        values_file = tmp_path / "nested.yaml"
        values_file.write_text(
            "ok: fine\n"
            "nested:\n"
            "  inner: value\n"
            "items: [1, 2]\n"
        )

        with pytest.raises(ValuesFileError) as exc_info:
            load_values(values_file)

        keys = [problem.key for problem in exc_info.value.problems]
        assert keys == ['nested', 'items']

    def test_malformed_yaml_rejected(self, tmp_path):
        values_file = tmp_path / "broken.yaml"
        values_file.write_text("key: [unclosed\n")

        with pytest.raises(ValuesFileError):
            load_values(values_file)

    def test_accepts_string_path(self, tmp_path):
        values_file = tmp_path / "values.yaml"
        values_file.write_text("a: b\n")

        assert load_values(str(values_file)) == {'a': 'b'}
