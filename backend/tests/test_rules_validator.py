"""
Tests for fieldguard.metadata.validator: JSON Schema validation of rule files.
"""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from fieldguard.metadata.validator import (
    RuleFileIssue,
    validate_rules_file,
    validate_rules_path,
)


def _write(path: Path, content: str) -> Path:
    path.write_text(textwrap.dedent(content))
    return path


VALID_RULES = """
fields:
  - name: email
    rules:
      required: "Email is required"
      maxLength: {value: 64, message: "Too long"}
      pattern: "^\\\\S+@\\\\S+$"
      validate:
        unique: accounts.uniqueEmail
  - name: age
    valueAsNumber: true
    rules:
      required: {value: true, message: "Age is required"}
      min: 18
      max: {value: 130, message: "Really?"}
  - name: startDate
    rules:
      min: "2024-01-01"
"""


class TestValidateRulesFile:
    def test_valid_file(self, tmp_path):
        path = _write(tmp_path / "rules.yaml", VALID_RULES)
        assert validate_rules_file(path) == []

    def test_yaml_parse_error(self, tmp_path):
        path = _write(tmp_path / "broken.yaml", "fields: [unclosed\n")
        issues = validate_rules_file(path)
        assert len(issues) == 1
        assert "YAML parse error" in issues[0].message

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path / "empty.yaml", "")
        issues = validate_rules_file(path)
        assert "empty" in issues[0].message

    def test_missing_fields_key(self, tmp_path):
        path = _write(tmp_path / "rules.yaml", "rules: []\n")
        issues = validate_rules_file(path)
        assert any("fields" in issue.message for issue in issues)

    def test_unknown_rule_reported_with_path(self, tmp_path):
        path = _write(
            tmp_path / "rules.yaml",
            """
            fields:
              - name: code
                rules:
                  between: 3
            """,
        )
        issues = validate_rules_file(path)
        assert len(issues) == 1
        assert issues[0].path == "fields[0]/rules"
        assert "between" in issues[0].message

    def test_negative_length_rejected(self, tmp_path):
        path = _write(
            tmp_path / "rules.yaml",
            """
            fields:
              - name: code
                rules:
                  minLength: -1
            """,
        )
        assert validate_rules_file(path) != []

    def test_unquoted_date_bounds(self, tmp_path):
        path = _write(
            tmp_path / "rules.yaml",
            """
            fields:
              - name: start
                rules:
                  min: 2024-07-01
                  max: {value: 2024-12-31, message: "Too late"}
            """,
        )
        assert validate_rules_file(path) == []

    def test_field_without_name(self, tmp_path):
        path = _write(tmp_path / "rules.yaml", "fields:\n  - rules: {required: true}\n")
        issues = validate_rules_file(path)
        assert any("name" in issue.message for issue in issues)


class TestValidateRulesPath:
    def test_missing_path(self, tmp_path):
        issues = validate_rules_path(tmp_path / "nope")
        assert "does not exist" in issues[0].message

    def test_directory(self, tmp_path):
        _write(tmp_path / "good.yaml", VALID_RULES)
        _write(tmp_path / "bad.yaml", "fields: 3\n")
        issues = validate_rules_path(tmp_path)
        assert len(issues) == 1
        assert issues[0].file.name == "bad.yaml"

    def test_single_file(self, tmp_path):
        path = _write(tmp_path / "good.yaml", VALID_RULES)
        assert validate_rules_path(path) == []


class TestRuleFileIssue:
    def test_str_with_path(self):
        issue = RuleFileIssue(file=Path("rules.yaml"), message="bad", path="fields[0]")
        assert str(issue) == "[ERROR] rules.yaml at fields[0]: bad"

    def test_str_without_path(self):
        issue = RuleFileIssue(file=Path("rules.yaml"), message="bad")
        assert str(issue) == "[ERROR] rules.yaml: bad"


@pytest.mark.parametrize("required", ["true", "'Needed'", "{value: false, message: x}"])
def test_required_shapes(tmp_path, required):
    path = _write(
        tmp_path / "rules.yaml",
        f"fields:\n  - name: a\n    rules:\n      required: {required}\n",
    )
    assert validate_rules_file(path) == []
