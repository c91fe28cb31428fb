"""
metadata/validator.py - JSON Schema validation for fieldguard rule files.

Usage:
    from fieldguard.metadata.validator import validate_rules_file, validate_rules_path

    issues = validate_rules_path(Path("rules"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

logger = logging.getLogger(__name__)

_SCHEMAS_DIR = Path(__file__).parent / "schemas"
_RULES_SCHEMA = "rules.schema.json"


@dataclass
class RuleFileIssue:
    """A single validation finding for a rule file."""

    file: Path
    message: str
    path: str = ""          # location within the document, e.g. "fields[0]/rules/min"
    severity: str = "error"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_schema(name: str = _RULES_SCHEMA) -> dict[str, Any]:
    schema_path = _SCHEMAS_DIR / name
    with schema_path.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _dates_to_iso(node: Any) -> Any:
    """Unquoted YAML dates load as date objects; JSON Schema only knows strings."""
    if isinstance(node, date):
        return node.isoformat()
    if isinstance(node, dict):
        return {key: _dates_to_iso(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_dates_to_iso(item) for item in node]
    return node


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_rules_file(
    yaml_path: Path,
    *,
    schema: dict[str, Any] | None = None,
) -> list[RuleFileIssue]:
    """
    Validate a single rule file against the rule file schema.

    Args:
        yaml_path: Path to the YAML file to validate.
        schema:    Pre-loaded schema.  Loaded automatically if omitted.

    Returns:
        A list of :class:`RuleFileIssue` objects (empty on success).
    """
    # 1. Parse YAML
    try:
        with yaml_path.open() as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        return [RuleFileIssue(file=yaml_path, message=f"YAML parse error: {exc}")]

    if raw is None:
        return [
            RuleFileIssue(file=yaml_path, message="File is empty or contains only whitespace")
        ]

    # 2. Schema check
    if schema is None:
        schema = _load_schema()
    validator = Draft202012Validator(schema)

    issues = [
        RuleFileIssue(file=yaml_path, message=error.message, path=_json_path(error))
        for error in sorted(validator.iter_errors(_dates_to_iso(raw)), key=_json_path)
    ]
    if issues:
        logger.debug("%d schema issue(s) in %s", len(issues), yaml_path)
    return issues


def validate_rules_path(rules_path: Path) -> list[RuleFileIssue]:
    """
    Validate a rule file, or every ``.yaml`` file in a directory.

    Returns:
        A flat list of :class:`RuleFileIssue` objects across all files.
        Empty list means all files are valid.
    """
    if not rules_path.exists():
        return [
            RuleFileIssue(
                file=rules_path,
                message=f"Rules path does not exist: {rules_path}",
            )
        ]

    try:
        schema = _load_schema()
    except (FileNotFoundError, json.JSONDecodeError) as exc:
        return [
            RuleFileIssue(
                file=_SCHEMAS_DIR,
                message=f"Failed to load JSON Schema: {exc}",
            )
        ]

    if rules_path.is_dir():
        files = sorted(rules_path.glob("*.yaml"))
    else:
        files = [rules_path]

    all_issues: list[RuleFileIssue] = []
    for yaml_file in files:
        all_issues.extend(validate_rules_file(yaml_file, schema=schema))
    return all_issues
