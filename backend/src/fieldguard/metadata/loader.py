"""Load field rule declarations from YAML files."""

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from fieldguard.validation.registry import ValidatorRegistry
from fieldguard.validation.types import (
    FieldDescriptor,
    FieldRules,
    InputElement,
    ValidateFn,
    ValueAndMessage,
)

logger = logging.getLogger(__name__)

# Rule file key -> FieldRules attribute
_RULE_KEYS: dict[str, str] = {
    "required": "required",
    "min": "min",
    "max": "max",
    "minLength": "min_length",
    "min_length": "min_length",
    "maxLength": "max_length",
    "max_length": "max_length",
    "pattern": "pattern",
    "validate": "validate",
}


class RuleConfigError(ValueError):
    """A rule declaration cannot be turned into working rules."""


@dataclass
class FieldDefinition:
    """A field and its rules as declared in a rule file."""

    name: str
    rules: FieldRules = field(default_factory=FieldRules)
    value_as_number: bool = False

    def descriptor(
        self,
        value: Any,
        element: InputElement | None = None,
        group: list[InputElement] | None = None,
        mounted: bool = True,
    ) -> FieldDescriptor:
        """Build a descriptor for validating ``value`` against this definition."""
        return FieldDescriptor(
            name=self.name,
            value=value,
            element=element,
            group=group,
            value_as_number=self.value_as_number,
            mounted=mounted,
            rules=self.rules,
        )


class RulesLoader:
    """Loads field definitions from a YAML rule file or a directory of them.

    Custom validators are referenced by registered name, so they must be
    registered (see ``fieldguard.validation.registry``) before loading.
    """

    def __init__(self, rules_path: Path):
        self.rules_path = rules_path
        self.fields: dict[str, FieldDefinition] = {}

    def load(self) -> dict[str, FieldDefinition]:
        """Load all rule files.

        Raises:
            RuleConfigError: If a declaration is malformed
        """
        if self.rules_path.is_dir():
            files = sorted(self.rules_path.glob("*.yaml"))
        else:
            files = [self.rules_path]

        for yaml_file in files:
            with open(yaml_file) as f:
                data = yaml.safe_load(f)
            if not data or "fields" not in data:
                logger.warning("No fields declared in %s, skipping", yaml_file)
                continue
            for field_data in data["fields"]:
                definition = self._resolve_field(field_data)
                self.fields[definition.name] = definition

        return self.fields

    def get_field(self, name: str) -> FieldDefinition | None:
        return self.fields.get(name)

    def list_fields(self) -> list[str]:
        return list(self.fields.keys())

    def _resolve_field(self, data: dict) -> FieldDefinition:
        name = data.get("name")
        if not name:
            raise RuleConfigError("Field declaration without a name")

        rules = FieldRules()
        for key, spec in (data.get("rules") or {}).items():
            attr = _RULE_KEYS.get(key)
            if attr is None:
                raise RuleConfigError(f"Field '{name}' has unknown rule '{key}'")
            setattr(rules, attr, self._resolve_rule(name, attr, spec))

        return FieldDefinition(
            name=name,
            rules=rules,
            value_as_number=bool(data.get("valueAsNumber", data.get("value_as_number", False))),
        )

    def _resolve_rule(self, field_name: str, attr: str, spec: Any) -> Any:
        if attr == "validate":
            return self._resolve_validate(field_name, spec)

        if isinstance(spec, dict):
            value = spec.get("value")
            message = spec.get("message", "")
        else:
            value, message = spec, None

        # Unquoted YAML dates load as date objects; range rules compare ISO strings
        if isinstance(value, (date, datetime)):
            value = value.isoformat()

        if attr == "pattern" and isinstance(value, str):
            try:
                value = re.compile(value)
            except re.error as e:
                raise RuleConfigError(
                    f"Field '{field_name}' has an invalid pattern '{value}': {e}"
                ) from e

        if message is None:
            return value
        return ValueAndMessage(value=value, message=message)

    def _resolve_validate(
        self, field_name: str, spec: Any
    ) -> ValidateFn | dict[str, ValidateFn]:
        try:
            if isinstance(spec, str):
                return ValidatorRegistry.get(spec)
            if isinstance(spec, dict):
                return {key: ValidatorRegistry.get(name) for key, name in spec.items()}
        except ValueError as e:
            raise RuleConfigError(f"Field '{field_name}': {e}") from e

        raise RuleConfigError(
            f"Field '{field_name}': 'validate' must be a validator name or a mapping of names"
        )
