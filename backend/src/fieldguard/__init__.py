"""fieldguard - per-field validation for interactive form inputs."""

__version__ = "0.1.0"

from fieldguard.config import EngineConfig
from fieldguard.validation import (
    FieldDescriptor,
    FieldError,
    FieldRules,
    FieldValidator,
    InputElement,
    RuleKind,
    ValueAndMessage,
    validate_field,
    validate_fields,
    validator,
)

__all__ = [
    "__version__",
    "EngineConfig",
    "FieldDescriptor",
    "FieldError",
    "FieldRules",
    "FieldValidator",
    "InputElement",
    "RuleKind",
    "ValueAndMessage",
    "validate_field",
    "validate_fields",
    "validator",
]
