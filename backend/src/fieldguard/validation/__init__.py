"""fieldguard validation engine.

Validates one form field at a time against declarative rules:
- required, min/max, minLength/maxLength, pattern
- custom validators (a single function or a named map of functions)

Usage:
    from fieldguard.validation import FieldDescriptor, FieldRules, validate_field

    descriptor = FieldDescriptor(
        name="age",
        value="17",
        rules=FieldRules(required="Age is required", min={"value": 18, "message": "Too young"}),
    )
    outcome = await validate_field(descriptor, collect_all_errors=False)
    # {"age": FieldError(type="min", message="Too young", ...)}
"""

from fieldguard.validation.accumulator import ErrorAccumulator
from fieldguard.validation.custom import CustomValidatorRunner
from fieldguard.validation.emptiness import is_empty
from fieldguard.validation.engine import FieldValidator, default_evaluators, validate_field
from fieldguard.validation.evaluators import (
    FieldState,
    LengthEvaluator,
    PatternEvaluator,
    RangeEvaluator,
    RequiredEvaluator,
    RuleEvaluator,
)
from fieldguard.validation.groups import DefaultGroupResolver
from fieldguard.validation.registry import ValidatorRegistry, validator
from fieldguard.validation.reporting import ElementValidityReporter
from fieldguard.validation.rules import get_value_and_message
from fieldguard.validation.services import merge_outcome, validate_fields
from fieldguard.validation.types import (
    FieldDescriptor,
    FieldError,
    FieldRules,
    GroupValue,
    GroupValueResolver,
    InputElement,
    RuleFailure,
    RuleKind,
    ValidationOutcome,
    ValidityReporter,
    ValueAndMessage,
)

__all__ = [
    # Types
    "FieldDescriptor",
    "FieldError",
    "FieldRules",
    "GroupValue",
    "GroupValueResolver",
    "InputElement",
    "RuleFailure",
    "RuleKind",
    "ValidationOutcome",
    "ValidityReporter",
    "ValueAndMessage",
    # Engine
    "FieldValidator",
    "default_evaluators",
    "validate_field",
    "validate_fields",
    "merge_outcome",
    # Building blocks
    "CustomValidatorRunner",
    "DefaultGroupResolver",
    "ElementValidityReporter",
    "ErrorAccumulator",
    "FieldState",
    "LengthEvaluator",
    "PatternEvaluator",
    "RangeEvaluator",
    "RequiredEvaluator",
    "RuleEvaluator",
    "get_value_and_message",
    "is_empty",
    # Registry
    "ValidatorRegistry",
    "validator",
]
