"""Core types for the fieldguard validation engine.

This module defines the data the engine consumes and produces:
- InputElement: the validation-relevant view of one form control
- FieldRules / FieldDescriptor: what gets validated and against which rules
- FieldError / ValidationOutcome: what the engine returns
- GroupValueResolver / ValidityReporter: collaborators injected into the engine
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Protocol, Union


class RuleKind(str, Enum):
    """Taxonomy tag identifying which constraint failed.

    Custom validator maps use their own keys in place of VALIDATE.
    """

    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    VALIDATE = "validate"


# Messages are opaque payloads, usually strings
Message = Any

ValidateResult = Any
ValidateFn = Callable[[Any], Union[ValidateResult, Awaitable[ValidateResult]]]


@dataclass(frozen=True)
class ValueAndMessage:
    """A rule constraint paired with the message reported when it fails."""

    value: Any = None
    message: Message = ""


@dataclass
class InputElement:
    """A form control as seen by the engine.

    Attributes:
        name: Control name (checkbox/radio groups share one)
        type: Input type ("text", "number", "checkbox", "radio", "file", "date", ...)
        value: The control's own raw string value
        checked: Checked state for checkbox and radio controls
        disabled: Disabled controls never count towards a group selection
        value_as_number: Pre-coerced numeric view, if the platform provides one
        value_as_date: Pre-coerced date view, if the platform provides one
        custom_validity: Last message set through set_custom_validity
        report_count: Number of report_validity calls
    """

    name: str = ""
    type: str = "text"
    value: Any = ""
    checked: bool = False
    disabled: bool = False
    value_as_number: float | None = None
    value_as_date: date | datetime | None = None
    custom_validity: str = ""
    report_count: int = 0

    def set_custom_validity(self, message: str) -> None:
        self.custom_validity = message

    def report_validity(self) -> bool:
        self.report_count += 1
        return self.custom_validity == ""


@dataclass
class FieldRules:
    """Declarative rules attached to a field.

    Each attribute holds a rule spec: a literal constraint, a ValueAndMessage
    (or a ``{"value": ..., "message": ...}`` mapping), or None when unset.
    ``validate`` holds a single callable or a mapping of key -> callable.
    """

    required: Any = None
    min: Any = None
    max: Any = None
    min_length: Any = None
    max_length: Any = None
    pattern: Any = None
    validate: ValidateFn | Mapping[str, ValidateFn] | None = None


@dataclass
class FieldDescriptor:
    """The validation-relevant snapshot of one form input.

    Attributes:
        name: Dotted path identifying the field within the form values
        value: Current raw value of the field
        element: The field's input element (its "ref")
        group: Elements of a checkbox or radio group, if any
        value_as_number: Field is registered as numeric
        mounted: Unmounted fields are never validated
        rules: Rules to evaluate
    """

    name: str
    value: Any = None
    element: InputElement | None = None
    group: list[InputElement] | None = None
    value_as_number: bool = False
    mounted: bool = True
    rules: FieldRules = field(default_factory=FieldRules)

    @property
    def input_element(self) -> InputElement | None:
        """The focusable element errors point at: first group member, else the element."""
        if self.group:
            return self.group[0]
        return self.element

    @property
    def is_checkbox(self) -> bool:
        element = self.element or self.input_element
        return element is not None and element.type == "checkbox"

    @property
    def is_radio(self) -> bool:
        element = self.element or self.input_element
        return element is not None and element.type == "radio"

    @property
    def is_file(self) -> bool:
        return self.element is not None and self.element.type == "file"


@dataclass
class FieldError:
    """The error entry produced for a failing field.

    Attributes:
        type: Rule kind (or custom validator key) of the headline failure
        message: Message of the headline failure
        ref: Element the error points at
        types: Every failed rule kind -> message; only set in exhaustive mode
    """

    type: str
    message: Message = ""
    ref: InputElement | None = None
    types: dict[str, Message] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": self.type,
            "message": self.message,
        }
        if self.types is not None:
            result["types"] = dict(self.types)
        return result


ValidationOutcome = dict[str, FieldError]


@dataclass(frozen=True)
class RuleFailure:
    """A single finding from a rule evaluator."""

    kind: str
    message: Message = ""
    ref: InputElement | None = None


@dataclass(frozen=True)
class GroupValue:
    """Logical value of a checkbox/radio group and whether it satisfies required."""

    value: Any
    is_valid: bool


class GroupValueResolver(Protocol):
    """Reduces a checkbox or radio group to one logical value."""

    def resolve_checkbox_group(self, elements: list[InputElement] | None) -> GroupValue:
        ...

    def resolve_radio_group(self, elements: list[InputElement] | None) -> GroupValue:
        ...


class ValidityReporter(Protocol):
    """Surfaces messages through a platform-native feedback channel."""

    def set_message(self, element: Any, message: str) -> None:
        ...

    def report(self, element: Any) -> None:
        ...
