"""Emptiness classification."""

from fieldguard.validation.types import FieldDescriptor


def is_empty(descriptor: FieldDescriptor) -> bool:
    """Check if a field's value counts as absent for rule-skipping purposes.

    Numeric and file inputs are judged by the element's own raw value, since
    their field value may already be coerced (NaN, a file list, ...).
    """
    if descriptor.value_as_number or descriptor.is_file:
        element_value = descriptor.element.value if descriptor.element else None
        if not element_value:
            return True

    value = descriptor.value
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False
