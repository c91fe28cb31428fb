"""Rule spec normalization.

Every rule spec shape (literal, value/message pair, bare message, callable,
callable map) is normalized here before any evaluator looks at it.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from fieldguard.validation.types import Message, RuleKind, ValidateFn, ValueAndMessage


def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_message(value: Any) -> bool:
    """Check if a value is a bare message (rather than a constraint)."""
    return isinstance(value, str)


def is_null(value: Any) -> bool:
    return value is None


def get_value_and_message(spec: Any) -> ValueAndMessage:
    """Unwrap a rule spec into its constraint value and message.

    A ValueAndMessage or a ``{"value", "message"}`` mapping is unwrapped;
    anything else (including a compiled regex) is the constraint itself with
    an empty message.
    """
    if isinstance(spec, ValueAndMessage):
        return spec
    if isinstance(spec, Mapping):
        return ValueAndMessage(value=spec.get("value"), message=spec.get("message", ""))
    return ValueAndMessage(value=spec, message="")


def resolve_required(spec: Any) -> ValueAndMessage:
    """Normalize the required rule.

    A bare message means "required, with this message"; the empty string
    therefore resolves to a disabled rule.
    """
    if is_message(spec):
        return ValueAndMessage(value=bool(spec), message=spec)
    return get_value_and_message(spec)


def resolve_validators(spec: Any) -> list[tuple[str, ValidateFn]]:
    """Normalize the validate rule to an ordered list of (key, callable).

    A single callable is keyed by the generic ``validate`` kind; a mapping
    keeps its declaration order and its own keys.
    """
    if spec is None:
        return []
    if callable(spec):
        return [(RuleKind.VALIDATE.value, spec)]
    if isinstance(spec, Mapping):
        return [(str(key), fn) for key, fn in spec.items() if callable(fn)]
    return []


def validate_result_message(result: Any) -> tuple[bool, Message]:
    """Map a custom validator result to (failed, message).

    True passes, a falsy result fails with an empty message, any other
    result fails and carries itself as the message.
    """
    if result is True:
        return False, ""
    if not result:
        return True, ""
    return True, result


def to_number(value: Any) -> float | None:
    """Coerce a constraint or raw value to a number, or None when it isn't one."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else float(value)
    if isinstance(value, str):
        # float() also takes digit separators and "inf"; form values never carry those
        if "_" in value:
            return None
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
