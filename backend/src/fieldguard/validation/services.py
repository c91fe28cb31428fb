"""Helpers for validating several fields and keeping form error state."""

import logging
from collections.abc import Iterable, MutableMapping

from fieldguard.validation.engine import FieldValidator
from fieldguard.validation.types import FieldDescriptor, FieldError, ValidationOutcome

logger = logging.getLogger(__name__)


async def validate_fields(
    descriptors: Iterable[FieldDescriptor],
    collect_all_errors: bool = False,
    report_native_validity: bool = False,
    validator: FieldValidator | None = None,
) -> ValidationOutcome:
    """Validate fields one after another, in the given order.

    Each field is validated independently; an exception raised by a custom
    validator propagates and aborts the batch.

    Returns:
        Merged outcome with one entry per failing field
    """
    validator = validator or FieldValidator()
    outcome: ValidationOutcome = {}

    for descriptor in descriptors:
        outcome.update(
            await validator.validate(
                descriptor,
                collect_all_errors=collect_all_errors,
                report_native_validity=report_native_validity,
            )
        )

    logger.debug("Validated batch, %d failing field(s)", len(outcome))
    return outcome


def merge_outcome(
    errors: MutableMapping[str, FieldError],
    outcome: ValidationOutcome,
    names: Iterable[str],
) -> MutableMapping[str, FieldError]:
    """Merge an outcome into longer-lived error state.

    Args:
        errors: Current error state, updated in place
        outcome: Result of validating ``names``
        names: Fields that were part of the validation pass

    Returns:
        The updated error state; validated fields that passed are cleared
    """
    for name in names:
        if name in outcome:
            errors[name] = outcome[name]
        else:
            errors.pop(name, None)
    return errors
