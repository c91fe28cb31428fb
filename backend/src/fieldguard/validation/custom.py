"""Custom validator execution.

Runs the ``validate`` rule of a field: a single callable, or a mapping of
key -> callable iterated in declaration order. Calls are awaited one after
another; the engine stops consuming findings after the first one in
short-circuit mode, so later validators of a map are never invoked.
"""

import inspect
import logging
from collections.abc import AsyncIterator

from fieldguard.validation.evaluators import FieldState, RuleEvaluator
from fieldguard.validation.rules import resolve_validators, validate_result_message
from fieldguard.validation.types import RuleFailure

logger = logging.getLogger(__name__)


class CustomValidatorRunner(RuleEvaluator):
    async def evaluate(self, state: FieldState) -> AsyncIterator[RuleFailure]:
        descriptor = state.descriptor
        validators = resolve_validators(descriptor.rules.validate)

        for key, validate_fn in validators:
            result = validate_fn(descriptor.value)
            if inspect.isawaitable(result):
                result = await result

            failed, message = validate_result_message(result)
            if not failed:
                continue

            logger.debug("Custom validator '%s' failed for field '%s'", key, descriptor.name)
            yield RuleFailure(kind=key, message=message, ref=descriptor.input_element)
