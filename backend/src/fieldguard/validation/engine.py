"""Single-field validation engine.

Runs the evaluators of a field in fixed priority order:

    required -> range (min/max) -> length (minLength/maxLength) -> pattern -> validate

In short-circuit mode the first failure ends the pipeline. In exhaustive
mode every evaluator runs and the outcome carries all failures in ``types``,
with the last one as headline. The native validity channel is driven from
here, once per recorded failure and once on overall success.
"""

import logging
from contextlib import aclosing

from fieldguard.config import EngineConfig
from fieldguard.validation.accumulator import ErrorAccumulator
from fieldguard.validation.custom import CustomValidatorRunner
from fieldguard.validation.emptiness import is_empty
from fieldguard.validation.evaluators import (
    FieldState,
    LengthEvaluator,
    PatternEvaluator,
    RangeEvaluator,
    RequiredEvaluator,
    RuleEvaluator,
)
from fieldguard.validation.groups import DefaultGroupResolver
from fieldguard.validation.reporting import CLEAR, ElementValidityReporter, native_message
from fieldguard.validation.types import (
    FieldDescriptor,
    GroupValueResolver,
    Message,
    ValidationOutcome,
    ValidityReporter,
)

logger = logging.getLogger(__name__)


def default_evaluators() -> list[RuleEvaluator]:
    """The built-in evaluators, in priority order."""
    return [
        RequiredEvaluator(),
        RangeEvaluator(),
        LengthEvaluator(),
        PatternEvaluator(),
        CustomValidatorRunner(),
    ]


class FieldValidator:
    """Validates one field at a time.

    Usage:
        validator = FieldValidator()
        outcome = await validator.validate(descriptor, collect_all_errors=True)

        # Defaults from the environment (criteria mode, native validation):
        validator = FieldValidator.from_config(EngineConfig.from_env())
        outcome = await validator.validate(descriptor)
    """

    def __init__(
        self,
        reporter: ValidityReporter | None = None,
        group_resolver: GroupValueResolver | None = None,
        evaluators: list[RuleEvaluator] | None = None,
        collect_all_errors: bool = False,
        report_native_validity: bool = False,
    ):
        self.reporter = reporter or ElementValidityReporter()
        self.group_resolver = group_resolver or DefaultGroupResolver()
        self.evaluators = evaluators if evaluators is not None else default_evaluators()
        self.collect_all_errors = collect_all_errors
        self.report_native_validity = report_native_validity

    @classmethod
    def from_config(cls, config: EngineConfig, **kwargs) -> "FieldValidator":
        return cls(
            collect_all_errors=config.collect_all_errors,
            report_native_validity=config.report_native_validity,
            **kwargs,
        )

    async def validate(
        self,
        descriptor: FieldDescriptor,
        collect_all_errors: bool | None = None,
        report_native_validity: bool | None = None,
    ) -> ValidationOutcome:
        """Validate a field.

        Args:
            descriptor: The field to validate
            collect_all_errors: Exhaustive mode; defaults to the validator's setting
            report_native_validity: Drive the native channel; defaults to the validator's setting

        Returns:
            Empty mapping when the field is valid (or unmounted), otherwise
            ``{descriptor.name: FieldError}``

        Raises:
            Whatever a custom validator raises; no later rule runs.
        """
        if not descriptor.mounted:
            logger.debug("Skipping unmounted field '%s'", descriptor.name)
            return {}

        collect_all = (
            self.collect_all_errors if collect_all_errors is None else collect_all_errors
        )
        native = (
            self.report_native_validity
            if report_native_validity is None
            else report_native_validity
        )

        state = FieldState(
            descriptor=descriptor,
            is_empty=is_empty(descriptor),
            group_resolver=self.group_resolver,
        )
        accumulator = ErrorAccumulator(descriptor.name, collect_all)

        for evaluator in self.evaluators:
            async with aclosing(evaluator.evaluate(state)) as findings:
                async for failure in findings:
                    error = accumulator.record(failure)
                    logger.debug(
                        "Field '%s' failed rule '%s'", descriptor.name, error.type
                    )
                    if native:
                        self._report(descriptor, native_message(error.message))
                    if not collect_all:
                        return accumulator.outcome()

        outcome = accumulator.outcome()
        if native and not outcome:
            self._report(descriptor, CLEAR)
        return outcome

    def _report(self, descriptor: FieldDescriptor, message: Message) -> None:
        element = descriptor.input_element
        if element is None:
            return
        self.reporter.set_message(element, message)
        self.reporter.report(element)


async def validate_field(
    descriptor: FieldDescriptor,
    collect_all_errors: bool,
    report_native_validity: bool = False,
    *,
    reporter: ValidityReporter | None = None,
    group_resolver: GroupValueResolver | None = None,
) -> ValidationOutcome:
    """One-liner validation of a single field.

    Args:
        descriptor: The field to validate
        collect_all_errors: Run every rule and report all failures in ``types``
        report_native_validity: Mirror results into the native validity channel
        reporter: Native validity reporter (defaults to the element's own methods)
        group_resolver: Checkbox/radio group resolver

    Returns:
        ValidationOutcome with zero or one entry keyed by ``descriptor.name``
    """
    validator = FieldValidator(reporter=reporter, group_resolver=group_resolver)
    return await validator.validate(
        descriptor,
        collect_all_errors=collect_all_errors,
        report_native_validity=report_native_validity,
    )
