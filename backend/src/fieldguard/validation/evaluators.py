"""Built-in rule evaluators.

Each evaluator checks one family of rules and yields its findings as data:
- RequiredEvaluator: required
- RangeEvaluator: min/max, numeric or date
- LengthEvaluator: minLength/maxLength
- PatternEvaluator: pattern

Evaluators never touch the native validity channel; the engine does that.
"""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any

from fieldguard.validation.rules import (
    get_value_and_message,
    is_null,
    is_regex,
    resolve_required,
    to_number,
)
from fieldguard.validation.types import (
    FieldDescriptor,
    GroupValueResolver,
    RuleFailure,
    RuleKind,
    ValueAndMessage,
)


@dataclass
class FieldState:
    """Per-call view of a field shared by every evaluator.

    Attributes:
        descriptor: The field being validated
        is_empty: Result of the emptiness classifier
        group_resolver: Resolver for checkbox/radio groups
    """

    descriptor: FieldDescriptor
    is_empty: bool
    group_resolver: GroupValueResolver


class RuleEvaluator:
    """Base class for evaluators.

    Simple evaluators override ``check``; evaluators that can produce several
    findings (or need to await) override ``evaluate``.
    """

    kind: str = ""

    def check(self, state: FieldState) -> RuleFailure | None:
        raise NotImplementedError("Subclasses must implement check()")

    async def evaluate(self, state: FieldState) -> AsyncIterator[RuleFailure]:
        failure = self.check(state)
        if failure is not None:
            yield failure


def _min_max_failure(
    exceed_max: bool,
    max_output: ValueAndMessage,
    min_output: ValueAndMessage,
    max_kind: RuleKind,
    min_kind: RuleKind,
    ref: Any,
) -> RuleFailure:
    """Pick the failing bound; max wins when both exceed."""
    if exceed_max:
        return RuleFailure(kind=max_kind.value, message=max_output.message, ref=ref)
    return RuleFailure(kind=min_kind.value, message=min_output.message, ref=ref)


class RequiredEvaluator(RuleEvaluator):
    kind = RuleKind.REQUIRED.value

    def check(self, state: FieldState) -> RuleFailure | None:
        descriptor = state.descriptor
        if not descriptor.rules.required:
            return None

        if not self._is_missing(state):
            return None

        output = resolve_required(descriptor.rules.required)
        if not output.value:
            return None

        return RuleFailure(
            kind=self.kind,
            message=output.message,
            ref=descriptor.input_element,
        )

    def _is_missing(self, state: FieldState) -> bool:
        descriptor = state.descriptor
        value = descriptor.value
        group = descriptor.group
        if not group and descriptor.element is not None:
            group = [descriptor.element]

        if descriptor.is_checkbox:
            if not state.group_resolver.resolve_checkbox_group(group).is_valid:
                return True
        elif descriptor.is_radio:
            if not state.group_resolver.resolve_radio_group(group).is_valid:
                return True
        elif state.is_empty or is_null(value):
            return True

        return value is False


def _to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    # Naive and aware values must stay comparable
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


class RangeEvaluator(RuleEvaluator):
    """Numeric bounds, falling back to date bounds for non-numeric values.

    A value is compared as a number whenever it can be read as one, even if
    it would also parse as a date.
    """

    def check(self, state: FieldState) -> RuleFailure | None:
        descriptor = state.descriptor
        rules = descriptor.rules
        if state.is_empty or (is_null(rules.min) and is_null(rules.max)):
            return None

        max_output = get_value_and_message(rules.max)
        min_output = get_value_and_message(rules.min)
        exceed_max = False
        exceed_min = False

        number = self._as_number(descriptor)
        if number is not None:
            max_value = to_number(max_output.value)
            min_value = to_number(min_output.value)
            if max_value is not None:
                exceed_max = number > max_value
            if min_value is not None:
                exceed_min = number < min_value
        else:
            moment = self._as_datetime(descriptor)
            if moment is not None:
                if isinstance(max_output.value, str):
                    max_moment = _to_datetime(max_output.value)
                    exceed_max = max_moment is not None and moment > max_moment
                if isinstance(min_output.value, str):
                    min_moment = _to_datetime(min_output.value)
                    exceed_min = min_moment is not None and moment < min_moment

        if not (exceed_max or exceed_min):
            return None

        return _min_max_failure(
            exceed_max,
            max_output,
            min_output,
            RuleKind.MAX,
            RuleKind.MIN,
            descriptor.element,
        )

    @staticmethod
    def _as_number(descriptor: FieldDescriptor) -> float | None:
        # The raw value decides numeric vs date; the element view only supplies the number
        number = to_number(descriptor.value)
        if number is None:
            return None
        element = descriptor.element
        if element is not None:
            view = to_number(element.value_as_number)
            if view is not None:
                return view
        return number

    @staticmethod
    def _as_datetime(descriptor: FieldDescriptor) -> datetime | None:
        element = descriptor.element
        if element is not None and element.value_as_date is not None:
            return _to_datetime(element.value_as_date)
        return _to_datetime(descriptor.value)


class LengthEvaluator(RuleEvaluator):
    def check(self, state: FieldState) -> RuleFailure | None:
        descriptor = state.descriptor
        rules = descriptor.rules
        value = descriptor.value
        if state.is_empty or not isinstance(value, str):
            return None
        if not (rules.max_length or rules.min_length):
            return None

        max_output = get_value_and_message(rules.max_length)
        min_output = get_value_and_message(rules.min_length)
        max_length = to_number(max_output.value)
        min_length = to_number(min_output.value)
        exceed_max = max_length is not None and len(value) > max_length
        exceed_min = min_length is not None and len(value) < min_length

        if not (exceed_max or exceed_min):
            return None

        return _min_max_failure(
            exceed_max,
            max_output,
            min_output,
            RuleKind.MAX_LENGTH,
            RuleKind.MIN_LENGTH,
            descriptor.element,
        )


class PatternEvaluator(RuleEvaluator):
    kind = RuleKind.PATTERN.value

    def check(self, state: FieldState) -> RuleFailure | None:
        descriptor = state.descriptor
        value = descriptor.value
        if not descriptor.rules.pattern or state.is_empty or not isinstance(value, str):
            return None

        output = get_value_and_message(descriptor.rules.pattern)
        # Anything but a compiled pattern is not applicable
        if not is_regex(output.value) or output.value.search(value):
            return None

        return RuleFailure(kind=self.kind, message=output.message, ref=descriptor.element)
