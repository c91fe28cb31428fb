"""Error accumulation for a single field."""

from fieldguard.validation.types import FieldError, RuleFailure, ValidationOutcome


class ErrorAccumulator:
    """Composes the error entry for one field.

    In exhaustive mode every recorded failure is added to ``types`` and the
    latest one becomes the headline; otherwise ``types`` is never set.
    """

    def __init__(self, name: str, collect_all: bool):
        self.name = name
        self.collect_all = collect_all
        self._error: FieldError | None = None

    @property
    def error(self) -> FieldError | None:
        return self._error

    def record(self, failure: RuleFailure) -> FieldError:
        types = None
        if self.collect_all:
            types = dict(self._error.types or {}) if self._error else {}
            types[failure.kind] = failure.message or True

        self._error = FieldError(
            type=failure.kind,
            message=failure.message,
            ref=failure.ref,
            types=types,
        )
        return self._error

    def outcome(self) -> ValidationOutcome:
        if self._error is None:
            return {}
        return {self.name: self._error}
