"""Tests for batch validation and error state merging."""

from unittest.mock import MagicMock

import pytest

from fieldguard.validation import (
    FieldDescriptor,
    FieldError,
    FieldRules,
    FieldValidator,
    InputElement,
    ValueAndMessage,
    merge_outcome,
    validate_fields,
)


def make_field(name: str, value, **rules) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        value=value,
        element=InputElement(name=name, value=value if isinstance(value, str) else ""),
        rules=FieldRules(**rules),
    )


class TestValidateFields:
    @pytest.mark.asyncio
    async def test_merges_failing_fields(self):
        outcome = await validate_fields(
            [
                make_field("first", "", required="First name is required"),
                make_field("last", "Doe", required="Last name is required"),
                make_field("age", "12", min=ValueAndMessage(18, "Too young")),
            ]
        )

        assert set(outcome) == {"first", "age"}
        assert outcome["first"].type == "required"
        assert outcome["age"].message == "Too young"

    @pytest.mark.asyncio
    async def test_fields_are_independent(self):
        outcome = await validate_fields(
            [
                make_field("a", "x", min_length=2),
                make_field("b", "x", max_length=5),
            ],
            collect_all_errors=True,
        )
        assert list(outcome) == ["a"]
        assert outcome["a"].types == {"minLength": True}

    @pytest.mark.asyncio
    async def test_exception_aborts_batch(self):
        def explode(value):
            raise RuntimeError("boom")

        later = MagicMock(return_value=True)

        with pytest.raises(RuntimeError):
            await validate_fields(
                [
                    make_field("a", "x", validate=explode),
                    make_field("b", "x", validate=later),
                ]
            )
        later.assert_not_called()

    @pytest.mark.asyncio
    async def test_uses_given_validator(self):
        validator = FieldValidator(collect_all_errors=True)
        outcome = await validate_fields(
            [make_field("a", "x", min_length=2)],
            collect_all_errors=True,
            validator=validator,
        )
        assert outcome["a"].types is not None


class TestMergeOutcome:
    def test_adds_and_clears_validated_names(self):
        errors = {
            "a": FieldError(type="required"),
            "b": FieldError(type="pattern"),
            "untouched": FieldError(type="min"),
        }
        outcome = {"b": FieldError(type="maxLength")}

        merged = merge_outcome(errors, outcome, ["a", "b"])

        assert merged is errors
        assert set(errors) == {"b", "untouched"}
        assert errors["b"].type == "maxLength"
        assert errors["untouched"].type == "min"
