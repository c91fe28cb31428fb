"""Tests for engine configuration."""

import pytest

from fieldguard.config import EngineConfig
from fieldguard.validation import FieldDescriptor, FieldRules, FieldValidator, InputElement


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("FIELDGUARD_CRITERIA_MODE", "FIELDGUARD_NATIVE_VALIDATION", "FIELDGUARD_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig.from_env()
        assert config.criteria_mode == "firstError"
        assert config.collect_all_errors is False
        assert config.report_native_validity is False
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FIELDGUARD_CRITERIA_MODE", "all")
        monkeypatch.setenv("FIELDGUARD_NATIVE_VALIDATION", "True")
        monkeypatch.setenv("FIELDGUARD_LOG_LEVEL", "debug")

        config = EngineConfig.from_env()

        assert config.collect_all_errors is True
        assert config.report_native_validity is True
        assert config.log_level == "DEBUG"

    def test_unknown_criteria_mode(self, monkeypatch):
        monkeypatch.setenv("FIELDGUARD_CRITERIA_MODE", "some")
        with pytest.raises(ValueError, match="Unknown criteria mode"):
            EngineConfig.from_env()

    @pytest.mark.asyncio
    async def test_validator_from_config(self):
        validator = FieldValidator.from_config(
            EngineConfig(criteria_mode="all", report_native_validity=True)
        )
        element = InputElement(name="code", value="a")
        descriptor = FieldDescriptor(
            name="code",
            value="a",
            element=element,
            rules=FieldRules(min_length={"value": 2, "message": "Too short"}),
        )

        outcome = await validator.validate(descriptor)

        assert outcome["code"].types == {"minLength": "Too short"}
        assert element.custom_validity == "Too short"
