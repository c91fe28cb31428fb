"""Engine configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

CRITERIA_FIRST_ERROR = "firstError"
CRITERIA_ALL = "all"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EngineConfig:
    """Default validation behaviour.

    Attributes:
        criteria_mode: "firstError" stops at the first failing rule, "all" collects every failure
        report_native_validity: Mirror results into the native validity channel
        log_level: Logging level name used by the CLI
    """

    criteria_mode: str = CRITERIA_FIRST_ERROR
    report_native_validity: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.criteria_mode not in (CRITERIA_FIRST_ERROR, CRITERIA_ALL):
            raise ValueError(
                f"Unknown criteria mode '{self.criteria_mode}'. "
                f"Expected '{CRITERIA_FIRST_ERROR}' or '{CRITERIA_ALL}'"
            )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Create config from environment variables.

        - FIELDGUARD_CRITERIA_MODE: "firstError" (default) or "all"
        - FIELDGUARD_NATIVE_VALIDATION: "1", "true", "yes" or "on" to enable
        - FIELDGUARD_LOG_LEVEL: default "WARNING"
        """
        native = os.environ.get("FIELDGUARD_NATIVE_VALIDATION", "")
        return cls(
            criteria_mode=os.environ.get("FIELDGUARD_CRITERIA_MODE", CRITERIA_FIRST_ERROR),
            report_native_validity=native.strip().lower() in _TRUTHY,
            log_level=os.environ.get("FIELDGUARD_LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def collect_all_errors(self) -> bool:
        return self.criteria_mode == CRITERIA_ALL
