"""Custom validator registry for fieldguard.

Rule files reference custom validators by name; the functions behind those
names are registered here at application startup.
"""

import logging
from collections.abc import Callable

from fieldguard.validation.types import ValidateFn

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Registry for named custom validators.

    Validators must be explicitly registered before a rule file can use them.

    Example:
        @validator("accounts.uniqueEmail")
        async def unique_email(value):
            return not await accounts.exists(email=value) or "Email already taken"

        # Later, resolve from a rule file
        fn = ValidatorRegistry.get("accounts.uniqueEmail")
    """

    _validators: dict[str, ValidateFn] = {}

    @classmethod
    def register(cls, name: str, validate_fn: ValidateFn) -> None:
        """Register a validator function by name.

        Idempotent - re-registering the same name is a no-op.

        Args:
            name: Unique identifier for the validator
            validate_fn: Sync or async function taking the field value
        """
        if name in cls._validators:
            return
        cls._validators[name] = validate_fn
        logger.debug("Registered validator '%s'", name)

    @classmethod
    def get(cls, name: str) -> ValidateFn:
        """Get a registered validator by name.

        Raises:
            ValueError: If validator is not registered
        """
        if name not in cls._validators:
            raise ValueError(
                f"Validator '{name}' is not registered. "
                "Custom validators must be explicitly registered at application startup."
            )
        return cls._validators[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def list_registered(cls) -> list[str]:
        return sorted(cls._validators.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._validators.clear()


def validator(name: str) -> Callable[[ValidateFn], ValidateFn]:
    """Decorator to register a validator function.

    Usage:
        @validator("accounts.uniqueEmail")
        async def unique_email(value):
            ...
    """

    def decorator(fn: ValidateFn) -> ValidateFn:
        ValidatorRegistry.register(name, fn)
        return fn

    return decorator
