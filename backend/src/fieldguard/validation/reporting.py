"""Native validity reporting.

The engine mirrors every recorded failure (and the final clear on success)
into a platform-native feedback channel through a ValidityReporter.
"""

from typing import Any

from fieldguard.validation.types import Message

# Sent on overall success
CLEAR = ""


def native_message(message: Message) -> str:
    """Render a message for the native channel; an empty message still marks the element invalid."""
    if not message:
        return " "
    return message if isinstance(message, str) else str(message)


def supports_native_validity(element: Any) -> bool:
    return element is not None and callable(getattr(element, "report_validity", None))


class ElementValidityReporter:
    """Forwards to the element's own set_custom_validity/report_validity.

    Elements without native validity support are left alone.
    """

    def set_message(self, element: Any, message: str) -> None:
        if supports_native_validity(element):
            element.set_custom_validity(message)

    def report(self, element: Any) -> None:
        if supports_native_validity(element):
            element.report_validity()
