"""Default checkbox/radio group value resolution."""

from fieldguard.validation.types import GroupValue, InputElement

_UNCHECKED = GroupValue(value=False, is_valid=False)
_CHECKED = GroupValue(value=True, is_valid=True)


def _is_selected(element: InputElement | None) -> bool:
    return element is not None and element.checked and not element.disabled


class DefaultGroupResolver:
    """Resolves groups following the browser's form conventions.

    - A single checkbox yields its value (True when it has none) if checked, False otherwise
    - Several checkboxes yield the list of checked values
    - A radio group yields the checked value, or None
    """

    def resolve_checkbox_group(self, elements: list[InputElement] | None) -> GroupValue:
        if not elements:
            return _UNCHECKED

        if len(elements) > 1:
            values = [e.value for e in elements if _is_selected(e)]
            return GroupValue(value=values, is_valid=bool(values))

        element = elements[0]
        if not _is_selected(element):
            return _UNCHECKED
        if element.value is None or element.value == "":
            return _CHECKED
        return GroupValue(value=element.value, is_valid=True)

    def resolve_radio_group(self, elements: list[InputElement] | None) -> GroupValue:
        for element in elements or []:
            if _is_selected(element):
                return GroupValue(value=element.value, is_valid=True)
        return GroupValue(value=None, is_valid=False)
