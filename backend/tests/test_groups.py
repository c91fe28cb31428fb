"""Tests for checkbox/radio group resolution."""

from fieldguard.validation import DefaultGroupResolver, GroupValue, InputElement


def checkbox(value="", checked=False, disabled=False) -> InputElement:
    return InputElement(name="opt", type="checkbox", value=value, checked=checked, disabled=disabled)


def radio(value, checked=False, disabled=False) -> InputElement:
    return InputElement(name="opt", type="radio", value=value, checked=checked, disabled=disabled)


class TestCheckboxGroup:
    def setup_method(self):
        self.resolver = DefaultGroupResolver()

    def test_no_elements(self):
        assert self.resolver.resolve_checkbox_group(None) == GroupValue(False, False)
        assert self.resolver.resolve_checkbox_group([]) == GroupValue(False, False)

    def test_single_unchecked(self):
        assert self.resolver.resolve_checkbox_group([checkbox("yes")]) == GroupValue(False, False)

    def test_single_checked_without_value(self):
        assert self.resolver.resolve_checkbox_group([checkbox(checked=True)]) == GroupValue(True, True)

    def test_single_checked_with_value(self):
        result = self.resolver.resolve_checkbox_group([checkbox("yes", checked=True)])
        assert result == GroupValue("yes", True)

    def test_single_disabled(self):
        result = self.resolver.resolve_checkbox_group([checkbox("yes", checked=True, disabled=True)])
        assert result.is_valid is False

    def test_many_collects_checked_values(self):
        elements = [
            checkbox("a", checked=True),
            checkbox("b"),
            checkbox("c", checked=True),
            checkbox("d", checked=True, disabled=True),
        ]
        assert self.resolver.resolve_checkbox_group(elements) == GroupValue(["a", "c"], True)

    def test_many_none_checked(self):
        result = self.resolver.resolve_checkbox_group([checkbox("a"), checkbox("b")])
        assert result == GroupValue([], False)


class TestRadioGroup:
    def setup_method(self):
        self.resolver = DefaultGroupResolver()

    def test_checked_value(self):
        result = self.resolver.resolve_radio_group([radio("s"), radio("m", checked=True)])
        assert result == GroupValue("m", True)

    def test_none_checked(self):
        assert self.resolver.resolve_radio_group([radio("s"), radio("m")]) == GroupValue(None, False)

    def test_disabled_ignored(self):
        result = self.resolver.resolve_radio_group([radio("s", checked=True, disabled=True)])
        assert result == GroupValue(None, False)

    def test_no_elements(self):
        assert self.resolver.resolve_radio_group(None).is_valid is False
