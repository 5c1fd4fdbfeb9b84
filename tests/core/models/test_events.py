import dataclasses

import pytest

from ckeditor_toolkit.core.models import (
    AutosaveEvent,
    ChangeSource,
    ContentChangeEvent,
    EditorError,
    ErrorSeverity,
    FallbackMode,
)


class TestEvents:
    """Test event data objects."""

    def test_content_change(self):
        event = ContentChangeEvent(None, True, "<p>a</p>", "<p>abc</p>", ChangeSource.USER_INPUT)
        assert event.has_changed
        assert event.length_delta == 2

    def test_content_change_without_change(self):
        event = ContentChangeEvent(None, old_content="x", new_content="x")
        assert not event.has_changed
        assert event.length_delta == 0
        assert event.change_source is ChangeSource.UNKNOWN

    def test_autosave_timestamp(self):
        assert AutosaveEvent(None, content="x").timestamp > 0

    def test_events_are_frozen(self):
        event = AutosaveEvent(None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.content = "changed"  # type: ignore[misc]

    def test_error_str(self):
        error = EditorError("E1", "boom", ErrorSeverity.FATAL, recoverable=False)
        assert str(error) == "EditorError[code=E1, severity=FATAL, message=boom]"


class TestFallbackMode:

    def test_from_js_name(self):
        assert FallbackMode.from_js_name("readonly") is FallbackMode.READ_ONLY
        assert FallbackMode.TEXTAREA.js_name == "textarea"

    @pytest.mark.parametrize("value", [None, "", "unknown"])
    def test_unknown_defaults_to_error_message(self, value):
        assert FallbackMode.from_js_name(value) is FallbackMode.ERROR_MESSAGE
