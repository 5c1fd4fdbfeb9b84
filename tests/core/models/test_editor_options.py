import logging

import pytest

from ckeditor_toolkit.core.models import EditorTheme, EditorType, parse_enum, parse_enum_strict


class TestEditorOptionEnums:
    """Test option enums and their wire names."""

    def test_js_names(self):
        assert EditorType.DECOUPLED.js_name == "decoupled"
        assert str(EditorTheme.DARK) == "dark"
        assert [t.js_name for t in EditorType] == ["classic", "balloon", "inline", "decoupled"]


class TestParseEnum:
    """Test tolerant parsing."""

    def test_case_insensitive(self):
        assert parse_enum("Dark", EditorTheme, EditorTheme.AUTO) is EditorTheme.DARK
        assert parse_enum(" inline ", EditorType, EditorType.CLASSIC) is EditorType.INLINE

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_uses_default_at_debug(self, value, caplog):
        caplog.set_level(logging.DEBUG, logger="ckeditor_toolkit.core.models.editor_options")
        assert parse_enum(value, EditorTheme, EditorTheme.LIGHT) is EditorTheme.LIGHT
        assert caplog.records[-1].levelno == logging.DEBUG
        assert "Null or empty value" in caplog.records[-1].getMessage()

    def test_invalid_uses_default_with_warning(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ckeditor_toolkit.core.models.editor_options")
        assert parse_enum("neon", EditorTheme, EditorTheme.AUTO, context="theme") is EditorTheme.AUTO
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage().startswith("[theme] Invalid EditorTheme value: 'neon'")


class TestParseEnumStrict:
    """Test strict parsing."""

    def test_valid(self):
        assert parse_enum_strict("balloon", EditorType) is EditorType.BALLOON

    def test_invalid_lists_valid_values(self):
        with pytest.raises(ValueError) as exc_info:
            parse_enum_strict("neon", EditorTheme)
        assert str(exc_info.value) == "Invalid EditorTheme value: 'neon'. Valid values: [AUTO, LIGHT, DARK]"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        with pytest.raises(ValueError, match="must not be null or empty"):
            parse_enum_strict(value, EditorType)
