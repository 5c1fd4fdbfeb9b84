import logging

import pytest

from ckeditor_toolkit.core.plugins import (
    FilterOptions,
    filter_conflicting_plugins,
    is_known_plugin,
    is_unavailable,
    requires_configuration,
)

LOGGER = "ckeditor_toolkit.core.plugins.conflicts"


class TestClassification:
    """Test per-name policy helpers."""

    def test_known_plugin(self):
        assert is_known_plugin("Bold")
        assert not is_known_plugin("MyWidget")

    def test_unavailable(self):
        assert is_unavailable("Typing")
        assert not is_unavailable("Bold")
        assert not is_unavailable("MyWidget")

    def test_requires_configuration(self):
        assert requires_configuration("Title")
        assert requires_configuration("Minimap")
        assert not requires_configuration("Bold")
        assert not requires_configuration("MyWidget")


class TestFilter:
    """Test filter_conflicting_plugins with the default policy."""

    def test_drops_unavailable_plugins(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        result = filter_conflicting_plugins(["Essentials", "Typing", "Bold", "Enter"])
        assert result.filtered == ["Essentials", "Bold"]
        assert result.removed == ["Typing", "Enter"]
        debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("Typing" in r.getMessage() for r in debug)

    def test_drops_config_required_with_warning(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        result = filter_conflicting_plugins(["Bold", "Title", "Minimap"])
        assert result.filtered == ["Bold"]
        assert result.removed == ["Title", "Minimap"]
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 2
        assert "Title" in warnings[0]

    def test_allow_config_required(self):
        options = FilterOptions(allow_config_required_plugins=True)
        result = filter_conflicting_plugins(["Bold", "Title", "Typing"], options)
        assert result.filtered == ["Bold", "Title"]
        assert result.removed == ["Typing"]

    def test_first_exclusive_member_wins(self, caplog):
        caplog.set_level(logging.WARNING, logger=LOGGER)
        result = filter_conflicting_plugins(["RestrictedEditingMode", "Bold", "StandardEditingMode"])
        assert result.filtered == ["RestrictedEditingMode", "Bold"]
        assert result.removed == ["StandardEditingMode"]
        assert "mutually exclusive" in caplog.records[-1].getMessage()

    def test_exclusion_applies_in_strict_mode(self):
        options = FilterOptions(strict_plugin_loading=True)
        result = filter_conflicting_plugins(
            ["StandardEditingMode", "Typing", "Title", "RestrictedEditingMode"], options
        )
        assert result.filtered == ["StandardEditingMode", "Typing", "Title"]
        assert result.removed == ["RestrictedEditingMode"]

    def test_strict_mode_logs_skip(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        filter_conflicting_plugins(["Bold"], FilterOptions(strict_plugin_loading=True))
        assert any("Strict plugin loading enabled" in r.getMessage() for r in caplog.records)

    def test_custom_names_pass_through(self):
        result = filter_conflicting_plugins(["MyWidget", "Bold", "acme/Thing"])
        assert result.filtered == ["MyWidget", "Bold", "acme/Thing"]
        assert result.removed == []

    def test_duplicates_are_kept(self):
        result = filter_conflicting_plugins(["Bold", "Bold", "StandardEditingMode", "StandardEditingMode"])
        assert result.filtered == ["Bold", "Bold", "StandardEditingMode", "StandardEditingMode"]

    def test_custom_logger(self, caplog):
        custom = logging.getLogger("tests.filter")
        caplog.set_level(logging.WARNING, logger="tests.filter")
        filter_conflicting_plugins(["Title"], log=custom)
        assert [r.name for r in caplog.records] == ["tests.filter"]

    def test_custom_groups(self):
        result = filter_conflicting_plugins(["A", "B", "C"], exclusive_groups=(("B", "C"),))
        assert result.filtered == ["A", "B"]
        assert result.removed == ["C"]

    @pytest.mark.parametrize("names", [
        [],
        ["Bold", "Typing", "Title", "StandardEditingMode", "RestrictedEditingMode", "X"],
        ["RestrictedEditingMode", "StandardEditingMode", "ShiftEnter"],
    ])
    def test_output_partitions_input(self, names):
        """Filtered names keep input order; filtered plus removed is the input."""
        result = filter_conflicting_plugins(names)
        assert sorted(result.filtered + result.removed) == sorted(names)
        assert result.filtered == [n for n in names if n in result.filtered]

    def test_input_is_not_mutated(self):
        names = ["Typing", "Bold"]
        filter_conflicting_plugins(names)
        assert names == ["Typing", "Bold"]
