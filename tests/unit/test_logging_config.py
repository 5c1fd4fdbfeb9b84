import logging
import logging.handlers

import pytest

from ckeditor_toolkit.logging_config import RESOLUTION_LOGGER, setup_logging

pytestmark = pytest.mark.usefixtures("restore_logging")


class TestSetupLogging:
    """Test logging initialisation from the packaged YAML."""

    def test_file_handler_uses_log_dir(self, tmp_path):
        setup_logging()
        file_handlers = [h for h in logging.getLogger().handlers
                         if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "logs" / "app.log")
        assert logging.getLogger("ckeditor_toolkit").level == logging.INFO

    def test_forced_level(self):
        setup_logging(logging.DEBUG)
        assert logging.getLogger("ckeditor_toolkit").level == logging.DEBUG

    def test_resolution_debug_override(self, monkeypatch):
        monkeypatch.setenv("CKEDITOR_TOOLKIT_DEBUG_RESOLUTION", "yes")
        setup_logging()
        logger = logging.getLogger(RESOLUTION_LOGGER)
        assert logger.level == logging.DEBUG
        assert any(h.level == logging.DEBUG for h in logger.handlers)

    def test_module_debug_override(self, monkeypatch):
        monkeypatch.setenv("CKEDITOR_TOOLKIT_DEBUG_MODULES", "ckeditor_toolkit, ")
        setup_logging()
        assert logging.getLogger("ckeditor_toolkit").level == logging.DEBUG

    def test_invalid_config_falls_back(self, write_user_config, capsys):
        write_user_config("logging.yml", "handlers:\n  broken:\n    class: no.such.Handler\n")
        setup_logging()
        assert "Error loading logging config" in capsys.readouterr().err
        assert logging.getLogger().level == logging.INFO
