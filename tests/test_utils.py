"""Tests for logging setup and driver path validation."""

import logging

import pytest

from tabletgui.config import new_configuration
from tabletgui.utils import (
    log_level_for,
    resolve_driver_path,
    setup_logging,
    validate_driver_installed,
)
from tabletgui.utils.logger import get_log_dir


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_console_only(self, root_logger):
        logger = setup_logging(log_level="WARNING", log_file=False)
        assert logger is root_logger
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler(self, root_logger, tmp_path):
        logger = setup_logging(log_level="DEBUG", log_file=True, log_dir=tmp_path / "logs")
        logging.getLogger("tabletgui.test").debug("written to file")
        for handler in logger.handlers:
            handler.flush()

        log_files = list((tmp_path / "logs").glob("tabletgui_*.log"))
        assert len(log_files) == 1
        assert "written to file" in log_files[0].read_text()

    def test_unknown_level_defaults_to_info(self, root_logger):
        logger = setup_logging(log_level="chatty", log_file=False)
        assert logger.level == logging.INFO

    def test_repeated_setup_replaces_handlers(self, root_logger):
        setup_logging(log_file=False)
        logger = setup_logging(log_file=False)
        assert len(logger.handlers) == 1

    def test_log_level_follows_debugging_switch(self):
        config = new_configuration()
        assert log_level_for(config) == "INFO"
        config.debugging_enabled = True
        assert log_level_for(config) == "DEBUG"

    def test_log_dir_name(self):
        log_dir = get_log_dir()
        assert log_dir.name == "logs"
        assert log_dir.parent.name == "tabletgui"


# ---------------------------------------------------------------------------
# Driver path
# ---------------------------------------------------------------------------

class TestDriverPath:
    """Tests for resolve_driver_path() and validate_driver_installed()."""

    def _install_driver(self, base_dir):
        driver = base_dir / "bin" / "TabletDriverService.exe"
        driver.parent.mkdir(parents=True)
        driver.write_bytes(b"MZ")
        return driver

    def test_relative_path_resolved_against_base_dir(self, tmp_path):
        config = new_configuration()
        path = resolve_driver_path(config, tmp_path)
        assert path == (tmp_path / "bin" / "TabletDriverService.exe").resolve()

    def test_absolute_path_kept(self, tmp_path):
        config = new_configuration()
        config.driver_path = str(tmp_path / "driver.exe")
        assert resolve_driver_path(config, tmp_path / "elsewhere") == (tmp_path / "driver.exe").resolve()

    def test_installed_driver(self, tmp_path):
        driver = self._install_driver(tmp_path)
        installed, path = validate_driver_installed(new_configuration(), tmp_path)
        assert installed is True
        assert path == driver.resolve()

    def test_missing_driver(self, tmp_path):
        installed, path = validate_driver_installed(new_configuration(), tmp_path)
        assert installed is False
        assert path is None

    def test_directory_is_not_a_driver(self, tmp_path):
        (tmp_path / "bin" / "TabletDriverService.exe").mkdir(parents=True)
        installed, path = validate_driver_installed(new_configuration(), tmp_path)
        assert installed is False

    def test_empty_driver_path(self, tmp_path):
        config = new_configuration()
        config.driver_path = ""
        assert validate_driver_installed(config, tmp_path) == (False, None)
