import json
import logging

import pytest

from rum_provider import logger as logger_module


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger_module.configure_logger("PRODUCTION")


def test_default_level_is_info():
    logger_module.configure_logger("PRODUCTION")
    assert logger_module.logger.level == logging.INFO
    assert logger_module.DEBUG_MODE is False


def test_debug_mode_enables_debug_level():
    logger_module.configure_logger("debug")
    assert logger_module.DEBUG_MODE is True
    assert logger_module.logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger_module.logger.handlers)


def test_setup_logger_adds_single_handler():
    logger_module.setup_logger()
    logger_module.setup_logger()
    assert len(logging.getLogger(logger_module.LOGGER_NAME).handlers) == 1


def test_configure_logger_from_file(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"mode": "DEBUG"}))

    logger_module.configure_logger_from_file(config_path)

    assert logger_module.DEBUG_MODE is True


def test_configure_logger_from_missing_file_keeps_defaults(tmp_path):
    logger_module.configure_logger_from_file(tmp_path / "missing.json")
    assert logger_module.DEBUG_MODE is False
