import logging

import pytest

from doclinks.utils.logger import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    configure_logging(force=True)


def test_get_logger_namespace():
    assert get_logger("link.validator").name == "doclinks.link.validator"


def test_configure_logging_level_and_file(tmp_path):
    log_file = tmp_path / "logs" / "doclinks.log"
    configure_logging("DEBUG", log_file, force=True)

    root_logger = logging.getLogger("doclinks")
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 2

    get_logger("test").debug("hello from test")
    for handler in root_logger.handlers:
        handler.flush()
    assert "doclinks.test - DEBUG - hello from test" in log_file.read_text(encoding="utf-8")


def test_configure_logging_without_force_is_noop():
    configure_logging("ERROR", force=True)
    configure_logging("DEBUG")
    assert logging.getLogger("doclinks").level == logging.ERROR


def test_configure_logging_warn_maps_to_warning():
    configure_logging("WARN", force=True)
    root_logger = logging.getLogger("doclinks")
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1


def test_configure_logging_invalid_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD", force=True)
