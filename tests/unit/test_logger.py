"""Tests für das Logging-Setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from frame_accent.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_handlers():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved = list(root.handlers)
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved


def test_console_only(tmp_path):
    logger = setup_logging(log_dir=str(tmp_path / "logs"), log_to_file=False)

    assert logger.name == ROOT_LOGGER_NAME
    assert len(logger.handlers) == 1
    assert not (tmp_path / "logs").exists()


def test_rotating_file(tmp_path):
    logger = setup_logging(log_file="run.log", log_dir=str(tmp_path / "logs"))
    get_logger("analysis.extractor").info("hallo")

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 10 * 1024 * 1024
    file_handlers[0].flush()
    assert "hallo" in (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")


def test_setup_replaces_handlers(tmp_path):
    setup_logging(log_dir=str(tmp_path))
    logger = setup_logging(console_level=logging.WARNING, log_to_file=False)

    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.WARNING


def test_module_loggers_are_children():
    assert get_logger("core.config").name == "frame_accent.core.config"
    assert get_logger().name == ROOT_LOGGER_NAME
