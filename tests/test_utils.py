import logging

import pytest
from rich.logging import RichHandler

from argtree.utils import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, logging.FileHandler)) or (
            type(handler) is logging.StreamHandler
        ):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_defaults_to_cli(restore_root_logger, monkeypatch):
    monkeypatch.delenv("ARGTREE_LOG_MODE", raising=False)
    setup_logging()
    assert any(isinstance(handler, RichHandler) for handler in restore_root_logger.handlers)


def test_setup_logging_cli(restore_root_logger):
    setup_logging(mode="cli")
    assert any(isinstance(handler, RichHandler) for handler in restore_root_logger.handlers)


def test_setup_logging_json_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "argtree.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("argtree").debug("hello %s", "world")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert '"message": "hello world"' in log_file.read_text(encoding="UTF-8")


def test_setup_logging_env_override(restore_root_logger, monkeypatch):
    monkeypatch.setenv("ARGTREE_LOG_MODE", "json")
    setup_logging()
    assert not any(
        isinstance(handler, RichHandler) for handler in restore_root_logger.handlers
    )


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
