import logging

import pytest

from contact_manager.app.core.config import settings
from contact_manager.app.core.logging_config import setup_logging
from contact_manager.app.main import create_app


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_log_file_receives_records(tmp_path, restore_root_logger):
    log_path = tmp_path / "app.log"

    added = setup_logging("DEBUG", str(log_path))
    logging.getLogger("contact_manager.audit").info("Created contact %s", "abc")
    for handler in added:
        handler.flush()

    text = log_path.read_text(encoding="utf-8")
    assert "[INFO] contact_manager.audit: Created contact abc" in text
    assert restore_root_logger.level == logging.DEBUG


def test_repeated_setup_does_not_duplicate_handlers(tmp_path, restore_root_logger):
    log_path = str(tmp_path / "app.log")
    setup_logging("INFO", log_path)

    assert setup_logging("INFO", log_path) == []


def test_create_app_uses_configured_log_file(tmp_path, monkeypatch, restore_root_logger):
    log_path = tmp_path / "server.log"
    monkeypatch.setattr(settings, "log_file", str(log_path))

    create_app()

    file_handlers = [
        h for h in restore_root_logger.handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename == str(log_path.resolve())
    ]
    assert len(file_handlers) == 1
