"""
Logging configuration tests.

Covers the shared console/file handlers and the routing of the Uvicorn
loggers through them.

Run with: pytest tests/test_logging_config.py -v
"""

import logging

import pytest

from contact_book_api.app.core.logging_config import SERVER_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_server = {}
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        saved_server[name] = (server_logger.handlers[:], server_logger.propagate, server_logger.level)
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    for name, (handlers, propagate, level) in saved_server.items():
        server_logger = logging.getLogger(name)
        server_logger.handlers[:] = handlers
        server_logger.propagate = propagate
        server_logger.setLevel(level)


class TestSetupLogging:

    def test_file_handler_receives_app_and_server_records(self, tmp_path):
        log_file = tmp_path / "contacts.log"

        added = setup_logging("INFO", str(log_file))

        assert any(isinstance(handler, logging.FileHandler) for handler in added)
        logging.getLogger("contact_book_api.app.services.contact_service").info("Created contact %s", 7)
        logging.getLogger("uvicorn.access").info("GET /contacts 200")
        logging.getLogger("uvicorn.error").debug("below the configured level")
        for handler in added:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "[INFO] contact_book_api.app.services.contact_service: Created contact 7" in text
        assert "[INFO] uvicorn.access: GET /contacts 200" in text
        assert "below the configured level" not in text

    def test_repeated_calls_do_not_duplicate_handlers(self, tmp_path):
        log_file = str(tmp_path / "contacts.log")
        setup_logging("INFO", log_file)
        count = len(logging.getLogger().handlers)

        assert setup_logging("INFO", log_file) == []
        assert len(logging.getLogger().handlers) == count

    def test_server_loggers_propagate_at_configured_level(self):
        uvicorn_access = logging.getLogger("uvicorn.access")
        uvicorn_access.addHandler(logging.NullHandler())
        uvicorn_access.propagate = False

        setup_logging("WARNING")

        for name in SERVER_LOGGERS:
            server_logger = logging.getLogger(name)
            assert server_logger.handlers == []
            assert server_logger.propagate is True
            assert server_logger.level == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("LOUD")

        assert logging.getLogger().level == logging.INFO
