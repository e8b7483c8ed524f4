"""Unit tests for logging setup."""

import json
import logging

from file_directory.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_returns_root_logger(self):
        assert setup_logging() is logging.getLogger()

    def test_installs_single_handler(self):
        """Test repeated calls do not stack handlers."""
        setup_logging()
        setup_logging()

        json_handlers = [
            h
            for h in logging.getLogger().handlers
            if isinstance(h.formatter, logging.Formatter)
            and h.formatter.__class__.__name__ == "JsonFormatter"
        ]
        assert len(json_handlers) == 1

    def test_json_record_carries_extra_and_service(self):
        """Test a record renders as JSON with extra fields and the service name."""
        setup_logging()
        handler = logging.getLogger("uvicorn").handlers[0]
        record = logging.LogRecord(
            "file_directory", logging.INFO, __file__, 1, "Upload completed", None, None
        )
        record.entry_id = "e-1"

        payload = json.loads(handler.formatter.format(record))

        assert payload["message"] == "Upload completed"
        assert payload["entry_id"] == "e-1"
        assert payload["service"] == "file-directory"
