"""
Tests for the structured logger.
"""

import io
import json
import logging

import pytest

from formcheck.shared.logging.logger_interface import LogLevel
from formcheck.shared.logging.structured_logger import configure_logging


class TestStructuredLogger:
    """Test suite for StructuredLogger."""

    def test_emits_json_with_context(self):
        """Test the shape of a log entry."""
        stream = io.StringIO()
        logger = configure_logging("formcheck.test.json", level=LogLevel.INFO, output=stream)
        logger.add_context(command="validate")

        logger.info("Record validated", fields=3)

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "INFO"
        assert entry["logger"] == "formcheck.test.json"
        assert entry["message"] == "Record validated"
        assert entry["context"] == {"command": "validate", "fields": 3}

    def test_filters_below_level(self):
        """Test that lower levels are dropped."""
        stream = io.StringIO()
        logger = configure_logging("formcheck.test.level", level="warning", output=stream)

        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")

        lines = stream.getvalue().strip().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["shown"]

    def test_exception_details(self):
        """Test that exceptions are serialized."""
        stream = io.StringIO()
        logger = configure_logging("formcheck.test.exc", output=stream)

        try:
            raise ValueError("bad rule")
        except ValueError as e:
            logger.exception("Failed", exc_info=e)

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "ERROR"
        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "bad rule"

    def test_module_loggers_emit_json(self):
        """Test that records from child loggers share the JSON format."""
        stream = io.StringIO()
        configure_logging("formcheck.test.tree", output=stream)

        logging.getLogger("formcheck.test.tree.service").info("Read %d rows", 3)

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "INFO"
        assert entry["logger"] == "formcheck.test.tree.service"
        assert entry["message"] == "Read 3 rows"
        assert entry["context"] == {}

    def test_module_logger_exception(self):
        """Test that exception info from child loggers is serialized."""
        stream = io.StringIO()
        configure_logging("formcheck.test.tree_exc", output=stream)

        try:
            raise KeyError("voucher")
        except KeyError:
            logging.getLogger("formcheck.test.tree_exc.forms").exception("Lookup failed")

        entry = json.loads(stream.getvalue().strip())
        assert entry["level"] == "ERROR"
        assert entry["exception"]["type"] == "KeyError"

    def test_reconfiguring_does_not_duplicate_output(self):
        """Test that configuring the same logger twice keeps one handler."""
        first = io.StringIO()
        second = io.StringIO()
        configure_logging("formcheck.test.twice", output=first)
        logger = configure_logging("formcheck.test.twice", output=second)

        logger.info("once")

        assert first.getvalue() == ""
        assert len(second.getvalue().strip().splitlines()) == 1

    def test_context_management(self):
        """Test adding and clearing context."""
        logger = configure_logging("formcheck.test.ctx", output=io.StringIO())
        logger.add_context(form="login")

        assert logger.get_context() == {"form": "login"}
        logger.clear_context()
        assert logger.get_context() == {}

    def test_unknown_level_name(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValueError):
            configure_logging("formcheck.test.bad", level="loud")
