"""
Tests for the CLI output formatter.
"""

import json

from formcheck.presentation.cli.formatters.output_formatter import OutputFormatter


class TestPlainOutput:
    """Test suite for OutputFormatter without rich."""

    def test_format_errors_grid(self):
        """Test that an error report renders as a text grid."""
        formatter = OutputFormatter(use_rich=False)

        output = formatter.format_errors(
            {"email": "Invalid email format", "phone": "Invalid phone number format"},
            title="Row 2"
        )

        lines = output.splitlines()
        assert lines[0] == "Row 2"
        assert lines[1].startswith("+")
        assert "| Field" in output
        assert "| email" in output
        assert "Invalid phone number format" in output

    def test_format_errors_without_title(self):
        """Test that the grid starts immediately without a title."""
        output = OutputFormatter(use_rich=False).format_errors({"pin": "PIN must be exactly 6 digits"})

        assert output.startswith("+")
        assert "PIN must be exactly 6 digits" in output

    def test_format_list(self):
        """Test the plain list layout."""
        output = OutputFormatter(use_rich=False).format_list(["login", "deposit"], title="Forms")

        assert output.splitlines() == ["Forms", "login", "deposit"]

    def test_format_json_keeps_unicode(self):
        """Test that JSON output is not ASCII-escaped."""
        output = OutputFormatter(use_rich=False).format_json({"name": "José"}, pretty=False)

        assert output == '{"name": "José"}'
        assert json.loads(output) == {"name": "José"}
