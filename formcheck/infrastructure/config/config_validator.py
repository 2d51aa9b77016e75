"""
Configuration validator for validating configuration values.

This module checks loaded configuration against the sections formcheck
understands before it is used.
"""

from typing import Dict, Any, List

from ...shared.exceptions.errors import ConfigurationError


class ConfigValidator:
    """
    Validator for configuration values.

    Collects every problem found and raises them together.
    """

    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.errors = []

        if not isinstance(config, dict):
            raise ConfigurationError("Configuration must be a mapping")

        if "logging" in config:
            self._validate_logging_config(config["logging"])

        if "forms" in config:
            self._validate_forms_config(config["forms"])

        if "batch" in config:
            self._validate_batch_config(config["batch"])

        if self.errors:
            raise ConfigurationError("\n".join(self.errors), errors=list(self.errors))

    def _validate_logging_config(self, config: Any) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        if not isinstance(config, dict):
            self.errors.append("Logging configuration must be a mapping")
            return

        if "level" in config:
            level = config["level"]
            if not isinstance(level, str) or level.upper() not in self.VALID_LOG_LEVELS:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
                )

    def _validate_forms_config(self, config: Any) -> None:
        """
        Validate forms configuration.

        Args:
            config: Forms configuration
        """
        if not isinstance(config, dict):
            self.errors.append("Forms configuration must be a mapping")
            return

        if config.get("file") is not None:
            file_path = config["file"]
            if not isinstance(file_path, str) or not file_path:
                self.errors.append("Forms file path must be a non-empty string")

        if "include_builtin" in config and not isinstance(config["include_builtin"], bool):
            self.errors.append("Forms include_builtin must be a boolean")

    def _validate_batch_config(self, config: Any) -> None:
        """
        Validate batch configuration.

        Args:
            config: Batch configuration
        """
        if not isinstance(config, dict):
            self.errors.append("Batch configuration must be a mapping")
            return

        if config.get("max_rows") is not None:
            max_rows = config["max_rows"]
            if isinstance(max_rows, bool) or not isinstance(max_rows, int) or max_rows <= 0:
                self.errors.append("Batch max rows must be a positive integer")
