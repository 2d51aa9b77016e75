"""
Environment configuration for environment-specific settings.

Wraps the merged configuration and applies environment variable
overrides on top of it.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import os

from ...shared.exceptions.errors import ConfigurationError


class EnvironmentConfig:
    """
    Environment-specific configuration.

    Environment variables win over file values:
    ``LOG_LEVEL``, ``FORMCHECK_FORMS_FILE`` and ``FORMCHECK_BATCH_MAX_ROWS``.
    """

    def __init__(self, config: Dict[str, Any], base_dir: Optional[Path] = None):
        """
        Initialize the configuration.

        Args:
            config: Merged configuration
            base_dir: Directory relative paths are resolved against
        """
        self.config = config
        self.base_dir = base_dir
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        if "LOG_LEVEL" in os.environ:
            self.config.setdefault("logging", {})["level"] = os.environ["LOG_LEVEL"]

        if "FORMCHECK_FORMS_FILE" in os.environ:
            self.config.setdefault("forms", {})["file"] = os.environ["FORMCHECK_FORMS_FILE"]

        if "FORMCHECK_BATCH_MAX_ROWS" in os.environ:
            raw = os.environ["FORMCHECK_BATCH_MAX_ROWS"]
            try:
                self.config.setdefault("batch", {})["max_rows"] = int(raw)
            except ValueError:
                raise ConfigurationError(
                    f"FORMCHECK_BATCH_MAX_ROWS must be an integer, got {raw!r}"
                ) from None

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration section."""
        return self.config.get(key, default)

    def get_log_level(self) -> str:
        """
        Get logging level.

        Returns:
            str: Upper-case level name
        """
        return str(self.config.get("logging", {}).get("level", "INFO")).upper()

    def get_forms_file(self) -> Optional[Path]:
        """
        Get the path of the extra forms file, if any.

        Returns:
            Optional[Path]: Forms file path
        """
        file_path = self.config.get("forms", {}).get("file")
        if not file_path:
            return None
        path = Path(file_path)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    def include_builtin_forms(self) -> bool:
        """Whether the built-in forms are registered."""
        return bool(self.config.get("forms", {}).get("include_builtin", True))

    def get_batch_max_rows(self) -> Optional[int]:
        """
        Get the row limit for batch validation.

        Returns:
            Optional[int]: Maximum rows, or None for no limit
        """
        return self.config.get("batch", {}).get("max_rows")
