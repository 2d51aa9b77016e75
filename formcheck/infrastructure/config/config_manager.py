"""
Configuration manager for centralized configuration handling.

Loads ``base.yaml`` and an optional ``<environment>.yaml`` from a
configuration directory, merges them over the built-in defaults and
validates the result.
"""

from typing import Dict, Any, Optional, Union
import copy
import os
import yaml
from pathlib import Path

from ...shared.exceptions.errors import ConfigurationError
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
    },
    "forms": {
        "file": None,
        "include_builtin": True,
    },
    "batch": {
        "max_rows": None,
    },
}


class ConfigManager:
    """
    Manager for application configuration.

    Without a configuration directory only the defaults and environment
    overrides apply.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        environment: Optional[str] = None
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Optional configuration directory path
            environment: Optional environment name; defaults to
                ``FORMCHECK_ENV`` or ``development``
        """
        self.config_dir = Path(config_dir) if config_dir is not None else None
        self.environment = environment or os.getenv("FORMCHECK_ENV", "development")
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from files.

        Returns:
            EnvironmentConfig: Loaded configuration

        Raises:
            ConfigurationError: If the directory or ``base.yaml`` is missing,
                a file is not valid YAML, or the result is invalid
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_dir is not None:
            if not self.config_dir.is_dir():
                raise ConfigurationError(
                    f"Configuration directory not found: {self.config_dir}",
                    path=str(self.config_dir)
                )

            base_config = self._load_yaml("base.yaml", required=True)
            env_config = self._load_yaml(f"{self.environment}.yaml", required=False)

            config = self._merge_configs(config, base_config)
            config = self._merge_configs(config, env_config)

        for section, value in list(config.items()):
            if value is None and section in DEFAULT_CONFIG:
                config[section] = copy.deepcopy(DEFAULT_CONFIG[section])

        self._config = EnvironmentConfig(config, base_dir=self.config_dir)
        self.validator.validate_config(self._config.config)

        return self._config

    def get_config(self) -> EnvironmentConfig:
        """
        Get the current configuration, loading it on first use.

        Returns:
            EnvironmentConfig: Current configuration
        """
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.get_config().get("logging", {})

    def get_forms_config(self) -> Dict[str, Any]:
        """Get forms configuration."""
        return self.get_config().get("forms", {})

    def get_batch_config(self) -> Dict[str, Any]:
        """Get batch configuration."""
        return self.get_config().get("batch", {})

    def _load_yaml(self, filename: str, required: bool) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name
            required: Whether a missing file is an error

        Returns:
            Dict[str, Any]: Loaded configuration, empty when an optional
                file is missing

        Raises:
            ConfigurationError: If a required file is missing or a file
                is not a valid YAML mapping
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            if required:
                raise ConfigurationError(
                    f"Configuration file not found: {file_path}",
                    path=str(file_path)
                )
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {file_path}: {e}",
                path=str(file_path)
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {file_path}: {e}",
                path=str(file_path)
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must hold a mapping: {file_path}",
                path=str(file_path)
            )
        return data

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
