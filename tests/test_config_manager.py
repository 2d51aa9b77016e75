"""
Tests for configuration loading.
"""

import pytest

from formcheck.infrastructure.config.config_manager import ConfigManager
from formcheck.infrastructure.config.config_validator import ConfigValidator
from formcheck.shared.exceptions.errors import ConfigurationError


class TestConfigManager:
    """Test suite for ConfigManager."""

    def test_defaults_without_directory(self):
        """Test that defaults apply without a configuration directory."""
        config = ConfigManager().load_config()

        assert config.get_log_level() == "INFO"
        assert config.get_forms_file() is None
        assert config.include_builtin_forms()
        assert config.get_batch_max_rows() is None

    def test_environment_file_overrides_base(self, config_dir, forms_file):
        """Test that <env>.yaml is merged over base.yaml."""
        config = ConfigManager(config_dir, environment="test").load_config()

        assert config.get_log_level() == "WARNING"
        assert config.get_forms_file() == forms_file
        assert config.get_batch_max_rows() == 100

    def test_missing_environment_file_is_optional(self, config_dir):
        """Test that only base.yaml is required."""
        config = ConfigManager(config_dir, environment="staging").load_config()

        assert config.get_log_level() == "INFO"

    def test_environment_from_variable(self, config_dir, monkeypatch):
        """Test FORMCHECK_ENV selects the environment file."""
        monkeypatch.setenv("FORMCHECK_ENV", "test")

        assert ConfigManager(config_dir).environment == "test"

    def test_environment_variable_overrides(self, config_dir, monkeypatch, tmp_path):
        """Test that environment variables win over files."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("FORMCHECK_FORMS_FILE", "other.yaml")
        monkeypatch.setenv("FORMCHECK_BATCH_MAX_ROWS", "5")

        config = ConfigManager(config_dir, environment="test").load_config()

        assert config.get_log_level() == "DEBUG"
        assert config.get_forms_file() == config_dir / "other.yaml"
        assert config.get_batch_max_rows() == 5

    def test_invalid_max_rows_variable(self, config_dir, monkeypatch):
        """Test that a non-numeric row limit is rejected."""
        monkeypatch.setenv("FORMCHECK_BATCH_MAX_ROWS", "many")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_dir).load_config()

    def test_missing_directory(self, tmp_path):
        """Test that a missing configuration directory raises."""
        with pytest.raises(ConfigurationError):
            ConfigManager(tmp_path / "nowhere").load_config()

    def test_missing_base_file(self, tmp_path):
        """Test that base.yaml is required."""
        with pytest.raises(ConfigurationError, match="base.yaml"):
            ConfigManager(tmp_path).load_config()

    def test_invalid_yaml(self, tmp_path):
        """Test that unparsable YAML raises ConfigurationError."""
        (tmp_path / "base.yaml").write_text("logging: [\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigManager(tmp_path).load_config()

    def test_base_file_not_utf8(self, tmp_path):
        """Test that a config file in another encoding raises ConfigurationError."""
        (tmp_path / "base.yaml").write_bytes("logging:\n  level: INFO # défaut\n".encode("latin-1"))

        with pytest.raises(ConfigurationError):
            ConfigManager(tmp_path).load_config()

    def test_empty_section_falls_back_to_defaults(self, tmp_path):
        """Test that an empty section keeps its defaults."""
        (tmp_path / "base.yaml").write_text("logging:\n", encoding="utf-8")

        config = ConfigManager(tmp_path).load_config()

        assert config.get_log_level() == "INFO"

    def test_get_config_caches(self, config_dir):
        """Test that configuration is loaded once."""
        manager = ConfigManager(config_dir, environment="test")

        assert manager.get_config() is manager.get_config()
        assert manager.get_batch_config() == {"max_rows": 100}


class TestConfigValidator:
    """Test suite for ConfigValidator."""

    def test_collects_all_errors(self):
        """Test that every invalid section is reported."""
        validator = ConfigValidator()

        with pytest.raises(ConfigurationError) as exc_info:
            validator.validate_config({
                "logging": {"level": "LOUD"},
                "forms": {"file": "", "include_builtin": "yes"},
                "batch": {"max_rows": 0},
            })

        assert len(exc_info.value.details["errors"]) == 4

    def test_accepts_valid_config(self):
        """Test a valid configuration."""
        ConfigValidator().validate_config({
            "logging": {"level": "debug"},
            "forms": {"file": "forms.yaml", "include_builtin": False},
            "batch": {"max_rows": 10},
        })
