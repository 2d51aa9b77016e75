"""
Test configuration and fixtures for formcheck tests.
"""

import pytest
from pathlib import Path
from typing import Dict, Any

from formcheck.infrastructure.config.config_manager import ConfigManager
from formcheck.application.services.validation_service import ValidationService


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment overrides out of configuration tests."""
    for name in ("LOG_LEVEL", "FORMCHECK_ENV", "FORMCHECK_FORMS_FILE", "FORMCHECK_BATCH_MAX_ROWS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def signup_record() -> Dict[str, Any]:
    """A registration record that passes every built-in rule."""
    return {
        "fullName": "Nguyen Van An",
        "identityCard": "0123-4567-8901",
        "email": "an.nguyen@example.com",
        "phoneNumber": "+84 912 345 678",
        "homeAddress": "12 Ly Thuong Kiet, Hanoi",
        "username": "annguyen",
        "password": "s3cret!",
    }


@pytest.fixture
def rules_file(tmp_path) -> Path:
    """A YAML rule set file."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "username:\n"
        "  - type: required\n"
        "  - type: username\n"
        "email:\n"
        "  - type: required\n"
        "  - type: email\n"
        "phone:\n"
        "  - type: phone\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def forms_file(tmp_path) -> Path:
    """A YAML file with extra named forms."""
    path = tmp_path / "forms.yaml"
    path.write_text(
        "forms:\n"
        "  voucher:\n"
        "    code:\n"
        "      - type: required\n"
        "        message: Please enter a voucher code\n"
        "      - type: minLength\n"
        "        value: 4\n"
        "  change_pin:\n"
        "    newPin:\n"
        "      - type: custom\n"
        "        validator: formcheck.shared.validation.forms:is_six_digit_pin\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_dir(tmp_path, forms_file) -> Path:
    """A configuration directory pointing at the extra forms file."""
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "base.yaml").write_text(
        "logging:\n"
        "  level: INFO\n"
        "forms:\n"
        f"  file: {forms_file}\n"
        "batch:\n"
        "  max_rows: 100\n",
        encoding="utf-8",
    )
    (directory / "test.yaml").write_text(
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def service(config_dir) -> ValidationService:
    """ValidationService built from the test configuration."""
    config = ConfigManager(config_dir, environment="test").load_config()
    return ValidationService(config)
