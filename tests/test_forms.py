"""
Tests for the built-in forms and the form registry.
"""

import pytest

from formcheck import available_forms, get_form, FormNotFoundError
from formcheck.shared.validation.forms import FormRegistry, is_valid_deposit_amount
from formcheck.shared.validation.validation_engine import validate_form
from formcheck.shared.validation.validation_rules import MinLengthRule


class TestBuiltinForms:
    """Test suite for the built-in form catalogue."""

    def test_available_forms(self):
        """Test that every client form is registered."""
        assert available_forms() == [
            "login",
            "register",
            "personal_info",
            "forgot_password",
            "wallet_pin",
            "deposit",
        ]

    def test_get_form_returns_fresh_copy(self):
        """Test that callers cannot alter the built-in definitions."""
        form = get_form("login")
        form["password"].clear()

        assert len(get_form("login")["password"]) == 2

    def test_unknown_form(self):
        """Test that an unknown name raises FormNotFoundError."""
        with pytest.raises(FormNotFoundError, match="Unknown form: checkout"):
            get_form("checkout")

    def test_unknown_form_is_a_key_error(self):
        """Test that FormNotFoundError can be caught as KeyError."""
        with pytest.raises(KeyError):
            get_form("checkout")

    def test_register_accepts_valid_record(self, signup_record):
        """Test a complete registration record."""
        assert validate_form(signup_record, get_form("register")) == {}

    def test_register_reports_every_missing_field(self):
        """Test the registration messages for an empty submission."""
        assert validate_form({}, get_form("register")) == {
            "fullName": "Full Name is required",
            "identityCard": "Identity Card number is required",
            "email": "Email is required",
            "phoneNumber": "Phone Number is required",
            "homeAddress": "Home Address is required",
            "username": "Username is required",
            "password": "Password is required",
        }

    def test_register_format_messages(self, signup_record):
        """Test the format messages on filled but invalid fields."""
        record = dict(signup_record, email="an@", phoneNumber="12345", identityCard="123")

        assert validate_form(record, get_form("register")) == {
            "email": "Email format is invalid",
            "phoneNumber": "Phone number format is invalid",
            "identityCard": "Identity Card must be 12 characters",
        }

    def test_login_short_password(self):
        """Test the login form's password length check."""
        record = {"emailOrUsername": "ann", "password": "abc"}

        assert validate_form(record, get_form("login")) == {
            "password": "Password must be at least 6 characters"
        }

    def test_personal_info_phone_is_optional(self):
        """Test that an empty phone number passes the profile form."""
        record = {
            "fullName": "An",
            "identityCard": "012345678901",
            "gender": "female",
            "email": "an@example.com",
            "phoneNumber": "",
        }

        assert validate_form(record, get_form("personal_info")) == {}

    @pytest.mark.parametrize("pin,valid", [
        ("123456", True),
        ("12345", False),
        ("1234567", False),
        ("12a456", False),
    ])
    def test_wallet_pin(self, pin, valid):
        """Test that PINs must be exactly six digits."""
        report = validate_form({"pin": pin}, get_form("wallet_pin"))

        assert (report == {}) is valid

    @pytest.mark.parametrize("amount,valid", [
        ("10000", True),
        ("250000.5", True),
        ("9999", False),
        ("ten thousand", False),
        ("inf", False),
        ("1e999", False),
        ("nan", False),
    ])
    def test_deposit_minimum(self, amount, valid):
        """Test the deposit minimum amount."""
        assert is_valid_deposit_amount(amount, {}) is valid

    def test_deposit_rejects_zero_amount(self):
        """Test that a numeric zero amount is reported as missing."""
        report = validate_form({"amount": 0}, get_form("deposit"))

        assert report == {"amount": "Please enter an amount"}


class TestFormRegistry:
    """Test suite for FormRegistry."""

    def test_includes_builtin_forms_by_default(self):
        """Test default registration."""
        registry = FormRegistry()

        assert registry.names() == available_forms()
        assert "login" in registry

    def test_extra_forms_and_override(self):
        """Test that registered forms extend and replace built-ins."""
        registry = FormRegistry({
            "voucher": {"code": [{"type": "minLength", "value": 4}]},
            "login": {"emailOrUsername": [{"type": "required"}]},
        })

        assert registry.get("voucher") == {"code": [MinLengthRule(4)]}
        assert list(registry.get("login")) == ["emailOrUsername"]

    def test_without_builtin_forms(self):
        """Test an empty registry."""
        registry = FormRegistry(include_builtin=False)

        assert registry.names() == []
        with pytest.raises(FormNotFoundError):
            registry.get("login")

    def test_validator_carries_form_name(self):
        """Test that validators built from the registry are named."""
        result = FormRegistry().validator("forgot_password").validate({"email": "x"})

        assert result.form == "forgot_password"
        assert result.errors == {"email": "Please enter a valid email"}
