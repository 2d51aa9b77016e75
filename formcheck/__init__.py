"""
formcheck: rule-based form validation.

The public surface is the six atomic validators and ``validate_form``::

    from formcheck import validate_form

    errors = validate_form(
        {"email": "not-an-email"},
        {"email": [{"type": "required"}, {"type": "email"}]},
    )
    # {"email": "Invalid email format"}
"""

from .shared.validation import (
    is_valid_email,
    is_valid_phone,
    is_valid_password,
    is_not_empty,
    is_valid_id_card,
    is_valid_username,
    validate_form,
    FormValidator,
    FormValidationResult,
    RuleKind,
    RequiredRule,
    EmailRule,
    PhoneRule,
    PasswordRule,
    IdCardRule,
    UsernameRule,
    MinLengthRule,
    MaxLengthRule,
    CustomRule,
    get_form,
    available_forms
)
from .shared.exceptions import (
    FormcheckError,
    RuleDefinitionError,
    RuleSetLoadError,
    FormNotFoundError,
    ConfigurationError
)

__version__ = "1.0.0"

__all__ = [
    'is_valid_email',
    'is_valid_phone',
    'is_valid_password',
    'is_not_empty',
    'is_valid_id_card',
    'is_valid_username',
    'validate_form',
    'FormValidator',
    'FormValidationResult',
    'RuleKind',
    'RequiredRule',
    'EmailRule',
    'PhoneRule',
    'PasswordRule',
    'IdCardRule',
    'UsernameRule',
    'MinLengthRule',
    'MaxLengthRule',
    'CustomRule',
    'get_form',
    'available_forms',
    'FormcheckError',
    'RuleDefinitionError',
    'RuleSetLoadError',
    'FormNotFoundError',
    'ConfigurationError'
]
