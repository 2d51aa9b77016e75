"""
Rule-based form validation.

Atomic validators, rule classes, the validation engine and the
built-in form catalogue.
"""

from .validators import (
    is_valid_email,
    is_valid_phone,
    is_valid_password,
    is_not_empty,
    is_valid_id_card,
    is_valid_username
)
from .validator_interface import (
    RuleKind,
    ErrorReport,
    FormValidationResult,
    DEFAULT_MESSAGES
)
from .validation_rules import (
    ValidationRule,
    RequiredRule,
    EmailRule,
    PhoneRule,
    PasswordRule,
    IdCardRule,
    UsernameRule,
    LengthRule,
    MinLengthRule,
    MaxLengthRule,
    CustomRule,
    RuleSet
)
from .rule_loader import (
    rule_from_descriptor,
    rule_set_from_dict,
    load_rule_set,
    load_forms
)
from .validation_engine import validate_form, FormValidator
from .forms import FormRegistry, available_forms, get_form

__all__ = [
    'is_valid_email',
    'is_valid_phone',
    'is_valid_password',
    'is_not_empty',
    'is_valid_id_card',
    'is_valid_username',
    'RuleKind',
    'ErrorReport',
    'FormValidationResult',
    'DEFAULT_MESSAGES',
    'ValidationRule',
    'RequiredRule',
    'EmailRule',
    'PhoneRule',
    'PasswordRule',
    'IdCardRule',
    'UsernameRule',
    'LengthRule',
    'MinLengthRule',
    'MaxLengthRule',
    'CustomRule',
    'RuleSet',
    'rule_from_descriptor',
    'rule_set_from_dict',
    'load_rule_set',
    'load_forms',
    'validate_form',
    'FormValidator',
    'FormRegistry',
    'available_forms',
    'get_form'
]
