"""
Built-in form rule sets.

These are the forms of the booking and wallet client: sign-in,
registration, personal details, password recovery, wallet PIN entry
and deposits. FormRegistry combines them with forms loaded from YAML.
"""

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..exceptions.errors import FormNotFoundError
from .validation_engine import FormValidator
from .validation_rules import RuleSet
from .rule_loader import RuleLike, rule_set_from_dict

logger = logging.getLogger(__name__)

PIN_PATTERN = re.compile(r"[0-9]{6}")
MIN_DEPOSIT_AMOUNT = 10000


def is_six_digit_pin(value: Any, record: Mapping[str, Any]) -> bool:
    """Wallet PINs are exactly six digits."""
    return PIN_PATTERN.fullmatch(str(value)) is not None


def is_valid_deposit_amount(value: Any, record: Mapping[str, Any]) -> bool:
    """Deposits are finite numbers of at least MIN_DEPOSIT_AMOUNT."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(amount) and amount >= MIN_DEPOSIT_AMOUNT


BUILTIN_FORMS: Dict[str, Dict[str, List[Dict[str, Any]]]] = {
    "login": {
        "emailOrUsername": [
            {"type": "required", "message": "Please enter your email or username"},
        ],
        "password": [
            {"type": "required", "message": "Please enter your password"},
            {"type": "password"},
        ],
    },
    "register": {
        "fullName": [
            {"type": "required", "message": "Full Name is required"},
        ],
        "identityCard": [
            {"type": "required", "message": "Identity Card number is required"},
            {"type": "idCard"},
        ],
        "email": [
            {"type": "required", "message": "Email is required"},
            {"type": "email", "message": "Email format is invalid"},
        ],
        "phoneNumber": [
            {"type": "required", "message": "Phone Number is required"},
            {"type": "phone", "message": "Phone number format is invalid"},
        ],
        "homeAddress": [
            {"type": "required", "message": "Home Address is required"},
        ],
        "username": [
            {"type": "required", "message": "Username is required"},
            {"type": "username"},
        ],
        "password": [
            {"type": "required", "message": "Password is required"},
            {"type": "password"},
        ],
    },
    "personal_info": {
        "fullName": [
            {"type": "required", "message": "Full Name is required"},
        ],
        "identityCard": [
            {"type": "required", "message": "Identity Card is required"},
            {"type": "idCard"},
        ],
        "gender": [
            {"type": "required", "message": "Gender selection is required"},
        ],
        "email": [
            {"type": "required", "message": "Email is required"},
            {"type": "email", "message": "Email format is invalid"},
        ],
        "phoneNumber": [
            {"type": "phone", "message": "Phone Number format is invalid"},
        ],
    },
    "forgot_password": {
        "email": [
            {"type": "required", "message": "Please enter your email"},
            {"type": "email", "message": "Please enter a valid email"},
        ],
    },
    "wallet_pin": {
        "pin": [
            {"type": "required", "message": "Please enter your PIN"},
            {
                "type": "custom",
                "validator": is_six_digit_pin,
                "message": "PIN must be exactly 6 digits",
            },
        ],
    },
    "deposit": {
        "amount": [
            {"type": "required", "message": "Please enter an amount"},
            {
                "type": "custom",
                "validator": is_valid_deposit_amount,
                "message": "Minimum deposit is 10,000 VND",
            },
        ],
    },
}


def available_forms() -> List[str]:
    """Names of the built-in forms."""
    return list(BUILTIN_FORMS)


def get_form(name: str) -> RuleSet:
    """
    Build a fresh rule set for a built-in form.

    Raises:
        FormNotFoundError: If no built-in form has that name
    """
    if name not in BUILTIN_FORMS:
        raise FormNotFoundError(name)
    return rule_set_from_dict(BUILTIN_FORMS[name])


class FormRegistry:
    """
    Registry of named rule sets.

    Starts with the built-in forms unless told otherwise; forms
    registered later replace a built-in of the same name.
    """

    def __init__(
        self,
        forms: Optional[Mapping[str, Mapping[str, Iterable[RuleLike]]]] = None,
        include_builtin: bool = True
    ):
        """
        Initialize the registry.

        Args:
            forms: Optional extra rule sets by form name
            include_builtin: Whether to register the built-in forms
        """
        self._forms: Dict[str, RuleSet] = {}
        if include_builtin:
            for name in BUILTIN_FORMS:
                self._forms[name] = get_form(name)
        for name, rule_set in (forms or {}).items():
            self.register(name, rule_set)

    def register(self, name: str, rule_set: Mapping[str, Iterable[RuleLike]]) -> None:
        """
        Register a rule set under a name.

        Args:
            name: Form name
            rule_set: Rules by field name, as rule objects or descriptors
        """
        if name in self._forms:
            logger.info("Overriding form %s", name)
        self._forms[name] = rule_set_from_dict(rule_set)

    def get(self, name: str) -> RuleSet:
        """
        Get a copy of a registered rule set.

        Raises:
            FormNotFoundError: If the form is not registered
        """
        try:
            rule_set = self._forms[name]
        except KeyError:
            raise FormNotFoundError(name) from None
        return {field: list(rules) for field, rules in rule_set.items()}

    def validator(self, name: str) -> FormValidator:
        """Create a FormValidator for a registered form."""
        return FormValidator(self.get(name), name=name)

    def names(self) -> List[str]:
        """Registered form names, in registration order."""
        return list(self._forms)

    def __contains__(self, name: object) -> bool:
        return name in self._forms
