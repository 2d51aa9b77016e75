"""
Core types shared by the validation modules.

This module defines the rule kinds, their default messages, the error
report type and the result wrapper returned by FormValidator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


ErrorReport = Dict[str, str]
"""Mapping of field name to the single message reported for it."""


class RuleKind(Enum):
    """Kinds of rule understood by the validation engine."""
    REQUIRED = "required"
    EMAIL = "email"
    PHONE = "phone"
    PASSWORD = "password"
    ID_CARD = "idCard"
    USERNAME = "username"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    CUSTOM = "custom"


DEFAULT_MESSAGES: Dict[RuleKind, str] = {
    RuleKind.REQUIRED: "{field} is required",
    RuleKind.EMAIL: "Invalid email format",
    RuleKind.PHONE: "Invalid phone number format",
    RuleKind.PASSWORD: "Password must be at least 6 characters",
    RuleKind.ID_CARD: "Identity Card must be 12 characters",
    RuleKind.USERNAME: "Username must be at least 4 characters",
    RuleKind.MIN_LENGTH: "Minimum length is {bound} characters",
    RuleKind.MAX_LENGTH: "Maximum length is {bound} characters",
    RuleKind.CUSTOM: "Invalid value",
}


def default_message(kind: RuleKind, field: str, bound: Optional[int] = None) -> str:
    """
    Render the default message for a rule kind.

    Args:
        kind: Rule kind
        field: Name of the field being validated
        bound: Length bound for minLength/maxLength rules

    Returns:
        str: Default message
    """
    return DEFAULT_MESSAGES[kind].format(field=field, bound=bound)


@dataclass
class FormValidationResult:
    """
    Result of validating one record.

    ``errors`` holds only the fields that failed; a valid record has an
    empty report.
    """

    errors: ErrorReport = field(default_factory=dict)
    form: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        """Whether no field failed validation."""
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        result: Dict[str, Any] = {
            "is_valid": self.is_valid,
            "errors": dict(self.errors),
        }
        if self.form is not None:
            result["form"] = self.form
        return result
