"""
Validation rules for form fields.

Each rule kind is its own class, so parameters such as a length bound
or a custom predicate exist only on the rules that use them and are
checked when the rule is built.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..exceptions.errors import RuleDefinitionError
from .validator_interface import RuleKind, default_message
from .validators import (
    is_not_empty,
    is_valid_email,
    is_valid_id_card,
    is_valid_password,
    is_valid_phone,
    is_valid_username
)

CustomValidator = Callable[[Any, Mapping[str, Any]], bool]


class ValidationRule(ABC):
    """
    Base class for validation rules.

    Subclasses set ``kind`` and implement ``validate``.
    """

    kind: RuleKind

    def __init__(self, message: Optional[str] = None):
        """
        Initialize validation rule.

        Args:
            message: Optional message overriding the kind's default
        """
        self.message = message

    @abstractmethod
    def validate(
        self,
        value: Any,
        record: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """
        Validate value.

        Args:
            value: Value to validate
            record: The whole record the value belongs to

        Returns:
            bool: Whether value is valid
        """
        pass

    def default_message(self, field: str) -> str:
        """Default message for this rule on the given field."""
        return default_message(self.kind, field)

    def resolve_message(self, field: str) -> str:
        """Message to report for the given field when this rule fails."""
        return self.message or self.default_message(field)

    def _params(self) -> Tuple[Any, ...]:
        return (self.message,)

    def to_descriptor(self) -> Dict[str, Any]:
        """
        Describe the rule as a plain dict.

        Returns:
            Dict[str, Any]: Descriptor with ``type`` and, when set, ``message``
        """
        descriptor: Dict[str, Any] = {"type": self.kind.value}
        if self.message:
            descriptor["message"] = self.message
        return descriptor

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._params() == other._params()

    def __hash__(self) -> int:
        return hash((type(self), self._params()))

    def __repr__(self) -> str:
        params = ", ".join(repr(p) for p in self._params() if p is not None)
        return f"{type(self).__name__}({params})"


class RequiredRule(ValidationRule):
    """Rule that requires a non-blank value."""

    kind = RuleKind.REQUIRED

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return is_not_empty(value)


class EmailRule(ValidationRule):
    """Rule that checks email address format."""

    kind = RuleKind.EMAIL

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return is_valid_email(value)


class PhoneRule(ValidationRule):
    """Rule that checks a phone number has 10 to 15 digits."""

    kind = RuleKind.PHONE

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return is_valid_phone(value)


class PasswordRule(ValidationRule):
    """Rule that checks password length."""

    kind = RuleKind.PASSWORD

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return is_valid_password(value)


class IdCardRule(ValidationRule):
    """Rule that checks an identity card number has 12 digits."""

    kind = RuleKind.ID_CARD

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return is_valid_id_card(value)


class UsernameRule(ValidationRule):
    """Rule that checks username length."""

    kind = RuleKind.USERNAME

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return is_valid_username(value)


def _length(value: Any) -> int:
    if hasattr(value, "__len__"):
        return len(value)
    return len(str(value))


class LengthRule(ValidationRule):
    """Shared construction for rules with a length bound."""

    def __init__(self, bound: int, message: Optional[str] = None):
        """
        Initialize length rule.

        Args:
            bound: Length bound, a non-negative integer
            message: Optional message overriding the kind's default

        Raises:
            RuleDefinitionError: If the bound is missing or not a
                non-negative integer
        """
        super().__init__(message)
        if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
            raise RuleDefinitionError(
                f"{self.kind.value} rule requires a non-negative integer bound, got {bound!r}",
                kind=self.kind.value
            )
        self.bound = bound

    def default_message(self, field: str) -> str:
        return default_message(self.kind, field, bound=self.bound)

    def _params(self) -> Tuple[Any, ...]:
        return (self.bound, self.message)

    def to_descriptor(self) -> Dict[str, Any]:
        descriptor = super().to_descriptor()
        descriptor["value"] = self.bound
        return descriptor


class MinLengthRule(LengthRule):
    """Rule that requires at least ``bound`` characters."""

    kind = RuleKind.MIN_LENGTH

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return _length(value) >= self.bound


class MaxLengthRule(LengthRule):
    """Rule that allows at most ``bound`` characters."""

    kind = RuleKind.MAX_LENGTH

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return _length(value) <= self.bound


class CustomRule(ValidationRule):
    """
    Rule that uses a caller-supplied predicate.

    The predicate receives the field value and the whole record, so it
    can express cross-field checks such as password confirmation.
    Exceptions raised by the predicate propagate to the caller.
    """

    kind = RuleKind.CUSTOM

    def __init__(self, validator: CustomValidator, message: Optional[str] = None):
        """
        Initialize custom rule.

        Args:
            validator: Predicate over (value, record)
            message: Optional message overriding the kind's default

        Raises:
            RuleDefinitionError: If validator is not callable
        """
        super().__init__(message)
        if not callable(validator):
            raise RuleDefinitionError(
                "custom rule requires a callable validator",
                kind=self.kind.value
            )
        self.validator = validator

    def validate(self, value: Any, record: Optional[Mapping[str, Any]] = None) -> bool:
        return bool(self.validator(value, record if record is not None else {}))

    def _params(self) -> Tuple[Any, ...]:
        return (self.validator, self.message)

    def to_descriptor(self) -> Dict[str, Any]:
        descriptor = super().to_descriptor()
        descriptor["validator"] = self.validator
        return descriptor


RULE_CLASSES: Dict[RuleKind, type] = {
    RuleKind.REQUIRED: RequiredRule,
    RuleKind.EMAIL: EmailRule,
    RuleKind.PHONE: PhoneRule,
    RuleKind.PASSWORD: PasswordRule,
    RuleKind.ID_CARD: IdCardRule,
    RuleKind.USERNAME: UsernameRule,
    RuleKind.MIN_LENGTH: MinLengthRule,
    RuleKind.MAX_LENGTH: MaxLengthRule,
    RuleKind.CUSTOM: CustomRule,
}

RuleSet = Dict[str, List[ValidationRule]]
"""Mapping of field name to the ordered rules applied to it."""
