"""
Atomic field validators.

Each validator is a total predicate over a single field value: invalid
input, including None, yields False and never raises.
"""

import re
from typing import Any

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NON_DIGITS = re.compile(r"[^0-9]")

PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15
ID_CARD_DIGITS = 12
PASSWORD_MIN_LENGTH = 6
USERNAME_MIN_LENGTH = 4


def _count_digits(value: Any) -> int:
    return len(NON_DIGITS.sub("", str(value)))


def is_valid_email(value: Any) -> bool:
    """
    Check that a value has the shape ``local@domain.tld``.

    Syntactic only: no DNS or mailbox verification.

    Args:
        value: Value to check

    Returns:
        bool: Whether the value looks like an email address
    """
    if value is None:
        return False
    return EMAIL_PATTERN.fullmatch(str(value)) is not None


def is_valid_phone(value: Any) -> bool:
    """
    Check that a value holds 10 to 15 digits.

    Every non-digit character (spaces, dashes, a leading ``+``, letters)
    is ignored before counting.
    """
    if value is None:
        return False
    return PHONE_MIN_DIGITS <= _count_digits(value) <= PHONE_MAX_DIGITS


def is_valid_password(value: Any) -> bool:
    """Check that a password is at least 6 characters long."""
    if not value:
        return False
    return len(str(value)) >= PASSWORD_MIN_LENGTH


def is_not_empty(value: Any) -> bool:
    """Check that a value has content other than whitespace."""
    if not value:
        return False
    return len(str(value).strip()) > 0


def is_valid_id_card(value: Any) -> bool:
    """Check that an identity card number holds exactly 12 digits."""
    if value is None:
        return False
    return _count_digits(value) == ID_CARD_DIGITS


def is_valid_username(value: Any) -> bool:
    """Check that a username is at least 4 characters long."""
    if not value:
        return False
    return len(str(value)) >= USERNAME_MIN_LENGTH
