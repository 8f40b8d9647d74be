"""Sanitization and validation rules for user registration input.

`find_violations` evaluates every rule and returns the failures instead of
raising, so callers decide how to report them. Rules that need storage
(availability of a username or email) receive an `is_available` callable and
only consult it once the value is syntactically valid.

Registration input is a plain mapping with the keys ``username``, ``email``,
``password`` and ``confirmation``; any of them may be missing.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .model import FieldViolation

__all__ = [
    "AVAILABILITY_FIELDS",
    "USERNAME_MIN_LENGTH",
    "USERNAME_MAX_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "Messages",
    "sanitize",
    "find_violations",
]

# Fields that carry a uniqueness constraint and are case-folded on the way in.
AVAILABILITY_FIELDS = frozenset({"username", "email"})

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 6

WHITESPACE_PATTERN = re.compile(r"\s")

AvailabilityCheck = Callable[[str, str], bool]


class Messages:  # pylint: disable=too-few-public-methods
    """User-facing validation messages."""

    USERNAME_REQUIRED = "Username is required"
    USERNAME_LENGTH = (
        f"Must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} "
        "characters long"
    )
    USERNAME_SPACES = "Must not contain spaces"
    USERNAME_TAKEN = "Username is already taken"
    PASSWORD_REQUIRED = "Password is required"
    PASSWORD_LENGTH = f"Must be at least {PASSWORD_MIN_LENGTH} characters long"
    CONFIRMATION_REQUIRED = "Password confirmation is required"
    CONFIRMATION_MISMATCH = "Passwords not match"
    EMAIL_REQUIRED = "Email is required"
    EMAIL_INVALID = "Invalid email"
    EMAIL_TAKEN = "Email is already taken"


def sanitize(props: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of `props` with ``username`` and ``email`` lowercased.

    Other keys are copied as-is and absent keys stay absent. Non-string
    values are left alone so that validation can report them.
    """
    sanitized = dict(props)
    for field in AVAILABILITY_FIELDS:
        value = sanitized.get(field)
        if isinstance(value, str):
            sanitized[field] = value.lower()
    return sanitized


def _text(value: Any) -> str | None:
    # None and "" both count as "not provided"; numbers are read as their digits
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def _username_violations(
    username: str | None, is_available: AvailabilityCheck
) -> list[FieldViolation]:
    if username is None:
        return [FieldViolation("username", Messages.USERNAME_REQUIRED)]

    violations = []
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        violations.append(FieldViolation("username", Messages.USERNAME_LENGTH))
    if WHITESPACE_PATTERN.search(username):
        violations.append(FieldViolation("username", Messages.USERNAME_SPACES))
    if not violations and not is_available("username", username):
        violations.append(FieldViolation("username", Messages.USERNAME_TAKEN))
    return violations


def _password_violations(password: str | None) -> list[FieldViolation]:
    if password is None:
        return [FieldViolation("password", Messages.PASSWORD_REQUIRED)]
    if len(password) < PASSWORD_MIN_LENGTH:
        return [FieldViolation("password", Messages.PASSWORD_LENGTH)]
    return []


def _confirmation_violations(
    confirmation: str | None, password: str | None
) -> list[FieldViolation]:
    if confirmation is None:
        return [FieldViolation("confirmation", Messages.CONFIRMATION_REQUIRED)]
    if confirmation != password:
        return [FieldViolation("confirmation", Messages.CONFIRMATION_MISMATCH)]
    return []


def _email_violations(
    email: str | None, is_available: AvailabilityCheck
) -> list[FieldViolation]:
    if email is None:
        return [FieldViolation("email", Messages.EMAIL_REQUIRED)]
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return [FieldViolation("email", Messages.EMAIL_INVALID)]
    if not is_available("email", email):
        return [FieldViolation("email", Messages.EMAIL_TAKEN)]
    return []


def find_violations(
    props: Mapping[str, Any], is_available: AvailabilityCheck
) -> list[FieldViolation]:
    """Evaluate every registration rule against `props`.

    Args:
        props: Registration input (expected to be sanitized already).
        is_available: ``is_available(field, value)`` answers whether a
            username/email is still free. Only called for values that pass
            their syntactic rules.

    Returns:
        list[FieldViolation]: One entry per failed rule, ordered username,
            password, confirmation, email. Empty when the input is valid.
    """
    password = _text(props.get("password"))
    return [
        *_username_violations(_text(props.get("username")), is_available),
        *_password_violations(password),
        *_confirmation_violations(_text(props.get("confirmation")), password),
        *_email_violations(_text(props.get("email")), is_available),
    ]
