"""Field rules shared by Player and User payloads."""
from __future__ import annotations

from typing import Any, Mapping

import email_validator
from email_validator import EmailNotValidError, validate_email

from roster.core.errors import ValidationFailedError

MAX_LENGTH = 255

NAME_BLANK = "Name cannot be blank"
SURNAME_BLANK = "Surname cannot be blank"
EMAIL_INVALID = "Email should be valid"

# Addresses are checked for syntax only, so reserved hosts such as
# "localhost" or "x.local" are accepted.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str) or not value or len(value) > MAX_LENGTH:
        return False
    try:
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def validate_person(payload: Mapping[str, Any]) -> dict[str, str]:
    """
    Check name/surname/email and return a field -> message mapping.

    An empty mapping means the payload is valid. All violations are
    collected, none short-circuits the others.
    """
    errors: dict[str, str] = {}
    for field, blank_message in (("name", NAME_BLANK), ("surname", SURNAME_BLANK)):
        value = payload.get(field)
        if is_blank(value):
            errors[field] = blank_message
        elif len(value) > MAX_LENGTH:
            errors[field] = f"{field.capitalize()} must be at most {MAX_LENGTH} characters"
    if not is_valid_email(payload.get("email")):
        errors["email"] = EMAIL_INVALID
    return errors


def require_valid(payload: Mapping[str, Any]) -> None:
    """Raise ValidationFailedError carrying every violation found."""
    errors = validate_person(payload)
    if errors:
        raise ValidationFailedError(errors)
