"""
Field-level validation for user request payloads.

Each validate_* function returns every violation message for its payload,
in field order. ensure_valid turns a non-empty list into a ValidationError.
"""

import re
from typing import List, Optional
from email_validator import EmailNotValidError, validate_email
from accounts.core.exceptions import ValidationError
from accounts.schemas.user import UserPassword, UserRegistration, UserUpdate

NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_PATTERN = re.compile(r"[a-zA-Z0-9]{8,}")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def check_name(name: Optional[str]) -> List[str]:
    violations = []
    if _is_blank(name):
        violations.append("Name is mandatory")
    if name is not None and len(name) > NAME_MAX_LENGTH:
        violations.append(f"Name must not exceed {NAME_MAX_LENGTH} characters")
    return violations


def check_email(email: Optional[str]) -> List[str]:
    """An empty string is only "mandatory"; any other invalid value also fails syntax"""
    violations = []
    if _is_blank(email):
        violations.append("Email is mandatory")
    if email and not is_valid_email(email):
        violations.append("Email should be valid")
    return violations


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_password(value: Optional[str], label: str = "Password") -> List[str]:
    """
    Passwords must be present, at least 8 characters and ASCII letters or
    digits only. A blank value still gets the length and pattern messages.
    """
    violations = []
    if _is_blank(value):
        violations.append(f"{label} is mandatory")
    if value is not None:
        if len(value) < PASSWORD_MIN_LENGTH:
            violations.append(f"{label} must be at least {PASSWORD_MIN_LENGTH} characters")
        if not PASSWORD_PATTERN.fullmatch(value):
            violations.append(
                f"{label} must contain at least {PASSWORD_MIN_LENGTH} characters "
                f"and only alphabets and numbers"
            )
    return violations


def validate_registration(payload: UserRegistration) -> List[str]:
    return check_name(payload.name) + check_email(payload.email) + check_password(payload.password)


def validate_update(payload: UserUpdate) -> List[str]:
    """Only present fields are checked; an empty update is valid"""
    violations = []
    if payload.name is not None:
        violations += check_name(payload.name)
    if payload.email is not None and not is_valid_email(payload.email):
        violations.append("Email should be valid")
    return violations


def validate_password_change(payload: UserPassword) -> List[str]:
    return (
        check_password(payload.password)
        + check_password(payload.confirm_password, "Confirm Password")
    )


def ensure_valid(violations: List[str]) -> None:
    if violations:
        raise ValidationError.from_violations(violations)
