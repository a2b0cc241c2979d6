"""
core/validation.py -- Field rules gating every write.

Two rule sets, each evaluated in a fixed order and stopping at the first
violation. The *_violation() functions return that first message, or None.
Services wrap the message in a ValidationFailed result (core/results.py).

Candidates are duck-typed: anything with the named attributes works (the
domain dataclasses, or the request models in api/models.py). A missing or
None attribute counts as blank.

Layer rule: no imports from api/, auth/, or customers/.
"""

from __future__ import annotations

from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

MIN_PASSWORD_LENGTH = 6
MIN_CUSTOMER_NAME_LENGTH = 3
MIN_CONTACT_LENGTH = 10
# Largest id a 64-bit signed INTEGER column can hold.
MAX_RECORD_ID = 2**63 - 1


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def is_valid_email(value: str) -> bool:
    """Syntax-only email check. No DNS lookups.

    Surrounding whitespace is ignored, so " ann@x.com " passes. The stores
    trim the value before writing it.
    """
    candidate = value.strip()
    # email_validator accepts bare addresses only, so "Ann <ann@x.com>" fails here.
    try:
        validate_email(candidate, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def user_violation(candidate: Any) -> Optional[str]:
    """Return the first registration rule the candidate breaks, or None."""
    if candidate is None:
        return "User data is required."
    name = getattr(candidate, "name", None)
    email = getattr(candidate, "email", None)
    password = getattr(candidate, "password", None)

    if _blank(name):
        return "Name is required."
    if _blank(email):
        return "Email is required."
    if not is_valid_email(email):
        return "Invalid email format."
    if _blank(password):
        return "Password is required."
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
    return None


def customer_violation(candidate: Any) -> Optional[str]:
    """Return the first customer rule the candidate breaks, or None.

    Length checks run on the raw value, digit checks on every character:
    "12345 67890" fails the digit rule, not the length rule.
    """
    if candidate is None:
        return "Customer data is required."
    name = getattr(candidate, "name", None)
    contact = getattr(candidate, "contact", None)
    city = getattr(candidate, "city", None)
    email = getattr(candidate, "email", None)

    if _blank(name):
        return "Customer name is required."
    if len(name) < MIN_CUSTOMER_NAME_LENGTH:
        return f"Customer name must be at least {MIN_CUSTOMER_NAME_LENGTH} characters."
    if _blank(contact):
        return "Contact number is required."
    # str.isdigit() also accepts superscripts and other Unicode digits.
    if not all(ch in "0123456789" for ch in contact):
        return "Contact must contain only digits."
    if len(contact) < MIN_CONTACT_LENGTH:
        return f"Contact must be at least {MIN_CONTACT_LENGTH} digits."
    if _blank(city):
        return "City is required."
    if _blank(email):
        return "Email is required."
    if not is_valid_email(email):
        return "Invalid email format."
    return None

