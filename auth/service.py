"""
auth/service.py -- Registration and login use cases.

Both functions return result variants from core/results.py instead of raising
for expected outcomes. ApplicationError from the store still propagates.

Login returns the same "Invalid credentials." message for an unknown email
and a wrong password, and runs bcrypt on both paths, so neither the message
nor the response time reveals which one it was.

Passwords are never logged. Emails are, as the audit context for each outcome.
"""

from __future__ import annotations

import logging

from auth.models import Registration, User
from auth.store import UserStore
from auth.tokens import burn_verify, hash_password, verify_password
from core.errors import ApplicationError, DuplicateKeyError
from core.results import DuplicateKey, Ok, Result, ValidationFailed
from core.validation import user_violation

logger = logging.getLogger("customerprofile.auth")

INVALID_CREDENTIALS = "Invalid credentials."


def register_user(store: UserStore, candidate: Registration | None) -> Result:
    """Validate, hash, and insert a new user.

    Returns Ok(None), ValidationFailed, or DuplicateKey("Email already exists.").
    """
    message = user_violation(candidate)
    if message is not None:
        logger.warning(
            "Validation failed while registering user. Email: %s (%s)",
            getattr(candidate, "email", None),
            message,
        )
        return ValidationFailed(message)

    hashed = hash_password(candidate.password)
    try:
        rows = store.insert_user(candidate.name, candidate.email, hashed)
    except DuplicateKeyError:
        logger.warning("Duplicate email detected during registration. Email: %s", candidate.email)
        return DuplicateKey("Email already exists.")

    if rows <= 0:
        logger.error("User registration failed. No rows affected. Email: %s", candidate.email)
        raise ApplicationError("User registration failed.")

    logger.info("User registered successfully. Email: %s", candidate.email)
    return Ok(None)


def login_user(store: UserStore, email: str | None, password: str | None) -> Result:
    """Check credentials. Returns Ok(User) or ValidationFailed."""
    if not email or not email.strip() or not password or not password.strip():
        logger.warning("Login rejected. Email or password missing.")
        return ValidationFailed("Email and password are required.")

    user: User | None = store.find_by_email(email)
    if user is None:
        burn_verify(password)
        logger.warning("Login failed. User not found. Email: %s", email)
        return ValidationFailed(INVALID_CREDENTIALS)

    if not verify_password(password, user.hashed_password):
        logger.warning("Login failed. Invalid password. Email: %s", email)
        return ValidationFailed(INVALID_CREDENTIALS)

    logger.info("User logged in successfully. Email: %s", email)
    return Ok(user)
