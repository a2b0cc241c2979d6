"""
auth/tokens.py -- Password hashing and JWT utilities.

Security design decisions:
  JWT: python-jose with HS256. Tokens are signed with SECRET_KEY and carry
       the user's id, name, email, and a one-hour expiry. Verification
       returns None on any failure -- the bearer dependency turns that into
       a 401.

  Passwords: bcrypt with a fresh salt per hash. The _DUMMY_HASH constant
       enables timing equalization in auth.service.login_user() so response
       time does not reveal whether an email is registered.

  SECRET_KEY: sourced from core.config.get_settings(). Settings refuses to
       start in production without one; create_access_token() still checks
       at the point of use and raises ConfigurationError if it is empty.

Layer rule: no imports from api/ or customers/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from core.config import get_settings
from core.errors import ConfigurationError

logger = logging.getLogger("customerprofile.auth")

# ---------------------------------------------------------------------------
# Config -- read once at module load via the lru_cache singleton
# ---------------------------------------------------------------------------

_settings = get_settings()

_ALGORITHM = "HS256"
_BCRYPT_MAX_BYTES = 72

# ---------------------------------------------------------------------------
# Password hashing (bcrypt -- direct usage, no passlib wrapper)
# ---------------------------------------------------------------------------


def _secret_bytes(plain: str) -> bytes:
    # bcrypt only reads the first 72 bytes; bcrypt>=5 raises instead of truncating.
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    """Return a bcrypt hash of the given plaintext password."""
    return bcrypt.hashpw(_secret_bytes(plain), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext password matches the bcrypt hash."""
    try:
        return bcrypt.checkpw(_secret_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # Malformed or non-bcrypt hash in the database.
        return False


# Computed once at module load so the first login attempt is not measurably
# slower than subsequent ones.
_DUMMY_HASH: str = hash_password("customerprofile_timing_dummy")


def burn_verify(plain: str) -> None:
    """Run a full bcrypt verification whose result is discarded.

    Called when no stored hash exists so the unknown-email path costs the
    same as the wrong-password path.
    """
    verify_password(plain, _DUMMY_HASH)


# ---------------------------------------------------------------------------
# JWT encode / decode
# ---------------------------------------------------------------------------


def create_access_token(user_id: int, name: str, email: str, expire_seconds: int = 0) -> str:
    """Encode a signed JWT carrying the user's identity claims.

    Args:
        user_id:        Numeric user ID stored in the DB.
        name:           Display name.
        email:          Login email; also the subject claim.
        expire_seconds: Token lifetime. If 0 (default), uses
                        Settings.token_expire_seconds (one hour).

    Raises:
        ConfigurationError: the signing secret is empty.
    """
    secret = _settings.secret_key
    if not secret:
        logger.error("Token requested but SECRET_KEY is not configured")
        raise ConfigurationError("Token signing secret is not configured.")

    duration = expire_seconds if expire_seconds > 0 else _settings.token_expire_seconds
    issued = datetime.now(timezone.utc)
    payload = {
        "sub": email,
        "id": user_id,
        "name": name,
        "email": email,
        "iat": issued,
        "exp": issued + timedelta(seconds=duration),
    }
    return jwt.encode(payload, secret, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Decode and verify a JWT. Returns the payload dict or None on any failure.

    Signature and expiry are both checked; there is no leeway on expiry.
    Returning None keeps the caller simple: any invalid token is treated as
    unauthenticated.
    """
    if not _settings.secret_key:
        return None
    try:
        payload = jwt.decode(token, _settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError:
        return None
    if "id" not in payload or "email" not in payload:
        return None
    return payload
