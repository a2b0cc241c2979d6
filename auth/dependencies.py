"""
auth/dependencies.py -- FastAPI Depends() helper for bearer-token authentication.

The customer routes require an "Authorization: Bearer <token>" header carrying
a JWT issued by POST /auth/loginUser. Verification is signature + expiry only;
the claims themselves are trusted and no database lookup is made.

try_get_identity() is the soft variant (returns None on failure).
get_current_identity() wraps it and raises HTTP 401 if unauthenticated.

Layer rule: no imports from customers/. auth/dependencies.py may import from
fastapi because it is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from auth.models import Identity
from auth.tokens import decode_access_token


def try_get_identity(request: Request) -> Identity | None:
    """Return the Identity from a valid bearer token, or None. Never raises."""
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None

    payload = decode_access_token(token.strip())
    if payload is None:
        return None
    try:
        return Identity(id=int(payload["id"]), name=str(payload.get("name", "")), email=str(payload["email"]))
    except (TypeError, ValueError):
        return None


def get_current_identity(request: Request) -> Identity:
    """Require a valid bearer token. Raises HTTP 401 otherwise.

    Use as a FastAPI dependency:
        @router.get("/protected")
        def route(identity: Identity = Depends(get_current_identity)): ...
    """
    identity = try_get_identity(request)
    if identity is None:
        raise HTTPException(
            status_code=401,
            detail={"code": "unauthorized", "message": "Authentication required."},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity
