"""
api/routes/auth.py -- Registration and login endpoints.

Routes:
  POST /auth/registerUser  -- create an account; 200 {message}
  POST /auth/loginUser     -- check credentials; 200 {token}

Both routes are public. Failure mapping:
  registerUser: 400 validation or duplicate email, 500 other
  loginUser:    401 for any validation or credential failure, 500 other

Security:
  Unknown email and wrong password produce the same 401 body; see
  auth.service.login_user() for the timing side.
  Cache-Control: no-store on login responses so tokens are not cached.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.errors import raise_for_failure
from api.models import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from auth.service import login_user, register_user
from auth.store import UserStore
from auth.tokens import create_access_token

router = APIRouter()


@router.post("/auth/registerUser", response_model=MessageResponse)
def register(request: Request, body: Optional[RegisterRequest] = Body(default=None)) -> MessageResponse:
    """Register a new user. The password is stored as a bcrypt hash only."""
    user_store: UserStore = request.app.state.user_store
    candidate = body.to_domain() if body is not None else None
    raise_for_failure(register_user(user_store, candidate))
    return MessageResponse(message="User registered successfully")


@router.post("/auth/loginUser", response_model=TokenResponse)
def login(request: Request, body: Optional[LoginRequest] = Body(default=None)) -> JSONResponse:
    """Authenticate with email and password; return a one-hour bearer token."""
    user_store: UserStore = request.app.state.user_store
    email = body.email if body is not None else None
    password = body.password if body is not None else None

    result = raise_for_failure(
        login_user(user_store, email, password),
        validation_status=401,
        validation_code="bad_credentials",
    )
    user = result.value
    token = create_access_token(user.id, user.name, user.email)
    resp = JSONResponse(status_code=200, content=TokenResponse(token=token).model_dump())
    resp.headers["Cache-Control"] = "no-store"
    return resp
