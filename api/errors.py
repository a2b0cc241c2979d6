"""
api/errors.py -- Map service result variants onto HTTP errors.

Route handlers call raise_for_failure() on every service result. Ok passes
through; each failure variant becomes an HTTPException whose detail is the
{"code", "message"} dict the app-level handler wraps in the error envelope.
"""

from __future__ import annotations

from fastapi import HTTPException

from core.results import DuplicateKey, NotFound, Ok, Result, ValidationFailed


def raise_for_failure(result: Result, *, validation_status: int = 400, validation_code: str = "validation_error") -> Ok:
    """Return result unchanged if it is Ok, otherwise raise the matching HTTPException.

    validation_status / validation_code let the login route answer 401
    bad_credentials where other routes answer 400 validation_error.
    """
    if isinstance(result, Ok):
        return result
    if isinstance(result, ValidationFailed):
        status, code = validation_status, validation_code
    elif isinstance(result, DuplicateKey):
        status, code = 400, "conflict"
    elif isinstance(result, NotFound):
        status, code = 404, "not_found"
    else:
        raise TypeError(f"Unknown service result: {result!r}")
    raise HTTPException(status_code=status, detail={"code": code, "message": result.message})
