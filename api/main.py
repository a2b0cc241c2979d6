"""
api/main.py -- FastAPI application entry point for the Customer Profile Service.

Run with:      python main.py serve
               uvicorn asgi:app --reload

Middleware stack (outermost to innermost):
  1. CORSMiddleware -- adds CORS headers for browser clients
  2. log_requests   -- one access-log line per request with latency

Lifespan opens the user and customer stores on startup and disposes their
engines on shutdown.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models import ErrorDetail, ErrorResponse, HealthResponse
from api.routes.auth import router as auth_router
from api.routes.customers import router as customers_router
from auth.store import UserStore
from core.config import APP_NAME, APP_VERSION, get_settings
from core.database import ping
from core.errors import ApplicationError, ConfigurationError
from customers.store import CustomerStore

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("customerprofile.api")

# ---------------------------------------------------------------------------
# Lifespan -- modern startup / shutdown pattern (replaces @app.on_event)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open both stores against DATABASE_URL and close them on shutdown.

    Tables are created on first start if they do not exist.
    """
    settings = get_settings()
    logger.info("%s starting up", APP_NAME)
    app.state.user_store = UserStore(settings.database_url)
    app.state.customer_store = CustomerStore(settings.database_url)
    logger.info("Stores initialized")

    yield

    app.state.customer_store.close()
    app.state.user_store.close()
    logger.info("%s shutdown complete", APP_NAME)


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title=APP_NAME,
    description="User registration, JWT login, and customer profile CRUD.",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=3600,
)


# ---------------------------------------------------------------------------
# Request logging middleware
# ---------------------------------------------------------------------------


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Router registration
# ---------------------------------------------------------------------------

app.include_router(auth_router, tags=["Auth"])
app.include_router(customers_router, tags=["Customers"])


# ---------------------------------------------------------------------------
# Exception handlers
#
# All handlers return the same ErrorResponse envelope so API clients can parse
# errors uniformly without inspecting status codes to choose a schema.
# ---------------------------------------------------------------------------


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorDetail(
                code="internal_error",
                message="An unexpected error occurred.",
            )
        ).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 when the body is not JSON or a field has the wrong type.

    The parser errors echo the submitted values (passwords included), so
    only their locations and types are logged and none reach the client.
    """
    problems = [(err.get("loc"), err.get("type")) for err in exc.errors()]
    logger.warning("Request validation failed on %s %s: %s", request.method, request.url.path, problems)
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=ErrorDetail(
                code="validation_error",
                message="Request validation failed.",
            )
        ).model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Return a structured error for all FastAPI/Starlette HTTP exceptions.

    Route handlers raise HTTPException with a {"code", "message"} dict as
    detail. When detail is already a dict, use it directly as the error field
    rather than stringifying it.
    """
    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=ErrorDetail(
                code=f"http_{exc.status_code}",
                message=str(exc.detail),
            )
        ).model_dump(),
        headers=exc.headers,
    )


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Store or consistency failure. Logged with context; the client gets a generic 500."""
    logger.error("Application error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return _internal_error()


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error on %s %s: %s", request.method, request.url.path, exc)
    return _internal_error()


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected server errors.

    The raw exception is written to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _internal_error()


# ---------------------------------------------------------------------------
# Health endpoint
#
# Defined directly in main.py (not in a router) so it is always reachable
# regardless of router registration state. No authentication.
# ---------------------------------------------------------------------------


@app.get("/health", tags=["Health"])
def health(request: Request) -> HealthResponse:
    """Return liveness, version, and a database ping."""
    db_ok = ping(request.app.state.user_store.engine)
    return HealthResponse(
        version=APP_VERSION,
        components={"app": "ok", "database": "ok" if db_ok else "error"},
    )
