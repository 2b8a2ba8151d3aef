"""
FastAPI application factory and error mapping.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from session_gate import __version__
from session_gate.adapters import (
    BcryptPasswordHasher,
    JWTTokenAdapter,
    MemoryUserStore,
    RedisUserStore,
)
from session_gate.api.routes import router
from session_gate.boundary import SessionBoundary
from session_gate.config import Settings, get_settings
from session_gate.errors import AuthError, Unauthorized

logger = logging.getLogger(__name__)


def build_boundary(settings: Settings) -> SessionBoundary:
    """Wire the session boundary from settings."""
    if settings.redis_url:
        logger.info("Using Redis user store")
        users = RedisUserStore(redis_url=settings.redis_url, prefix=settings.redis_prefix)
    else:
        logger.info("Using in-memory user store")
        users = MemoryUserStore()

    return SessionBoundary(
        users=users,
        tokens=JWTTokenAdapter(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
            expires_in=settings.token_expiry_seconds,
        ),
        passwords=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
    )


async def _auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(
        status_code=exc.status_code or 500,
        content={"message": exc.message},
        headers=headers,
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        if first.get("type") == "json_invalid":
            message = "Invalid JSON body"
        elif first.get("type") == "missing" and field:
            message = f"Missing required field: {field}"
        elif field:
            message = f"Invalid field: {field}"
    return JSONResponse(status_code=400, content={"message": message})


def create_app(
    settings: Optional[Settings] = None,
    boundary: Optional[SessionBoundary] = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Session Gate",
        version=__version__,
        description="Username/password login with bearer tokens.",
    )
    app.state.settings = settings
    app.state.boundary = boundary or build_boundary(settings)

    # CORS: only the configured frontend may call us from a browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
    )

    app.add_exception_handler(AuthError, _auth_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(router)
    return app
