"""
Auth API routes - login, register, current user.
"""

import logging

from fastapi import APIRouter, Depends, status

from session_gate.api.dependencies import get_boundary, get_current_user
from session_gate.api.schemas import (
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from session_gate.boundary import SessionBoundary
from session_gate.domain.user import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse},
}


@router.post("/login", response_model=TokenResponse, responses=_ERROR_RESPONSES)
def login(
    req: LoginRequest,
    boundary: SessionBoundary = Depends(get_boundary),
):
    """Exchange username + password for a bearer token."""
    credential = boundary.login(req.username, req.password)
    return credential.to_dict()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_409_CONFLICT: {"model": MessageResponse},
    },
)
def register(
    req: RegisterRequest,
    boundary: SessionBoundary = Depends(get_boundary),
):
    """Register a new user. Does not log them in."""
    user = boundary.register(req.model_dump())
    return {"message": "User registered", "user": user.to_dict()}


@router.get("/user/me", response_model=ProfileResponse, responses=_ERROR_RESPONSES)
def me(user: User = Depends(get_current_user)):
    """Profile of the user the bearer token is bound to."""
    return {"user": user.to_dict()}


@router.get("/health")
def health():
    return {"status": "ok"}
