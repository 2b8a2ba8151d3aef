"""
Request / response schemas for the HTTP API.

Only shapes live here; field rules are enforced by the session boundary.
"""

from typing import Any, Dict

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    username: str
    firstname: str
    lastname: str
    password: str


class TokenResponse(BaseModel):
    token: str


class RegisterResponse(BaseModel):
    message: str
    user: Dict[str, Any]


class ProfileResponse(BaseModel):
    user: Dict[str, Any]


class MessageResponse(BaseModel):
    message: str
