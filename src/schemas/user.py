"""User and authentication schema definitions."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    username: str
    password: str


class LoginRequest(BaseModel):
    username: str
    password: str


class SessionInfo(BaseModel):
    """Returned by register and login."""
    user: str
    session: str
