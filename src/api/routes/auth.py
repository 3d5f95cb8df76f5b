"""Authentication routes.

This module handles HTTP endpoints for registration, login and logout. Register
and login both start a session and return its token.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.dependencies import SessionTokenDep, SessionTokenManagerDep, UserManagerDep
from schemas.requesting import RequestResponse
from schemas.user import LoginRequest, RegisterRequest, SessionInfo
from utils.requesting import handle_request, to_json_response

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=RequestResponse, summary="Register a user")
def register(
    req: RegisterRequest,
    user_manager: UserManagerDep,
    sessions: SessionTokenManagerDep,
) -> JSONResponse:
    """Register a new user and log them in.

    Args:
        req: Registration request with username and password.
        user_manager: Injected UserManager instance.
        sessions: Injected SessionTokenManager instance.

    Returns:
        Response whose result is a SessionInfo.
    """

    def register_and_login() -> SessionInfo:
        user_id = user_manager.register(req.username, req.password)
        return SessionInfo(user=user_id, session=sessions.create(user_id))

    # The password is not kept on the pending request
    response = handle_request(
        "/auth/register", register_and_login, {"username": req.username}
    )
    return to_json_response(response)


@router.post("/login", response_model=RequestResponse, summary="Log in")
def login(
    req: LoginRequest,
    user_manager: UserManagerDep,
    sessions: SessionTokenManagerDep,
) -> JSONResponse:
    """Authenticate with username and password and start a session."""

    def authenticate_and_login() -> SessionInfo:
        user_id = user_manager.authenticate(req.username, req.password)
        return SessionInfo(user=user_id, session=sessions.create(user_id))

    response = handle_request(
        "/auth/login", authenticate_and_login, {"username": req.username}
    )
    return to_json_response(response)


@router.post("/logout", response_model=RequestResponse, summary="Log out")
def logout(
    sessions: SessionTokenManagerDep,
    session: SessionTokenDep,
) -> JSONResponse:
    """End the session named in the Authorization header."""
    response = handle_request("/auth/logout", lambda: sessions.delete(session))
    return to_json_response(response)
