"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes. All
managers are request-scoped and share the request's DB session.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.database import get_db
from utils import authorization
from utils import brontoboard_manager
from utils import brontoboard_queries
from utils import entity_store
from utils import ownership
from utils import sessioning
from utils import user_manager

# A missing header must reach the handler so it is reported as SessionInvalid
security = HTTPBearer(auto_error=False)


def get_session_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Extract the session token from the Authorization header, if any."""
    if credentials is None:
        return None
    return credentials.credentials


def get_entity_store(db: Session = Depends(get_db)) -> entity_store.EntityStore:
    """Get EntityStore instance with request-scoped DB session."""
    return entity_store.EntityStore(db)


def get_session_token_manager(
    db: Session = Depends(get_db),
) -> sessioning.SessionTokenManager:
    """Get SessionTokenManager instance with request-scoped DB session."""
    return sessioning.SessionTokenManager(db)


def get_user_manager(db: Session = Depends(get_db)) -> user_manager.UserManager:
    """Get UserManager instance with request-scoped DB session."""
    return user_manager.UserManager(db)


def get_authorization_gate(
    store: entity_store.EntityStore = Depends(get_entity_store),
    sessions: sessioning.SessionTokenManager = Depends(get_session_token_manager),
) -> authorization.AuthorizationGate:
    """Get AuthorizationGate wired to the request's store and sessions."""
    return authorization.AuthorizationGate(sessions, ownership.OwnershipResolver(store))


def get_brontoboard_manager(
    store: entity_store.EntityStore = Depends(get_entity_store),
    gate: authorization.AuthorizationGate = Depends(get_authorization_gate),
) -> brontoboard_manager.BrontoBoardManager:
    """Get BrontoBoardManager instance for the request."""
    return brontoboard_manager.BrontoBoardManager(store, gate)


def get_brontoboard_queries(
    store: entity_store.EntityStore = Depends(get_entity_store),
    gate: authorization.AuthorizationGate = Depends(get_authorization_gate),
) -> brontoboard_queries.BrontoBoardQueries:
    """Get BrontoBoardQueries instance for the request."""
    return brontoboard_queries.BrontoBoardQueries(store, gate)


# Type aliases for dependency injection
SessionTokenDep = Annotated[Optional[str], Depends(get_session_token)]
SessionTokenManagerDep = Annotated[
    sessioning.SessionTokenManager, Depends(get_session_token_manager)
]
UserManagerDep = Annotated[
    user_manager.UserManager, Depends(get_user_manager)
]
AuthorizationGateDep = Annotated[
    authorization.AuthorizationGate, Depends(get_authorization_gate)
]
BrontoBoardManagerDep = Annotated[
    brontoboard_manager.BrontoBoardManager, Depends(get_brontoboard_manager)
]
BrontoBoardQueriesDep = Annotated[
    brontoboard_queries.BrontoBoardQueries, Depends(get_brontoboard_queries)
]
