"""Authorization gate.

Combines the session lookup with ownership resolution. Callers resolve the
user once per request with ``resolve_user`` and pass the result on, or use
``authorize`` to do both steps at once.
"""

import logging
from typing import Optional

from core.entity_kind import EntityKind
from core.exceptions import UnauthorizedError
from utils.ownership import Ownership, OwnershipResolver
from utils.sessioning import SessionTokenManager

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """Decides whether a caller may touch an entity."""

    def __init__(self, sessions: SessionTokenManager, ownership: OwnershipResolver):
        self.sessions = sessions
        self.ownership = ownership

    def resolve_user(self, session: Optional[str]) -> str:
        """Resolve the calling user.

        Raises:
            SessionInvalidError: If the session does not resolve.
        """
        return self.sessions.get_user(session)

    def check_owner(self, user_id: str, kind: EntityKind, entity_id: str) -> Ownership:
        """Require that ``user_id`` owns the given entity.

        Args:
            user_id: The already-resolved caller.
            kind: Kind of the entity being accessed.
            entity_id: ID of the entity being accessed.

        Returns:
            The resolved Ownership, so callers can reuse the loaded entity.

        Raises:
            EntityNotFoundError: If the entity does not exist.
            InternalInconsistencyError: If its parent chain is broken.
            UnauthorizedError: If the caller is not the owner.
        """
        ownership = self.ownership.resolve_owner(kind, entity_id)
        if ownership.owner_id != user_id:
            logger.warning(
                "User %s denied access to %s %s", user_id, kind.label, entity_id
            )
            raise UnauthorizedError()
        return ownership

    def authorize(self, session: Optional[str], kind: EntityKind, entity_id: str) -> str:
        """Resolve the session and check ownership of the entity.

        Returns:
            The authorized user ID.
        """
        user_id = self.resolve_user(session)
        self.check_owner(user_id, kind, entity_id)
        return user_id
