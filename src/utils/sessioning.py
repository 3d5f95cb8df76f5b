"""Session token management.

A session token is a signed JWT whose ``sid`` claim names a row in the
``sessions`` table. The signature and expiry are checked first; the row must
then still exist, which is what makes logout effective.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import JWT_ALGORITHM, JWT_SECRET_KEY, SESSION_EXPIRE_MINUTES
from core.exceptions import SessionInvalidError, StoreFailureError
from models.session import SessionModel
from utils.timestamps import now_utc, to_iso

logger = logging.getLogger(__name__)


class SessionTokenManager:
    """Creates, resolves and deletes login sessions."""

    def __init__(
        self,
        db: Session,
        secret_key: str = JWT_SECRET_KEY,
        algorithm: str = JWT_ALGORITHM,
        expire_minutes: int = SESSION_EXPIRE_MINUTES,
    ):
        """Initialize SessionTokenManager.

        Args:
            db: SQLAlchemy Session.
            secret_key: Key used to sign tokens.
            algorithm: JWT signing algorithm.
            expire_minutes: Token lifetime.
        """
        self.db = db
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create(self, user_id: str) -> str:
        """Start a new session for a user.

        Args:
            user_id: The authenticated user.

        Returns:
            The encoded session token.
        """
        now = now_utc()
        expire = now + timedelta(minutes=self.expire_minutes)
        model = SessionModel(
            session_id=secrets.token_hex(16),
            user_id=user_id,
            create_at=to_iso(now),
            expires_at=to_iso(expire),
        )
        try:
            self.db.add(model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to create session for user %s: %s", user_id, e)
            raise StoreFailureError("create session") from e

        logger.info("Created session for user %s", user_id)
        return jwt.encode(
            {"sub": user_id, "sid": model.session_id, "exp": expire},
            self.secret_key,
            algorithm=self.algorithm,
        )

    def get_user(self, token: Optional[str]) -> str:
        """Resolve a session token to its user.

        Args:
            token: The session token.

        Returns:
            The user ID bound to the session.

        Raises:
            SessionInvalidError: If the token is missing, malformed, expired,
                or its session has been deleted.
        """
        return self._get_model(token).user_id

    def delete(self, token: Optional[str]) -> None:
        """End a session (logout).

        Raises:
            SessionInvalidError: If the session does not exist.
        """
        model = self._get_model(token)
        try:
            self.db.delete(model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to delete session %s: %s", model.session_id, e)
            raise StoreFailureError("delete session") from e
        logger.info("Deleted session for user %s", model.user_id)

    def _get_model(self, token: Optional[str]) -> SessionModel:
        if not token:
            raise SessionInvalidError()
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise SessionInvalidError()

        session_id = payload.get("sid")
        user_id = payload.get("sub")
        if not session_id or not user_id:
            raise SessionInvalidError()

        try:
            model = (
                self.db.query(SessionModel)
                .filter(SessionModel.session_id == session_id)
                .first()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to look up session %s: %s", session_id, e)
            raise StoreFailureError("get session") from e

        if model is None or model.user_id != user_id:
            raise SessionInvalidError()
        return model
