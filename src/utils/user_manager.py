"""User management utilities.

This module provides user registration and password authentication. Session
handling lives in ``utils.sessioning``.
"""

import logging
import uuid
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from config import BCRYPT_ROUNDS
from core.exceptions import (
    AuthenticationError,
    StoreFailureError,
    UserAlreadyExistsError,
    ValidationError,
)
from models.user import UserModel
from utils.timestamps import now_utc, to_iso

logger = logging.getLogger(__name__)


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode("utf-8")[:72]


class UserManager:
    """Manages user accounts using SQLAlchemy."""

    def __init__(self, db: Session, rounds: int = BCRYPT_ROUNDS):
        """Initialize UserManager.

        Args:
            db: SQLAlchemy Session.
            rounds: bcrypt cost factor.
        """
        self.db = db
        self.rounds = rounds

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password.

        Returns:
            Hashed password (bcrypt hash string).
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a bcrypt hash."""
        try:
            return bcrypt.checkpw(
                _password_bytes(plain_password), hashed_password.encode("utf-8")
            )
        except ValueError as e:
            logger.error("Password verification error: %s", e)
            return False

    def register(self, username: str, password: str) -> str:
        """Register a new user.

        Args:
            username: Username for the new user.
            password: Plain text password.

        Returns:
            The new user's ID.

        Raises:
            ValidationError: If the username or password is empty.
            UserAlreadyExistsError: If the username is taken.
        """
        username = (username or "").strip()
        if not username:
            raise ValidationError("username", "Username cannot be empty.")
        if not password:
            raise ValidationError("password", "Password cannot be empty.")

        if self._get_by_username(username) is not None:
            raise UserAlreadyExistsError(username)

        model = UserModel(
            user_id=str(uuid.uuid4()),
            username=username,
            password_hash=self.hash_password(password),
            create_at=to_iso(now_utc()),
        )
        # Two concurrent registrations can both pass the check above; the
        # unique constraint decides
        try:
            self.db.add(model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UserAlreadyExistsError(username) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to create user %s: %s", username, e)
            raise StoreFailureError("create user") from e

        logger.info("Registered user: %s", username)
        return model.user_id

    def authenticate(self, username: str, password: str) -> str:
        """Check a username/password pair.

        Returns:
            The user's ID.

        Raises:
            AuthenticationError: If the user is unknown or the password is
                wrong.
        """
        model = self._get_by_username((username or "").strip())
        if model is None or not self.verify_password(password or "", model.password_hash):
            logger.info("Failed login for username: %s", username)
            raise AuthenticationError()
        return model.user_id

    def _get_by_username(self, username: str) -> Optional[UserModel]:
        try:
            return self.db.query(UserModel).filter(UserModel.username == username).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to look up user %s: %s", username, e)
            raise StoreFailureError("get user") from e
