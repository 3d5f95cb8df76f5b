"""Login session database model.

A row exists for as long as the session is valid; logout deletes it.
"""

from sqlalchemy import Column, String, ForeignKey
from .base import Base


class SessionModel(Base):
    """Server-side record backing a session token."""

    __tablename__ = "sessions"

    session_id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    create_at = Column(String, nullable=False)  # ISO format string
    expires_at = Column(String, nullable=False)  # ISO format string
