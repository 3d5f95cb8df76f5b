"""Account database model.

Users own BrontoBoards; ``user_id`` is what ``brontoboards.owner_id`` and
``sessions.user_id`` refer to.
"""

from sqlalchemy import Column, String
from .base import Base


class UserModel(Base):
    """Registered account with a bcrypt password hash."""

    __tablename__ = "users"

    user_id = Column(String, primary_key=True, index=True)
    # Login name; lookups on register and login go through this index
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    create_at = Column(String, nullable=False)  # ISO format string
