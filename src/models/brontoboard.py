"""BrontoBoard database model.

A BrontoBoard is the root of the ownership chain; its owner owns everything
beneath it.
"""

from sqlalchemy import Column, String
from .base import Base


class BrontoBoardModel(Base):
    """BrontoBoard database model."""

    __tablename__ = "brontoboards"

    brontoboard_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, index=True, nullable=False)
    calendar_id = Column(String, nullable=False)
    create_at = Column(String, nullable=False)
