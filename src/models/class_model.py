"""Class database model.

This module defines the Class database model using SQLAlchemy.
"""

from sqlalchemy import Column, String, Text, ForeignKey
from .base import Base


class ClassModel(Base):
    """Class database model, attached to one BrontoBoard."""

    __tablename__ = "classes"

    class_id = Column(String, primary_key=True, index=True)
    brontoboard_id = Column(String, ForeignKey("brontoboards.brontoboard_id"), index=True)
    name = Column(String, nullable=False)
    overview = Column(Text, nullable=False, default="")
    create_at = Column(String, nullable=False)
