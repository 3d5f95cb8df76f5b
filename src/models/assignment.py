"""Assignment database model.

An assignment belongs to a class and carries a single due date.
"""

from sqlalchemy import Column, String, ForeignKey
from .base import Base


class AssignmentModel(Base):
    """Assignment database model."""

    __tablename__ = "assignments"

    assignment_id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.class_id"), index=True)
    name = Column(String, nullable=False)
    due_date = Column(String, nullable=False)  # ISO format string, UTC
    create_at = Column(String, nullable=False)
    update_at = Column(String, nullable=False)
