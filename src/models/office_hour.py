"""Office hours database model.

This module defines the OfficeHours database model using SQLAlchemy.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from .base import Base


class OfficeHourModel(Base):
    """Office hours database model."""

    __tablename__ = "office_hours"

    office_hour_id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.class_id"), index=True)
    start_time = Column(String, nullable=False)  # ISO format string, UTC
    duration = Column(Integer, nullable=False)  # minutes
    create_at = Column(String, nullable=False)
    update_at = Column(String, nullable=False)
