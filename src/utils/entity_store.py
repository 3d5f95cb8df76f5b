"""Persistence for BrontoBoards and their children.

Point lookups return None when a row is absent; deciding whether that is a
not-found or an inconsistency is left to the caller. Every write is a single
commit, and driver errors surface as ``StoreFailureError``.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.entity_kind import EntityKind
from core.exceptions import StoreFailureError
from models.assignment import AssignmentModel
from models.brontoboard import BrontoBoardModel
from models.class_model import ClassModel
from models.office_hour import OfficeHourModel

logger = logging.getLogger(__name__)

_MODELS = {
    EntityKind.BRONTOBOARD: (BrontoBoardModel, BrontoBoardModel.brontoboard_id),
    EntityKind.CLASS: (ClassModel, ClassModel.class_id),
    EntityKind.ASSIGNMENT: (AssignmentModel, AssignmentModel.assignment_id),
    EntityKind.OFFICE_HOUR: (OfficeHourModel, OfficeHourModel.office_hour_id),
}


class EntityStore:
    """Reads and writes BrontoBoard entities using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize EntityStore.

        Args:
            db: Request-scoped SQLAlchemy Session.
        """
        self.db = db

    # --- Point lookups ---

    def get(self, kind: EntityKind, entity_id: Optional[str]):
        """Look up any entity by kind and ID.

        Args:
            kind: Which table to look in.
            entity_id: The entity's ID. None or empty never matches.

        Returns:
            The ORM row, or None if absent.

        Raises:
            StoreFailureError: If the query fails.
        """
        if not entity_id:
            return None
        model, id_column = _MODELS[kind]
        try:
            return self.db.query(model).filter(id_column == entity_id).first()
        except SQLAlchemyError as e:
            self._fail(f"get {kind.label}", e)

    def get_board(self, board_id: str) -> Optional[BrontoBoardModel]:
        return self.get(EntityKind.BRONTOBOARD, board_id)

    def get_class(self, class_id: str) -> Optional[ClassModel]:
        return self.get(EntityKind.CLASS, class_id)

    def get_assignment(self, assignment_id: str) -> Optional[AssignmentModel]:
        return self.get(EntityKind.ASSIGNMENT, assignment_id)

    def get_office_hour(self, office_hour_id: str) -> Optional[OfficeHourModel]:
        return self.get(EntityKind.OFFICE_HOUR, office_hour_id)

    # --- Listings ---

    def list_boards_for_owner(self, owner_id: str) -> List[BrontoBoardModel]:
        try:
            return (
                self.db.query(BrontoBoardModel)
                .filter(BrontoBoardModel.owner_id == owner_id)
                .order_by(BrontoBoardModel.create_at)
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("list BrontoBoards", e)

    def list_classes_for_board(self, board_id: str) -> List[ClassModel]:
        try:
            return (
                self.db.query(ClassModel)
                .filter(ClassModel.brontoboard_id == board_id)
                .order_by(ClassModel.create_at)
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("list Classes", e)

    def list_assignments_for_class(self, class_id: str) -> List[AssignmentModel]:
        try:
            return (
                self.db.query(AssignmentModel)
                .filter(AssignmentModel.class_id == class_id)
                .order_by(AssignmentModel.due_date)
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("list Assignments", e)

    def list_office_hours_for_class(self, class_id: str) -> List[OfficeHourModel]:
        try:
            return (
                self.db.query(OfficeHourModel)
                .filter(OfficeHourModel.class_id == class_id)
                .order_by(OfficeHourModel.start_time)
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("list OfficeHours", e)

    # --- Writes ---

    def add(self, model) -> None:
        """Insert a new row and commit."""
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except SQLAlchemyError as e:
            self._fail(f"insert {type(model).__name__}", e)

    def save(self, model) -> None:
        """Commit pending changes to an already-loaded row."""
        try:
            self.db.commit()
            self.db.refresh(model)
        except SQLAlchemyError as e:
            self._fail(f"update {type(model).__name__}", e)

    def delete(self, model) -> None:
        try:
            self.db.delete(model)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"delete {type(model).__name__}", e)

    def _fail(self, operation: str, error: SQLAlchemyError) -> None:
        self.db.rollback()
        logger.error("Store operation '%s' failed: %s", operation, error)
        raise StoreFailureError(operation) from error
