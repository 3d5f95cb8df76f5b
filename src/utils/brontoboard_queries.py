"""BrontoBoard read operations.

Single-record getters run the full authorization check on the record itself;
listings check the parent and then list its children. A listing with no
matches returns an empty list.
"""

from typing import List, Optional

from core.entity_kind import EntityKind
from schemas.brontoboard import Assignment, BrontoBoard, ClassInfo, OfficeHour
from utils.authorization import AuthorizationGate
from utils.converters import (
    model_to_assignment,
    model_to_brontoboard,
    model_to_class,
    model_to_office_hour,
)
from utils.entity_store import EntityStore


class BrontoBoardQueries:
    """Authorized queries over BrontoBoard entities."""

    def __init__(self, store: EntityStore, gate: AuthorizationGate):
        self.store = store
        self.gate = gate

    def list_boards_for_user(self, session: Optional[str]) -> List[BrontoBoard]:
        """List the caller's BrontoBoards.

        The store filters by owner, so no per-board check is needed.
        """
        user_id = self.gate.resolve_user(session)
        return [model_to_brontoboard(m) for m in self.store.list_boards_for_owner(user_id)]

    def get_board_by_id(self, session: Optional[str], brontoboard_id: str) -> BrontoBoard:
        return model_to_brontoboard(
            self._authorized_entity(session, EntityKind.BRONTOBOARD, brontoboard_id)
        )

    def get_class_by_id(self, session: Optional[str], class_id: str) -> ClassInfo:
        return model_to_class(self._authorized_entity(session, EntityKind.CLASS, class_id))

    def get_assignment_by_id(self, session: Optional[str], assignment_id: str) -> Assignment:
        return model_to_assignment(
            self._authorized_entity(session, EntityKind.ASSIGNMENT, assignment_id)
        )

    def get_office_hour_by_id(self, session: Optional[str], office_hour_id: str) -> OfficeHour:
        return model_to_office_hour(
            self._authorized_entity(session, EntityKind.OFFICE_HOUR, office_hour_id)
        )

    def list_classes_for_board(
        self, session: Optional[str], brontoboard_id: str
    ) -> List[ClassInfo]:
        self._authorized_entity(session, EntityKind.BRONTOBOARD, brontoboard_id)
        return [model_to_class(m) for m in self.store.list_classes_for_board(brontoboard_id)]

    def list_assignments_for_class(
        self, session: Optional[str], class_id: str
    ) -> List[Assignment]:
        self._authorized_entity(session, EntityKind.CLASS, class_id)
        return [
            model_to_assignment(m)
            for m in self.store.list_assignments_for_class(class_id)
        ]

    def list_office_hours_for_class(
        self, session: Optional[str], class_id: str
    ) -> List[OfficeHour]:
        self._authorized_entity(session, EntityKind.CLASS, class_id)
        return [
            model_to_office_hour(m)
            for m in self.store.list_office_hours_for_class(class_id)
        ]

    def _authorized_entity(self, session: Optional[str], kind: EntityKind, entity_id: str):
        """Resolve the caller once, check ownership, return the loaded row."""
        user_id = self.gate.resolve_user(session)
        return self.gate.check_owner(user_id, kind, entity_id).entity
