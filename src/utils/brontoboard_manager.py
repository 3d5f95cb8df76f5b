"""BrontoBoard actions.

This module implements every mutating BrontoBoard operation. Each method
takes the already-resolved caller as ``owner``, checks ownership through the
authorization gate, validates its inputs, and performs exactly one store
write.
"""

import logging
import secrets
from datetime import datetime
from typing import Optional, Union

from core.entity_kind import EntityKind
from core.exceptions import ValidationError
from models.assignment import AssignmentModel
from models.brontoboard import BrontoBoardModel
from models.class_model import ClassModel
from models.office_hour import OfficeHourModel
from schemas.brontoboard import Assignment, BrontoBoard, ClassInfo, OfficeHour
from utils.authorization import AuthorizationGate
from utils.converters import (
    model_to_assignment,
    model_to_brontoboard,
    model_to_class,
    model_to_office_hour,
)
from utils.entity_store import EntityStore
from utils.timestamps import now_utc, parse_timestamp, to_iso

logger = logging.getLogger(__name__)

Timestamp = Union[datetime, str]


def _new_id() -> str:
    return secrets.token_hex(8)


def _require_name(value: Optional[str], field: str, label: str) -> str:
    name = value.strip() if isinstance(value, str) else ""
    if not name:
        raise ValidationError(field, f"{label} cannot be empty.")
    return name


def _require_future(value: Optional[Timestamp], field: str, message: str) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None or parsed <= now_utc():
        raise ValidationError(field, message)
    return parsed


def _require_duration(value, field: str, message: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(field, message)
    return value


class BrontoBoardManager:
    """Manages creation and modification of BrontoBoard entities."""

    def __init__(self, store: EntityStore, gate: AuthorizationGate):
        """Initialize BrontoBoardManager.

        Args:
            store: Entity store bound to the request's DB session.
            gate: Authorization gate used for ownership checks.
        """
        self.store = store
        self.gate = gate

    def initialize_board(self, user: str, calendar: str) -> BrontoBoard:
        """Create a new BrontoBoard owned by ``user``.

        Args:
            user: The caller, who becomes the owner.
            calendar: Opaque reference to the user's calendar.

        Returns:
            The created BrontoBoard.

        Raises:
            ValidationError: If the calendar reference is empty.
        """
        if not isinstance(calendar, str) or not calendar.strip():
            raise ValidationError("calendar", "Calendar cannot be empty.")

        model = BrontoBoardModel(
            brontoboard_id=_new_id(),
            owner_id=user,
            calendar_id=calendar.strip(),
            create_at=to_iso(now_utc()),
        )
        self.store.add(model)
        logger.info("Initialized BrontoBoard %s for user %s", model.brontoboard_id, user)
        return model_to_brontoboard(model)

    def create_class(
        self, owner: str, brontoboard_id: str, name: str, overview: str = ""
    ) -> ClassInfo:
        """Create a class on an owned BrontoBoard.

        Raises:
            EntityNotFoundError: If the BrontoBoard does not exist.
            UnauthorizedError: If ``owner`` does not own it.
            ValidationError: If the class name is empty.
        """
        self.gate.check_owner(owner, EntityKind.BRONTOBOARD, brontoboard_id)
        class_name = _require_name(name, "name", "Class name")

        model = ClassModel(
            class_id=_new_id(),
            brontoboard_id=brontoboard_id,
            name=class_name,
            overview=overview or "",
            create_at=to_iso(now_utc()),
        )
        self.store.add(model)
        logger.info("Created class %s on BrontoBoard %s", model.class_id, brontoboard_id)
        return model_to_class(model)

    def add_assignment(
        self, owner: str, class_id: str, name: str, due_date: Timestamp
    ) -> Assignment:
        """Add an assignment to an owned class.

        Raises:
            EntityNotFoundError: If the class does not exist.
            UnauthorizedError: If ``owner`` does not own the class.
            ValidationError: If the name is empty or the due date is not in
                the future.
        """
        self.gate.check_owner(owner, EntityKind.CLASS, class_id)
        assignment_name = _require_name(name, "name", "Work name")
        due = _require_future(due_date, "due_date", "Due date must be a valid future date.")

        now = to_iso(now_utc())
        model = AssignmentModel(
            assignment_id=_new_id(),
            class_id=class_id,
            name=assignment_name,
            due_date=to_iso(due),
            create_at=now,
            update_at=now,
        )
        self.store.add(model)
        logger.info("Added assignment %s to class %s", model.assignment_id, class_id)
        return model_to_assignment(model)

    def change_assignment(
        self, owner: str, assignment_id: str, due_date: Timestamp
    ) -> Assignment:
        """Move an assignment's due date.

        Setting the due date it already has is accepted and leaves the row
        untouched.

        Raises:
            EntityNotFoundError: If the assignment does not exist.
            UnauthorizedError: If ``owner`` does not own it.
            ValidationError: If the new due date is not in the future.
        """
        ownership = self.gate.check_owner(owner, EntityKind.ASSIGNMENT, assignment_id)
        due = _require_future(
            due_date, "due_date", "New due date must be a valid future date."
        )

        model = ownership.entity
        new_due = to_iso(due)
        if model.due_date == new_due:
            logger.debug("Assignment %s already due at %s", assignment_id, new_due)
            return model_to_assignment(model)

        model.due_date = new_due
        model.update_at = to_iso(now_utc())
        self.store.save(model)
        logger.info("Changed due date of assignment %s to %s", assignment_id, new_due)
        return model_to_assignment(model)

    def remove_assignment(self, owner: str, assignment_id: str) -> None:
        """Delete an assignment.

        Raises:
            EntityNotFoundError: If the assignment does not exist.
            UnauthorizedError: If ``owner`` does not own it.
        """
        ownership = self.gate.check_owner(owner, EntityKind.ASSIGNMENT, assignment_id)
        self.store.delete(ownership.entity)
        logger.info("Removed assignment %s", assignment_id)

    def add_office_hour(
        self, owner: str, class_id: str, start_time: Timestamp, duration: int
    ) -> OfficeHour:
        """Add office hours to an owned class.

        Raises:
            EntityNotFoundError: If the class does not exist.
            UnauthorizedError: If ``owner`` does not own the class.
            ValidationError: If the start time is not in the future or the
                duration is negative.
        """
        self.gate.check_owner(owner, EntityKind.CLASS, class_id)
        start = _require_future(
            start_time,
            "start_time",
            "Office hours start time must be a valid future date.",
        )
        minutes = _require_duration(
            duration, "duration", "Office hours duration must be a non-negative number."
        )

        now = to_iso(now_utc())
        model = OfficeHourModel(
            office_hour_id=_new_id(),
            class_id=class_id,
            start_time=to_iso(start),
            duration=minutes,
            create_at=now,
            update_at=now,
        )
        self.store.add(model)
        logger.info("Added office hours %s to class %s", model.office_hour_id, class_id)
        return model_to_office_hour(model)

    def change_office_hour(
        self, owner: str, office_hour_id: str, start_time: Timestamp, duration: int
    ) -> OfficeHour:
        """Reschedule office hours.

        Raises:
            EntityNotFoundError: If the office hours do not exist.
            UnauthorizedError: If ``owner`` does not own them.
            ValidationError: If the new start time is not in the future or
                the new duration is negative.
        """
        ownership = self.gate.check_owner(owner, EntityKind.OFFICE_HOUR, office_hour_id)
        start = _require_future(
            start_time,
            "start_time",
            "New office hours start time must be a valid future date.",
        )
        minutes = _require_duration(
            duration,
            "duration",
            "New office hours duration must be a non-negative number.",
        )

        model = ownership.entity
        model.start_time = to_iso(start)
        model.duration = minutes
        model.update_at = to_iso(now_utc())
        self.store.save(model)
        logger.info("Changed office hours %s", office_hour_id)
        return model_to_office_hour(model)
