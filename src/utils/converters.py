"""Conversions from ORM rows to API schemas."""

from models.assignment import AssignmentModel
from models.brontoboard import BrontoBoardModel
from models.class_model import ClassModel
from models.office_hour import OfficeHourModel
from schemas.brontoboard import Assignment, BrontoBoard, ClassInfo, OfficeHour
from utils.timestamps import from_iso


def model_to_brontoboard(model: BrontoBoardModel) -> BrontoBoard:
    return BrontoBoard(
        brontoboard_id=model.brontoboard_id,
        owner_id=model.owner_id,
        calendar_id=model.calendar_id,
        create_at=model.create_at,
    )


def model_to_class(model: ClassModel) -> ClassInfo:
    return ClassInfo(
        class_id=model.class_id,
        brontoboard_id=model.brontoboard_id,
        name=model.name,
        overview=model.overview or "",
        create_at=model.create_at,
    )


def model_to_assignment(model: AssignmentModel) -> Assignment:
    return Assignment(
        assignment_id=model.assignment_id,
        class_id=model.class_id,
        name=model.name,
        due_date=from_iso(model.due_date),
        create_at=model.create_at,
        update_at=model.update_at,
    )


def model_to_office_hour(model: OfficeHourModel) -> OfficeHour:
    return OfficeHour(
        office_hour_id=model.office_hour_id,
        class_id=model.class_id,
        start_time=from_iso(model.start_time),
        duration=model.duration,
        create_at=model.create_at,
        update_at=model.update_at,
    )
