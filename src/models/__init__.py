from .base import Base
from .user import UserModel
from .session import SessionModel
from .brontoboard import BrontoBoardModel
from .class_model import ClassModel
from .assignment import AssignmentModel
from .office_hour import OfficeHourModel

__all__ = [
    "Base",
    "UserModel",
    "SessionModel",
    "BrontoBoardModel",
    "ClassModel",
    "AssignmentModel",
    "OfficeHourModel",
]
