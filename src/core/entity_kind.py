"""Kinds of entities stored on a BrontoBoard."""

from enum import Enum


class EntityKind(str, Enum):
    """Entity kinds, in ownership order from root to leaves."""

    BRONTOBOARD = "BrontoBoard"
    CLASS = "Class"
    ASSIGNMENT = "Assignment"
    OFFICE_HOUR = "OfficeHours"

    @property
    def label(self) -> str:
        return self.value
