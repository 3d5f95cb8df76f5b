"""BrontoBoard schema definitions.

Response models for the four entity kinds and the request bodies of the
mutating endpoints. Timestamp fields on requests are accepted as strings and
parsed by the manager, so a malformed date is reported like any other
validation failure.
"""

from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field, StrictInt


class BrontoBoard(BaseModel):
    brontoboard_id: str
    owner_id: str
    calendar_id: str
    create_at: str


class ClassInfo(BaseModel):
    class_id: str
    brontoboard_id: str
    name: str
    overview: str
    create_at: str


class Assignment(BaseModel):
    assignment_id: str
    class_id: str
    name: str
    due_date: datetime
    create_at: str
    update_at: str


class OfficeHour(BaseModel):
    office_hour_id: str
    class_id: str
    start_time: datetime
    duration: int = Field(description="Length of the office hours in minutes.")
    create_at: str
    update_at: str


class InitializeBrontoBoardRequest(BaseModel):
    calendar: str = Field(description="Opaque reference to the user's calendar.")


class CreateClassRequest(BaseModel):
    name: str
    overview: str = ""


class AddAssignmentRequest(BaseModel):
    name: str
    due_date: Union[datetime, str]


class ChangeAssignmentRequest(BaseModel):
    due_date: Union[datetime, str]


class AddOfficeHourRequest(BaseModel):
    start_time: Union[datetime, str]
    duration: StrictInt = Field(description="Length of the office hours in minutes.")


class ChangeOfficeHourRequest(BaseModel):
    start_time: Union[datetime, str]
    duration: StrictInt = Field(description="Length of the office hours in minutes.")
