"""
Tests for BrontoBoard actions: ownership checks, validation and effects.
"""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import ALICE, BOB, future, past
from core.exceptions import EntityNotFoundError, UnauthorizedError, ValidationError

# Valid ISO-8601, but past datetime.max once converted to UTC
OUT_OF_RANGE_ISO = "9999-12-31T23:00:00-05:00"
OUT_OF_RANGE_DATETIME = datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-5)))


class TestInitializeBoard:
    def test_creates_board_owned_by_user(self, manager, store):
        board = manager.initialize_board(ALICE, "cal-1")
        assert board.owner_id == ALICE
        assert board.calendar_id == "cal-1"
        assert store.get_board(board.brontoboard_id) is not None

    def test_each_call_creates_a_new_board(self, manager, store):
        first = manager.initialize_board(ALICE, "cal-1")
        second = manager.initialize_board(ALICE, "cal-2")
        assert first.brontoboard_id != second.brontoboard_id
        assert len(store.list_boards_for_owner(ALICE)) == 2

    @pytest.mark.parametrize("calendar", ["", "   "])
    def test_requires_calendar(self, manager, calendar):
        with pytest.raises(ValidationError) as exc_info:
            manager.initialize_board(ALICE, calendar)
        assert exc_info.value.field == "calendar"


class TestCreateClass:
    def test_creates_class_on_board(self, manager, store, board):
        klass = manager.create_class(ALICE, board.brontoboard_id, "Software Engineering", "Build things.")
        assert klass.brontoboard_id == board.brontoboard_id
        assert klass.name == "Software Engineering"
        assert klass.overview == "Build things."
        assert [c.class_id for c in store.list_classes_for_board(board.brontoboard_id)] == [klass.class_id]

    def test_name_is_trimmed(self, manager, board):
        klass = manager.create_class(ALICE, board.brontoboard_id, "  CS101  ", "")
        assert klass.name == "CS101"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_empty_name(self, manager, board, name):
        with pytest.raises(ValidationError) as exc_info:
            manager.create_class(ALICE, board.brontoboard_id, name, "overview")
        assert exc_info.value.field == "name"
        assert exc_info.value.message == "Class name cannot be empty."

    def test_rejects_non_owner(self, manager, store, board):
        with pytest.raises(UnauthorizedError):
            manager.create_class(BOB, board.brontoboard_id, "Sneaky", "")
        assert store.list_classes_for_board(board.brontoboard_id) == []

    def test_missing_board(self, manager):
        with pytest.raises(EntityNotFoundError) as exc_info:
            manager.create_class(ALICE, "no-such-board", "CS101", "")
        assert exc_info.value.message == "BrontoBoard with ID no-such-board not found."

    def test_ownership_is_checked_before_validation(self, manager, board):
        with pytest.raises(UnauthorizedError):
            manager.create_class(BOB, board.brontoboard_id, "", "")


class TestAddAssignment:
    def test_adds_assignment(self, manager, store, klass):
        due = future(7)
        assignment = manager.add_assignment(ALICE, klass.class_id, "Project 1", due)
        assert assignment.class_id == klass.class_id
        assert assignment.name == "Project 1"
        assert assignment.due_date == due
        assert store.get_assignment(assignment.assignment_id) is not None

    def test_accepts_iso_string(self, manager, klass):
        due = future(3).replace(microsecond=0)
        assignment = manager.add_assignment(ALICE, klass.class_id, "HW", due.isoformat())
        assert assignment.due_date == due

    def test_naive_timestamp_is_utc(self, manager, klass):
        naive = future(2).replace(tzinfo=None, microsecond=0)
        assignment = manager.add_assignment(ALICE, klass.class_id, "HW", naive.isoformat())
        assert assignment.due_date.replace(tzinfo=None) == naive
        assert assignment.due_date.utcoffset() == timedelta(0)

    def test_rejects_empty_name(self, manager, klass):
        with pytest.raises(ValidationError) as exc_info:
            manager.add_assignment(ALICE, klass.class_id, "", future(5))
        assert exc_info.value.field == "name"
        assert exc_info.value.message == "Work name cannot be empty."

    @pytest.mark.parametrize(
        "due_date",
        [past(1), "not a date", "", None, OUT_OF_RANGE_ISO, OUT_OF_RANGE_DATETIME],
    )
    def test_rejects_bad_due_date(self, manager, klass, due_date):
        with pytest.raises(ValidationError) as exc_info:
            manager.add_assignment(ALICE, klass.class_id, "HW1", due_date)
        assert exc_info.value.field == "due_date"
        assert exc_info.value.message == "Due date must be a valid future date."

    def test_rejects_non_owner(self, manager, klass):
        with pytest.raises(UnauthorizedError):
            manager.add_assignment(BOB, klass.class_id, "Bob's Project", future(10))

    def test_missing_class(self, manager):
        with pytest.raises(EntityNotFoundError):
            manager.add_assignment(ALICE, "no-such-class", "HW1", future(1))


class TestChangeAssignment:
    def test_moves_due_date(self, manager, store, assignment):
        new_due = future(14)
        updated = manager.change_assignment(ALICE, assignment.assignment_id, new_due)
        assert updated.due_date == new_due
        assert updated.name == assignment.name

    def test_same_due_date_is_accepted(self, manager, assignment):
        updated = manager.change_assignment(ALICE, assignment.assignment_id, assignment.due_date)
        assert updated.due_date == assignment.due_date
        assert updated.update_at == assignment.update_at

    @pytest.mark.parametrize("due_date", [past(1), "not a date", OUT_OF_RANGE_ISO])
    def test_rejects_bad_due_date(self, manager, store, assignment, due_date):
        with pytest.raises(ValidationError) as exc_info:
            manager.change_assignment(ALICE, assignment.assignment_id, due_date)
        assert exc_info.value.message == "New due date must be a valid future date."

    def test_rejects_non_owner(self, manager, assignment):
        with pytest.raises(UnauthorizedError):
            manager.change_assignment(BOB, assignment.assignment_id, future(20))

    def test_missing_assignment(self, manager):
        with pytest.raises(EntityNotFoundError):
            manager.change_assignment(ALICE, "no-such-assignment", future(1))


class TestRemoveAssignment:
    def test_removes(self, manager, store, assignment):
        assert manager.remove_assignment(ALICE, assignment.assignment_id) is None
        assert store.get_assignment(assignment.assignment_id) is None

    def test_rejects_non_owner(self, manager, store, assignment):
        with pytest.raises(UnauthorizedError):
            manager.remove_assignment(BOB, assignment.assignment_id)
        assert store.get_assignment(assignment.assignment_id) is not None

    def test_missing_assignment(self, manager):
        with pytest.raises(EntityNotFoundError) as exc_info:
            manager.remove_assignment(ALICE, "assignment:fake")
        assert exc_info.value.message == "Assignment with ID assignment:fake not found."

    def test_second_remove_is_not_found(self, manager, assignment):
        manager.remove_assignment(ALICE, assignment.assignment_id)
        with pytest.raises(EntityNotFoundError):
            manager.remove_assignment(ALICE, assignment.assignment_id)


class TestOfficeHours:
    def test_adds_office_hours(self, manager, klass):
        start = future(3)
        office_hour = manager.add_office_hour(ALICE, klass.class_id, start, 90)
        assert office_hour.class_id == klass.class_id
        assert office_hour.start_time == start
        assert office_hour.duration == 90

    def test_zero_duration_is_allowed(self, manager, klass):
        assert manager.add_office_hour(ALICE, klass.class_id, future(3), 0).duration == 0

    @pytest.mark.parametrize("start_time", [past(1), OUT_OF_RANGE_ISO])
    def test_rejects_bad_start(self, manager, klass, start_time):
        with pytest.raises(ValidationError) as exc_info:
            manager.add_office_hour(ALICE, klass.class_id, start_time, 30)
        assert exc_info.value.field == "start_time"
        assert exc_info.value.message == "Office hours start time must be a valid future date."

    @pytest.mark.parametrize("duration", [-5, 1.5, "30", True])
    def test_rejects_bad_duration(self, manager, klass, duration):
        with pytest.raises(ValidationError) as exc_info:
            manager.add_office_hour(ALICE, klass.class_id, future(5), duration)
        assert exc_info.value.field == "duration"
        assert exc_info.value.message == "Office hours duration must be a non-negative number."

    def test_add_rejects_non_owner(self, manager, klass):
        with pytest.raises(UnauthorizedError):
            manager.add_office_hour(BOB, klass.class_id, future(5), 30)

    def test_changes_start_and_duration(self, manager, office_hour):
        new_start = future(10)
        updated = manager.change_office_hour(ALICE, office_hour.office_hour_id, new_start, 45)
        assert updated.start_time == new_start
        assert updated.duration == 45

    def test_change_rejects_past_start(self, manager, office_hour):
        with pytest.raises(ValidationError) as exc_info:
            manager.change_office_hour(ALICE, office_hour.office_hour_id, past(300), 45)
        assert exc_info.value.message == "New office hours start time must be a valid future date."

    def test_change_rejects_negative_duration(self, manager, office_hour):
        with pytest.raises(ValidationError) as exc_info:
            manager.change_office_hour(ALICE, office_hour.office_hour_id, future(15), -1)
        assert exc_info.value.message == "New office hours duration must be a non-negative number."

    def test_change_rejects_non_owner(self, manager, office_hour):
        with pytest.raises(UnauthorizedError):
            manager.change_office_hour(BOB, office_hour.office_hour_id, future(15), 30)

    def test_change_missing(self, manager):
        with pytest.raises(EntityNotFoundError):
            manager.change_office_hour(ALICE, "no-such-oh", future(15), 30)
