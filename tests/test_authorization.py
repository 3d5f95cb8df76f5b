"""
Tests for the authorization gate: session resolution plus ownership.
"""

import pytest

from conftest import ALICE, BOB
from core.entity_kind import EntityKind
from core.exceptions import (
    EntityNotFoundError,
    InternalInconsistencyError,
    SessionInvalidError,
    UnauthorizedError,
)


class TestAuthorize:
    def test_owner_is_authorized(self, gate, alice_session, assignment):
        user_id = gate.authorize(alice_session, EntityKind.ASSIGNMENT, assignment.assignment_id)
        assert user_id == ALICE

    def test_repeated_calls_agree(self, gate, alice_session, klass):
        first = gate.authorize(alice_session, EntityKind.CLASS, klass.class_id)
        second = gate.authorize(alice_session, EntityKind.CLASS, klass.class_id)
        assert first == second == ALICE

    def test_other_user_is_unauthorized(self, gate, bob_session, board):
        with pytest.raises(UnauthorizedError):
            gate.authorize(bob_session, EntityKind.BRONTOBOARD, board.brontoboard_id)

    def test_missing_entity_is_not_found_not_unauthorized(self, gate, bob_session):
        with pytest.raises(EntityNotFoundError):
            gate.authorize(bob_session, EntityKind.BRONTOBOARD, "no-such-board")

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_bad_session_is_rejected_before_ownership(self, gate, token):
        # the entity does not exist either; the session failure wins
        with pytest.raises(SessionInvalidError):
            gate.authorize(token, EntityKind.BRONTOBOARD, "no-such-board")

    def test_logged_out_session_is_rejected(self, gate, sessions, alice_session, board):
        sessions.delete(alice_session)
        with pytest.raises(SessionInvalidError):
            gate.authorize(alice_session, EntityKind.BRONTOBOARD, board.brontoboard_id)

    def test_inconsistency_propagates(self, gate, store, db, alice_session, klass):
        db.delete(store.get_board(klass.brontoboard_id))
        db.commit()
        with pytest.raises(InternalInconsistencyError):
            gate.authorize(alice_session, EntityKind.CLASS, klass.class_id)


class TestCheckOwner:
    def test_returns_loaded_entity(self, gate, office_hour):
        ownership = gate.check_owner(ALICE, EntityKind.OFFICE_HOUR, office_hour.office_hour_id)
        assert ownership.entity.office_hour_id == office_hour.office_hour_id

    def test_rejects_non_owner(self, gate, office_hour):
        with pytest.raises(UnauthorizedError) as exc_info:
            gate.check_owner(BOB, EntityKind.OFFICE_HOUR, office_hour.office_hour_id)
        # the message names nobody
        assert ALICE not in str(exc_info.value)
        assert BOB not in str(exc_info.value)
