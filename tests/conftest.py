import os
import tempfile
from datetime import datetime, timedelta

# Must be set before config is imported
os.environ.setdefault("BRONTOBOARD_DATA_DIR", tempfile.mkdtemp(prefix="brontoboard-test-"))
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytz
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import app
from core.database import get_db, init_db
from models.user import UserModel
from utils.authorization import AuthorizationGate
from utils.brontoboard_manager import BrontoBoardManager
from utils.brontoboard_queries import BrontoBoardQueries
from utils.entity_store import EntityStore
from utils.ownership import OwnershipResolver
from utils.sessioning import SessionTokenManager


ALICE = "user-alice"
BOB = "user-bob"


def future(days: int = 1) -> datetime:
    return datetime.now(pytz.utc) + timedelta(days=days)


def past(days: int = 1) -> datetime:
    return datetime.now(pytz.utc) - timedelta(days=days)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    for user_id in (ALICE, BOB):
        session.add(
            UserModel(
                user_id=user_id,
                username=user_id,
                password_hash="not-a-real-hash",
                create_at=datetime.now(pytz.utc).isoformat(),
            )
        )
    session.commit()
    yield session
    session.close()


@pytest.fixture
def store(db):
    return EntityStore(db)


@pytest.fixture
def sessions(db):
    return SessionTokenManager(db)


@pytest.fixture
def gate(store, sessions):
    return AuthorizationGate(sessions, OwnershipResolver(store))


@pytest.fixture
def manager(store, gate):
    return BrontoBoardManager(store, gate)


@pytest.fixture
def queries(store, gate):
    return BrontoBoardQueries(store, gate)


@pytest.fixture
def alice_session(sessions):
    return sessions.create(ALICE)


@pytest.fixture
def bob_session(sessions):
    return sessions.create(BOB)


@pytest.fixture
def board(manager):
    return manager.initialize_board(ALICE, "cal-1")


@pytest.fixture
def klass(manager, board):
    return manager.create_class(ALICE, board.brontoboard_id, "CS101", "Intro")


@pytest.fixture
def assignment(manager, klass):
    return manager.add_assignment(ALICE, klass.class_id, "HW1", future(1))


@pytest.fixture
def office_hour(manager, klass):
    return manager.add_office_hour(ALICE, klass.class_id, future(2), 60)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
