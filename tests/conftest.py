import itertools
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from fitstreak.database import get_session
from fitstreak.main import app
from fitstreak.models import Activity, ActivityType, UserGoals

# Sunday 2 June 2024 through Saturday 8 June 2024
SUNDAY = date(2024, 6, 2)
TODAY = date(2024, 6, 5)  # Wednesday
SATURDAY = date(2024, 6, 8)


@pytest.fixture
def goals():
    return UserGoals(user_id=1, strength_per_week=4, cardio_per_week=3, recovery_per_week=2)


@pytest.fixture
def make_activity():
    """Factory for unsaved activities with unique ids, dated TODAY unless told otherwise"""
    ids = itertools.count(1)

    def _make(activity_type=ActivityType.STRENGTH_TRAINING, day=TODAY, **fields):
        return Activity(id=next(ids), user_id=1, date=day, type=activity_type, **fields)

    return _make


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()
