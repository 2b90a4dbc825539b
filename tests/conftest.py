# tests/conftest.py
import os
import tempfile
from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

os.environ["SKIP_DB_INIT"] = "1"

from tenniscourts.clock import get_now
from tenniscourts.db import get_db
from tenniscourts.models import Base, Guest, TennisCourt, Schedule, Reservation, ReservationStatus
from tenniscourts.main import app

NOW = datetime(2026, 10, 19, 10, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture(scope="function")
def test_db_session():
    # temp DB
    tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    tmp.close()
    db_url = f"sqlite:///{tmp.name}"

    # test engine / Session
    engine = create_engine(db_url, connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
        os.unlink(tmp.name)


@pytest.fixture(scope="function")
def client(test_db_session, now):
    def override_get_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: now

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


# —— Factories ——
@pytest.fixture
def make_guest(test_db_session):
    def _make_guest(name="Rafael Nadal"):
        g = Guest(name=name)
        test_db_session.add(g)
        test_db_session.commit()
        return g
    return _make_guest


@pytest.fixture
def make_court(test_db_session):
    def _make_court(name="Court 1"):
        c = TennisCourt(name=name)
        test_db_session.add(c)
        test_db_session.commit()
        return c
    return _make_court


@pytest.fixture
def make_schedule(test_db_session, make_court):
    def _make_schedule(court_id=None, start=None):
        if court_id is None:
            court_id = make_court().id
        start = start or (NOW + timedelta(days=2))
        s = Schedule(tennis_court_id=court_id, start_date_time=start, end_date_time=start + timedelta(hours=1))
        test_db_session.add(s)
        test_db_session.commit()
        return s
    return _make_schedule


@pytest.fixture
def make_reservation(test_db_session, make_guest, make_schedule):
    def _make_reservation(guest_id=None, schedule_id=None, status=ReservationStatus.READY_TO_PLAY,
                          value=Decimal("10.00"), refund_value=Decimal("0.00")):
        if guest_id is None:
            guest_id = make_guest().id
        if schedule_id is None:
            schedule_id = make_schedule().id
        r = Reservation(guest_id=guest_id, schedule_id=schedule_id, reservation_status=status,
                        value=value, refund_value=refund_value)
        test_db_session.add(r)
        test_db_session.commit()
        return r
    return _make_reservation
