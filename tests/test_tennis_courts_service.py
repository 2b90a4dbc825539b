from datetime import timedelta

import pytest

from tenniscourts.errors import ConflictError, NotFoundError, ValidationError
from tenniscourts.services import tennis_courts


def test_add_and_find_tennis_court(test_db_session):
    c = tennis_courts.add_tennis_court(test_db_session, "Centre Court")
    assert tennis_courts.find_tennis_court(test_db_session, c.id).name == "Centre Court"


def test_find_tennis_court_missing(test_db_session):
    with pytest.raises(NotFoundError, match="Tennis court not found"):
        tennis_courts.find_tennis_court(test_db_session, 3)


def test_find_tennis_court_with_schedules(test_db_session, make_court, make_schedule, now):
    court = make_court()
    second = make_schedule(court_id=court.id, start=now + timedelta(days=2))
    first = make_schedule(court_id=court.id, start=now + timedelta(days=1))

    found, slots = tennis_courts.find_tennis_court_with_schedules(test_db_session, court.id)

    assert found.id == court.id
    assert [s.id for s in slots] == [first.id, second.id]


def test_find_by_name_and_partial_name(test_db_session, make_court):
    make_court("Centre Court")
    make_court("Court Suzanne Lenglen")
    make_court("Practice Area")

    assert [c.name for c in tennis_courts.find_by_name(test_db_session, "Centre Court")] == ["Centre Court"]
    assert len(tennis_courts.find_by_partial_name(test_db_session, "COURT")) == 2
    assert len(tennis_courts.find_all(test_db_session)) == 3


def test_update_tennis_court(test_db_session, make_court):
    c = make_court()
    assert tennis_courts.update_tennis_court(test_db_session, c.id, "Court 9").name == "Court 9"


def test_update_tennis_court_without_id(test_db_session):
    with pytest.raises(ValidationError, match="Tennis court id is missing"):
        tennis_courts.update_tennis_court(test_db_session, None, "Court 9")


def test_delete_tennis_court(test_db_session, make_court):
    c = make_court()
    tennis_courts.delete_tennis_court(test_db_session, c.id)
    with pytest.raises(NotFoundError):
        tennis_courts.find_tennis_court(test_db_session, c.id)


def test_delete_tennis_court_with_schedules(test_db_session, make_schedule):
    s = make_schedule()
    with pytest.raises(ConflictError, match="Tennis court has schedules"):
        tennis_courts.delete_tennis_court(test_db_session, s.tennis_court_id)
