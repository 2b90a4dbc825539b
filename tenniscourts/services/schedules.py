import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tenniscourts.errors import ConflictError, NotFoundError, ValidationError
from tenniscourts.models import Reservation, ReservationStatus, Schedule, TennisCourt

logger = logging.getLogger(__name__)

# every slot is one hour long
SLOT_DURATION = timedelta(hours=1)


def find_schedule(db: Session, schedule_id: int) -> Schedule:
    schedule = db.get(Schedule, schedule_id)
    if schedule is None:
        raise NotFoundError("Schedule not found")
    return schedule


def find_schedules_by_dates(db: Session, start: datetime, end: datetime) -> List[Schedule]:
    return (
        db.query(Schedule)
        .filter(Schedule.start_date_time >= start, Schedule.end_date_time <= end)
        .order_by(Schedule.start_date_time, Schedule.id)
        .all()
    )


def find_schedules_by_tennis_court_id(db: Session, tennis_court_id: int) -> List[Schedule]:
    return (
        db.query(Schedule)
        .filter(Schedule.tennis_court_id == tennis_court_id)
        .order_by(Schedule.start_date_time)
        .all()
    )


def add_schedule(
    db: Session,
    tennis_court_id: int,
    start_date_time: Optional[datetime],
    now: datetime,
) -> Schedule:
    """
    Create a one-hour slot on a court.

    Rejects a missing or past start and a second slot at the same start on the
    same court. The (court, start) unique constraint backs the duplicate check
    when two requests race past it.
    """
    if start_date_time is None:
        raise ValidationError("Schedule start date is missing")
    if start_date_time < now:
        raise ValidationError("Schedule start date cannot be older than today")
    if db.get(TennisCourt, tennis_court_id) is None:
        raise NotFoundError("Tennis court not found")

    existing = (
        db.query(Schedule)
        .filter(
            Schedule.tennis_court_id == tennis_court_id,
            Schedule.start_date_time == start_date_time,
        )
        .first()
    )
    if existing is not None:
        raise ConflictError("The schedule is not available")

    schedule = Schedule(
        tennis_court_id=tennis_court_id,
        start_date_time=start_date_time,
        end_date_time=start_date_time + SLOT_DURATION,
    )
    db.add(schedule)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("The schedule is not available")
    db.refresh(schedule)
    logger.info("Added schedule %s on court %s at %s", schedule.id, tennis_court_id, start_date_time)
    return schedule


def get_valid_schedule_for_reservation(db: Session, schedule_id: int, now: datetime) -> Schedule:
    # availability is derived from the reservations pointing at the slot
    active = (
        db.query(Reservation.id)
        .filter(
            Reservation.schedule_id == schedule_id,
            Reservation.reservation_status == ReservationStatus.READY_TO_PLAY,
        )
        .first()
    )
    if active is not None:
        raise ConflictError("Reservation already exists")

    schedule = find_schedule(db, schedule_id)
    if schedule.start_date_time < now:
        raise ValidationError("Start date can not be older than today")
    return schedule
