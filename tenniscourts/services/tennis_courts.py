import logging
from typing import List

from sqlalchemy.orm import Session

from tenniscourts.errors import ConflictError, NotFoundError, ValidationError
from tenniscourts.models import Schedule, TennisCourt
from tenniscourts.services import schedules

logger = logging.getLogger(__name__)


def find_tennis_court(db: Session, tennis_court_id: int) -> TennisCourt:
    tennis_court = db.get(TennisCourt, tennis_court_id)
    if tennis_court is None:
        raise NotFoundError("Tennis court not found")
    return tennis_court


def find_tennis_court_with_schedules(db: Session, tennis_court_id: int):
    """Returns the court together with its slots ordered by start time."""
    tennis_court = find_tennis_court(db, tennis_court_id)
    return tennis_court, schedules.find_schedules_by_tennis_court_id(db, tennis_court_id)


def find_all(db: Session) -> List[TennisCourt]:
    return db.query(TennisCourt).order_by(TennisCourt.id).all()


def find_by_name(db: Session, name: str) -> List[TennisCourt]:
    return db.query(TennisCourt).filter(TennisCourt.name == name).order_by(TennisCourt.id).all()


def find_by_partial_name(db: Session, partial_name: str) -> List[TennisCourt]:
    return (
        db.query(TennisCourt)
        .filter(TennisCourt.name.ilike(f"%{partial_name}%"))
        .order_by(TennisCourt.id)
        .all()
    )


def add_tennis_court(db: Session, name: str) -> TennisCourt:
    tennis_court = TennisCourt(name=name)
    db.add(tennis_court)
    db.commit()
    db.refresh(tennis_court)
    logger.info("Created tennis court %s", tennis_court.id)
    return tennis_court


def update_tennis_court(db: Session, tennis_court_id, name: str) -> TennisCourt:
    if tennis_court_id is None:
        raise ValidationError("Tennis court id is missing")
    tennis_court = find_tennis_court(db, tennis_court_id)
    tennis_court.name = name
    db.commit()
    db.refresh(tennis_court)
    return tennis_court


def delete_tennis_court(db: Session, tennis_court_id: int) -> None:
    tennis_court = find_tennis_court(db, tennis_court_id)
    if db.query(Schedule.id).filter(Schedule.tennis_court_id == tennis_court_id).first():
        raise ConflictError("Tennis court has schedules")
    db.delete(tennis_court)
    db.commit()
    logger.info("Deleted tennis court %s", tennis_court_id)
