import logging
from typing import List

from sqlalchemy.orm import Session

from tenniscourts.errors import ConflictError, NotFoundError, ValidationError
from tenniscourts.models import Guest, Reservation

logger = logging.getLogger(__name__)


def find_guest(db: Session, guest_id: int) -> Guest:
    guest = db.get(Guest, guest_id)
    if guest is None:
        raise NotFoundError("Guest not found")
    return guest


def find_all(db: Session) -> List[Guest]:
    return db.query(Guest).order_by(Guest.id).all()


def find_by_name(db: Session, name: str) -> List[Guest]:
    return db.query(Guest).filter(Guest.name == name).order_by(Guest.id).all()


def find_by_partial_name(db: Session, partial_name: str) -> List[Guest]:
    return (
        db.query(Guest)
        .filter(Guest.name.ilike(f"%{partial_name}%"))
        .order_by(Guest.id)
        .all()
    )


def add_guest(db: Session, name: str) -> Guest:
    guest = Guest(name=name)
    db.add(guest)
    db.commit()
    db.refresh(guest)
    logger.info("Created guest %s", guest.id)
    return guest


def update_guest(db: Session, guest_id, name: str) -> Guest:
    if guest_id is None:
        raise ValidationError("Guest id is missing")
    guest = find_guest(db, guest_id)
    guest.name = name
    db.commit()
    db.refresh(guest)
    return guest


def delete_guest(db: Session, guest_id: int) -> None:
    guest = find_guest(db, guest_id)
    if db.query(Reservation.id).filter(Reservation.guest_id == guest_id).first():
        raise ConflictError("Guest has reservations")
    db.delete(guest)
    db.commit()
    logger.info("Deleted guest %s", guest_id)
