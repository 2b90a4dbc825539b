"""
Reservation lifecycle: booking, cancellation and rescheduling.

A booking holds a fixed deposit. Cancelling or rescheduling moves part of it
to ``refund_value`` depending on how long before the slot starts the change is
made; ``value + refund_value`` stays equal to the deposit.
"""
import logging
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tenniscourts.errors import ConflictError, NotFoundError, ValidationError
from tenniscourts.models import Reservation, ReservationStatus, Schedule
from tenniscourts.services import guests, schedules

logger = logging.getLogger(__name__)

DEPOSIT = Decimal("10.00")
CENTS = Decimal("0.01")


def find_reservation(db: Session, reservation_id: int) -> Reservation:
    reservation = db.get(Reservation, reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation not found")
    return reservation


def find_all_past_reservations(db: Session, now: datetime) -> List[Reservation]:
    return (
        db.query(Reservation)
        .join(Schedule, Reservation.schedule_id == Schedule.id)
        .filter(Schedule.start_date_time <= now)
        .all()
    )


def book_reservation(db: Session, guest_id: int, schedule_id: int, now: datetime) -> Reservation:
    reservation = _new_reservation(db, guest_id, schedule_id, now)
    _commit(db)
    db.refresh(reservation)
    logger.info("Booked reservation %s for guest %s on schedule %s", reservation.id, guest_id, schedule_id)
    return reservation


def cancel_reservation(db: Session, reservation_id: int, now: datetime) -> Reservation:
    reservation = find_reservation(db, reservation_id)
    validate_update(reservation, now)
    _update_reservation(reservation, ReservationStatus.CANCELLED, now)
    db.commit()
    db.refresh(reservation)
    logger.info("Cancelled reservation %s, refunded %s", reservation.id, reservation.refund_value)
    return reservation


def reschedule_reservation(
    db: Session,
    previous_reservation_id: int,
    schedule_id: Optional[int],
    now: datetime,
) -> Reservation:
    """
    Move a booking to another slot.

    The old reservation is refunded and marked RESCHEDULED, then a fresh
    reservation is booked for the same guest and linked back to it. Both
    writes share one transaction, so a failed booking leaves the old one
    untouched.
    """
    previous = find_reservation(db, previous_reservation_id)

    if schedule_id is None:
        raise ValidationError("Schedule id cannot be null.")
    if schedule_id == previous.schedule_id:
        raise ValidationError("Cannot reschedule to the same slot.")

    validate_update(previous, now)
    try:
        _update_reservation(previous, ReservationStatus.RESCHEDULED, now)
        db.flush()
        reservation = _new_reservation(db, previous.guest_id, schedule_id, now)
        reservation.previous_reservation_id = previous.id
    except Exception:
        db.rollback()
        raise
    _commit(db)

    db.refresh(reservation)
    logger.info(
        "Rescheduled reservation %s to %s on schedule %s",
        previous.id, reservation.id, schedule_id,
    )
    return reservation


def validate_update(reservation: Reservation, now: datetime) -> None:
    if reservation.reservation_status != ReservationStatus.READY_TO_PLAY:
        raise ValidationError("Can not update because it's not in ready to play status.")
    if reservation.schedule.start_date_time < now:
        raise ValidationError("Can not update past reservations.")


def refund_fraction(start_date_time: datetime, now: datetime) -> Decimal:
    remaining = start_date_time - now
    minutes = remaining // timedelta(minutes=1) if remaining > timedelta(0) else 0
    hours = minutes // 60
    if hours >= 24:
        return Decimal("1")
    if hours >= 12:
        return Decimal("0.75")
    if hours >= 2:
        return Decimal("0.5")
    if minutes >= 1:
        return Decimal("0.25")
    return Decimal("0")


def get_refund_value(reservation: Reservation, now: datetime) -> Decimal:
    fraction = refund_fraction(reservation.schedule.start_date_time, now)
    return (Decimal(reservation.value) * fraction).quantize(CENTS, rounding=ROUND_HALF_UP)


def _update_reservation(reservation: Reservation, status: ReservationStatus, now: datetime) -> None:
    refund = get_refund_value(reservation, now)
    reservation.reservation_status = status
    reservation.value = (Decimal(reservation.value) - refund).quantize(CENTS)
    reservation.refund_value = refund


def _new_reservation(db: Session, guest_id: int, schedule_id: int, now: datetime) -> Reservation:
    guest = guests.find_guest(db, guest_id)
    schedule = schedules.get_valid_schedule_for_reservation(db, schedule_id, now)
    reservation = Reservation(
        guest=guest,
        schedule=schedule,
        value=DEPOSIT,
        refund_value=Decimal("0.00"),
        reservation_status=ReservationStatus.READY_TO_PLAY,
    )
    db.add(reservation)
    return reservation


def _commit(db: Session) -> None:
    # the partial unique index rejects a second active booking on the slot
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Reservation already exists")
