from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from tenniscourts.clock import get_now
from tenniscourts.db import get_db
from tenniscourts.schemas import CreateReservationBody, ReservationOut
from tenniscourts.services import reservations as service

router = APIRouter()


@router.post("", status_code=201, response_model=ReservationOut)
def book_reservation(
    body: CreateReservationBody,
    response: Response,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    reservation = service.book_reservation(db, body.guest_id, body.schedule_id, now)
    response.headers["Location"] = f"/reservations/{reservation.id}"
    return reservation


@router.put("/reschedule", response_model=ReservationOut)
def reschedule_reservation(
    reservation_id: int = Query(...),
    schedule_id: Optional[int] = Query(default=None),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    return service.reschedule_reservation(db, reservation_id, schedule_id, now)


@router.get("/{reservation_id}", response_model=ReservationOut)
def find_reservation(reservation_id: int, db: Session = Depends(get_db)):
    return service.find_reservation(db, reservation_id)


@router.put("/{reservation_id}/cancel", response_model=ReservationOut)
def cancel_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    return service.cancel_reservation(db, reservation_id, now)


@router.get("", response_model=List[ReservationOut])
def find_all_past_reservations(db: Session = Depends(get_db), now: datetime = Depends(get_now)):
    return service.find_all_past_reservations(db, now)
