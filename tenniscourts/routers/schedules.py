from datetime import date, datetime, time
from typing import List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from tenniscourts.clock import get_now
from tenniscourts.db import get_db
from tenniscourts.schemas import CreateScheduleBody, ScheduleOut
from tenniscourts.services import schedules as service

router = APIRouter()

END_OF_DAY = time(23, 59, 59)


@router.get("/{schedule_id}", response_model=ScheduleOut)
def find_schedule(schedule_id: int, db: Session = Depends(get_db)):
    return service.find_schedule(db, schedule_id)


@router.get("", response_model=List[ScheduleOut])
def find_schedules_by_dates(
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
):
    """Slots that start on or after `start_date` and end on or before the end of `end_date`."""
    return service.find_schedules_by_dates(
        db,
        datetime.combine(start_date, time.min),
        datetime.combine(end_date, END_OF_DAY),
    )


@router.post("", status_code=201, response_model=ScheduleOut)
def add_schedule(
    body: CreateScheduleBody,
    response: Response,
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    schedule = service.add_schedule(db, body.tennis_court_id, body.start_date_time, now)
    response.headers["Location"] = f"/schedules/{schedule.id}"
    return schedule
