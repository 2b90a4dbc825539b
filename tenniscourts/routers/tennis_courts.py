from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from tenniscourts.db import get_db
from tenniscourts.schemas import (
    ScheduleOut,
    TennisCourtCreate,
    TennisCourtOut,
    TennisCourtUpdate,
    TennisCourtWithSchedulesOut,
)
from tenniscourts.services import tennis_courts as service

router = APIRouter()


@router.get("/search-in-name/{partial_name}", response_model=List[TennisCourtOut])
def find_tennis_courts_by_partial_name(partial_name: str, db: Session = Depends(get_db)):
    return service.find_by_partial_name(db, partial_name)


@router.get("/{tennis_court_id}/schedules", response_model=TennisCourtWithSchedulesOut)
def find_tennis_court_with_schedules(tennis_court_id: int, db: Session = Depends(get_db)):
    tennis_court, schedules = service.find_tennis_court_with_schedules(db, tennis_court_id)
    return TennisCourtWithSchedulesOut(
        id=tennis_court.id,
        name=tennis_court.name,
        tennis_court_schedules=[ScheduleOut.model_validate(s) for s in schedules],
    )


@router.get("/{tennis_court_id}", response_model=TennisCourtOut)
def find_tennis_court(tennis_court_id: int, db: Session = Depends(get_db)):
    return service.find_tennis_court(db, tennis_court_id)


@router.get("", response_model=List[TennisCourtOut])
def find_tennis_courts(name: Optional[str] = Query(default=None), db: Session = Depends(get_db)):
    if name is None:
        return service.find_all(db)
    return service.find_by_name(db, name)


@router.post("", status_code=201, response_model=TennisCourtOut)
def add_tennis_court(body: TennisCourtCreate, response: Response, db: Session = Depends(get_db)):
    tennis_court = service.add_tennis_court(db, body.name)
    response.headers["Location"] = f"/tennis-courts/{tennis_court.id}"
    return tennis_court


@router.put("", response_model=TennisCourtOut)
def update_tennis_court(body: TennisCourtUpdate, db: Session = Depends(get_db)):
    return service.update_tennis_court(db, body.id, body.name)


@router.delete("/{tennis_court_id}", status_code=204)
def delete_tennis_court(tennis_court_id: int, db: Session = Depends(get_db)):
    service.delete_tennis_court(db, tennis_court_id)
    return Response(status_code=204)
