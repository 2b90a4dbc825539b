from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from tenniscourts.db import get_db
from tenniscourts.schemas import GuestCreate, GuestOut, GuestUpdate
from tenniscourts.services import guests as service

router = APIRouter()


@router.get("/search-in-name/{partial_name}", response_model=List[GuestOut])
def find_guests_by_partial_name(partial_name: str, db: Session = Depends(get_db)):
    return service.find_by_partial_name(db, partial_name)


@router.get("/{guest_id}", response_model=GuestOut)
def find_guest(guest_id: int, db: Session = Depends(get_db)):
    return service.find_guest(db, guest_id)


@router.get("", response_model=List[GuestOut])
def find_guests(name: Optional[str] = Query(default=None), db: Session = Depends(get_db)):
    """All guests, or only those whose name matches exactly when `name` is given."""
    if name is None:
        return service.find_all(db)
    return service.find_by_name(db, name)


@router.post("", status_code=201, response_model=GuestOut)
def create_guest(body: GuestCreate, response: Response, db: Session = Depends(get_db)):
    guest = service.add_guest(db, body.name)
    response.headers["Location"] = f"/guests/{guest.id}"
    return guest


@router.put("", response_model=GuestOut)
def update_guest(body: GuestUpdate, db: Session = Depends(get_db)):
    return service.update_guest(db, body.id, body.name)


@router.delete("/{guest_id}", status_code=204)
def delete_guest(guest_id: int, db: Session = Depends(get_db)):
    service.delete_guest(db, guest_id)
    return Response(status_code=204)
