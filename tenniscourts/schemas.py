from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from tenniscourts.models import ReservationStatus

DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


# ----------------- Guests -----------------
class GuestCreate(BaseModel):
    name: str = Field(min_length=1)


class GuestUpdate(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1)


class GuestOut(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


# ----------------- Schedules -----------------
class CreateScheduleBody(BaseModel):
    tennis_court_id: int
    start_date_time: Optional[datetime] = None

    @field_validator("start_date_time")
    @classmethod
    def reject_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        # slots are local wall-clock times
        if value is not None and value.tzinfo is not None:
            raise ValueError("start_date_time must not carry a timezone offset")
        return value


class ScheduleOut(BaseModel):
    id: int
    tennis_court_id: int
    start_date_time: datetime
    end_date_time: datetime

    model_config = {"from_attributes": True}

    @field_serializer("start_date_time", "end_date_time")
    def serialize_dt(self, value: datetime) -> str:
        return value.strftime(DATETIME_FORMAT)


# ----------------- Tennis courts -----------------
class TennisCourtCreate(BaseModel):
    name: str = Field(min_length=1)


class TennisCourtUpdate(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1)


class TennisCourtOut(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class TennisCourtWithSchedulesOut(TennisCourtOut):
    tennis_court_schedules: List[ScheduleOut] = []


# ----------------- Reservations -----------------
class CreateReservationBody(BaseModel):
    guest_id: int
    schedule_id: int


class ReservationOut(BaseModel):
    id: int
    guest_id: int
    schedule_id: int
    schedule: ScheduleOut
    value: Decimal
    refund_value: Decimal
    reservation_status: ReservationStatus
    previous_reservation_id: Optional[int] = None

    model_config = {"from_attributes": True}

    @field_serializer("value", "refund_value")
    def serialize_money(self, value: Decimal) -> str:
        return str(value.quantize(Decimal("0.01")))
