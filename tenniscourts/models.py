import enum

from sqlalchemy import Column, Integer, String, DateTime, Numeric, Enum, ForeignKey, Index, UniqueConstraint, text
from sqlalchemy.orm import relationship

from tenniscourts.db import Base


class ReservationStatus(str, enum.Enum):
    READY_TO_PLAY = "READY_TO_PLAY"
    CANCELLED = "CANCELLED"
    RESCHEDULED = "RESCHEDULED"


class Guest(Base):
    __tablename__ = "guests"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)


class TennisCourt(Base):
    __tablename__ = "tennis_courts"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    schedules = relationship("Schedule", back_populates="tennis_court", order_by="Schedule.start_date_time")


class Schedule(Base):
    __tablename__ = "schedules"
    id = Column(Integer, primary_key=True, autoincrement=True)
    tennis_court_id = Column(Integer, ForeignKey("tennis_courts.id"), nullable=False)
    start_date_time = Column(DateTime, nullable=False)
    end_date_time = Column(DateTime, nullable=False)

    tennis_court = relationship("TennisCourt", back_populates="schedules")

    __table_args__ = (
        UniqueConstraint("tennis_court_id", "start_date_time", name="uniq_court_slot_start"),
    )


class Reservation(Base):
    __tablename__ = "reservations"
    id = Column(Integer, primary_key=True, autoincrement=True)
    guest_id = Column(Integer, ForeignKey("guests.id"), nullable=False)
    schedule_id = Column(Integer, ForeignKey("schedules.id"), nullable=False)
    value = Column(Numeric(10, 2), nullable=False)
    refund_value = Column(Numeric(10, 2), nullable=False, default=0)
    reservation_status = Column(
        Enum(ReservationStatus, name="reservation_status", native_enum=False, length=16),
        nullable=False,
    )
    # one-way link from a rescheduled booking back to the one it replaced
    previous_reservation_id = Column(Integer, ForeignKey("reservations.id"), nullable=True)

    guest = relationship("Guest")
    schedule = relationship("Schedule")
    previous_reservation = relationship("Reservation", remote_side=[id])

    __table_args__ = (
        # at most one active reservation per slot, enforced by the store
        Index(
            "uniq_active_reservation_per_schedule",
            "schedule_id",
            unique=True,
            sqlite_where=text("reservation_status = 'READY_TO_PLAY'"),
            postgresql_where=text("reservation_status = 'READY_TO_PLAY'"),
        ),
    )
