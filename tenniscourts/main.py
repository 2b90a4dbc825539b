import logging

import uvicorn
from fastapi import FastAPI

from tenniscourts.config import settings
from tenniscourts.db import init_db
from tenniscourts.errors import setup_exception_handlers
from tenniscourts.routers import guests, reservations, schedules, tennis_courts

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Tennis Courts Reservation API", version="0.1.0")

setup_exception_handlers(app)

app.include_router(guests.router, prefix="/guests", tags=["guests"])
app.include_router(tennis_courts.router, prefix="/tennis-courts", tags=["tennis-courts"])
app.include_router(schedules.router, prefix="/schedules", tags=["schedules"])
app.include_router(reservations.router, prefix="/reservations", tags=["reservations"])


@app.on_event("startup")
def on_startup():
    if settings.SKIP_DB_INIT:
        return
    init_db()


@app.get("/")
def root():
    return {"ok": True, "service": "tennis-courts-api"}


if __name__ == "__main__":
    uvicorn.run("tenniscourts.main:app", host="0.0.0.0", port=8000)
