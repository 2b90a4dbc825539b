import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from tenniscourts.config import settings

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # Import models here to create tables
    from tenniscourts.models import Guest, TennisCourt
    Base.metadata.create_all(bind=engine)

    if not settings.SEED_DEMO_DATA:
        return

    db = SessionLocal()
    try:
        if not db.query(Guest).first():
            db.add(Guest(name="Roger Federer"))
            logger.info("Seeded demo guest")
        if not db.query(TennisCourt).first():
            db.add(TennisCourt(name="Roland Garros - Court Philippe-Chatrier"))
            logger.info("Seeded demo tennis court")
        db.commit()
    finally:
        db.close()
