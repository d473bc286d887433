# app/data/database.py
from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from app.utils.settings import DATABASE_URL

engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def ping(session_factory=SessionLocal) -> bool:
    """SELECT 1 przez pule polaczen."""
    with session_factory() as db:
        return db.execute(text("SELECT 1 AS ok")).scalar() == 1
