# app/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.utils.settings import (
    DATABASE_URL,
    DB_STATEMENT_TIMEOUT_MS,
    DB_CONNECT_TIMEOUT_SECONDS,
)


def _connect_args(url: str) -> dict:
    # timeout na kazde zapytanie do postgresa, zeby checkout nie wisial
    if url.startswith("postgresql"):
        return {
            "connect_timeout": DB_CONNECT_TIMEOUT_SECONDS,
            "options": f"-c statement_timeout={DB_STATEMENT_TIMEOUT_MS}",
        }
    return {}


engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(DATABASE_URL),
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
