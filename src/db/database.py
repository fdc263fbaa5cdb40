"""Generate database session. Connection settings are read from the environment."""

import os
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

DATABASE_URL = os.environ.get("CHESS_DATABASE_URL", "sqlite:///./chess.db")
DATABASE_ECHO = os.environ.get("CHESS_DATABASE_ECHO", "false").lower() in {"1", "true", "yes"}

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO)
SessionLocal = sessionmaker(bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Ensure all tables are created. Call once at application startup, before handing out sessions."""
    Base.metadata.create_all(bind=bind)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
