from typing import Generator

from sqlalchemy.orm import Session
from app.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency providing one database session per request.
    The session is closed once the request completes, even on error.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
