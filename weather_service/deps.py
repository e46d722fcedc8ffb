"""Common dependencies."""
from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from weather_service.storage.db import Database


def get_database(request: Request) -> Database:
    """Store handle opened by the application lifespan."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """Database session dependency."""
    yield from get_database(request).get_db()
