"""Shared persistence helpers for repositories."""
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from weather_service.errors import StoreError, WeatherServiceError
from weather_service.storage.models import City
from weather_service.app_logging import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """Holds the session and knows how to commit a new row."""

    def __init__(self, db: Session):
        self.db = db

    def city_exists(self, city_id: int) -> bool:
        return self.db.query(City.id).filter(City.id == city_id).first() is not None

    def _persist(self, record, on_integrity_error: WeatherServiceError):
        """Insert ``record`` and return it as re-read from the store.

        A constraint violation is reported as ``on_integrity_error``; any
        other store failure as :class:`StoreError`.
        """
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Constraint violation on {type(record).__name__}: {e.orig}")
            raise on_integrity_error from e
        except SQLAlchemyError as e:
            self.db.rollback()
            entity = type(record).__name__
            logger.error(f"Failed to store {entity}: {e}")
            raise StoreError(f"Failed to store {entity}") from e

        self.db.refresh(record)
        return record
