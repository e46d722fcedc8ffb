"""City routes."""
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from weather_service.deps import get_db
from weather_service.schemas.weather import CityResponse, CreateCityRequest
from weather_service.storage.repositories import CityRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=List[CityResponse], operation_id="getAllCities")
def get_all_cities(db: Session = Depends(get_db)):
    """All cities ordered by name."""
    return CityRepository(db).list_cities()


@router.get("/search", response_model=List[CityResponse], operation_id="searchCities")
def search_cities(
    query: str = Query(..., min_length=1, description="Part of the city name"),
    db: Session = Depends(get_db),
):
    """Cities whose name contains ``query``, ignoring case."""
    cities = CityRepository(db).search_cities(query)
    logger.debug(f"City search '{query}' matched {len(cities)}")
    return cities


@router.post("", response_model=CityResponse, status_code=status.HTTP_201_CREATED, operation_id="createCity")
def create_city(
    request: CreateCityRequest,
    db: Session = Depends(get_db),
):
    logger.info(f"Creating city {request.name}, {request.country}")
    return CityRepository(db).create_city(request)
