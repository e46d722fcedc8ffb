"""Weather observation routes."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from weather_service.deps import get_db
from weather_service.schemas.weather import CreateWeatherDataRequest, WeatherDataResponse
from weather_service.storage.repositories import WeatherRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{city_id}", response_model=Optional[WeatherDataResponse], operation_id="getWeatherByCity")
def get_weather_by_city(city_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Latest observation for the city, or null when there is none."""
    return WeatherRepository(db).get_latest(city_id)


@router.get("/{city_id}/history", response_model=List[WeatherDataResponse], operation_id="getWeatherHistory")
def get_weather_history(city_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Every observation for the city, most recent first."""
    return WeatherRepository(db).get_history(city_id)


@router.post(
    "",
    response_model=WeatherDataResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createWeatherData",
)
def create_weather_data(
    request: CreateWeatherDataRequest,
    db: Session = Depends(get_db),
):
    logger.info(f"Recording weather for city {request.city_id}")
    return WeatherRepository(db).create_weather_data(request)
