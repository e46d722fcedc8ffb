"""Weather alert routes."""
from typing import List
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from weather_service.deps import get_db
from weather_service.schemas.weather import CreateWeatherAlertRequest, WeatherAlertResponse
from weather_service.storage.repositories import AlertRepository
from weather_service.app_logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{city_id}/active", response_model=List[WeatherAlertResponse], operation_id="getActiveAlerts")
def get_active_alerts(city_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Alerts in force for the city right now."""
    return AlertRepository(db).get_active_alerts(city_id)


@router.post(
    "",
    response_model=WeatherAlertResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createWeatherAlert",
)
def create_weather_alert(
    request: CreateWeatherAlertRequest,
    db: Session = Depends(get_db),
):
    """Issue an alert. New alerts are always active."""
    logger.info(f"Issuing {request.severity.value} {request.type.value} alert for city {request.city_id}")
    return AlertRepository(db).create_alert(request)
