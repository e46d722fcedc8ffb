"""Weather map routes."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from weather_service.deps import get_db
from weather_service.schemas.enums import MapType
from weather_service.schemas.weather import CreateWeatherMapRequest, WeatherMapResponse
from weather_service.storage.repositories import MapRepository

router = APIRouter()


@router.get("", response_model=List[WeatherMapResponse], operation_id="getWeatherMaps")
def get_weather_maps(
    region: Optional[str] = Query(None, description="Exact region label"),
    map_type: Optional[MapType] = Query(None, description="Filter by map type"),
    db: Session = Depends(get_db),
):
    return MapRepository(db).list_maps(region=region, map_type=map_type)


@router.post("", response_model=WeatherMapResponse, status_code=status.HTTP_201_CREATED, operation_id="createWeatherMap")
def create_weather_map(request: CreateWeatherMapRequest, db: Session = Depends(get_db)):
    return MapRepository(db).create_map(request)
