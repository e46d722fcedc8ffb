"""Request and response models for the weather API."""
from datetime import datetime
from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, computed_field
from pydantic import ValidationError as PydanticValidationError

from weather_service import formatting
from weather_service.core.numeric import PRESSURE, TEMPERATURE, VISIBILITY, WIND_SPEED, column_limit
from weather_service.core.temporal import as_utc
from weather_service.schemas.enums import AlertSeverity, AlertType, MapType, WeatherCondition

# Instants leave the API as aware UTC datetimes.
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # Validate only; the URL is stored exactly as submitted.
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"Not an http(s) URL: {value!r}")
    return value


DataURL = Annotated[str, AfterValidator(_check_http_url)]


class CreateCityRequest(BaseModel):
    """New city."""
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class CreateWeatherDataRequest(BaseModel):
    """One observation for a city.

    Fractional fields are bounded by what their columns can hold.
    """
    model_config = ConfigDict(allow_inf_nan=False)

    city_id: int = Field(..., gt=0)
    temperature: float = Field(..., ge=-column_limit(*TEMPERATURE), le=column_limit(*TEMPERATURE))  # Celsius
    humidity: int = Field(..., ge=0, le=100)
    pressure: float = Field(..., gt=0, le=column_limit(*PRESSURE))  # hPa
    wind_speed: float = Field(..., ge=0, le=column_limit(*WIND_SPEED))  # km/h
    wind_direction: int = Field(..., ge=0, le=360)
    condition: WeatherCondition
    visibility: float = Field(..., ge=0, le=column_limit(*VISIBILITY))  # km
    recorded_at: UTCDateTime


class CreateWeatherAlertRequest(BaseModel):
    """New alert. Alerts always start out active."""
    city_id: int = Field(..., gt=0)
    type: AlertType
    severity: AlertSeverity
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    start_time: UTCDateTime
    end_time: Optional[UTCDateTime]


class CreateWeatherMapRequest(BaseModel):
    """Reference to externally hosted map imagery."""
    region: str = Field(..., min_length=1)
    map_type: MapType
    data_url: DataURL
    timestamp: UTCDateTime


class CityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    country: str
    latitude: float
    longitude: float
    created_at: UTCDateTime


class WeatherDataResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    city_id: int
    temperature: float
    humidity: int
    pressure: float
    wind_speed: float
    wind_direction: int
    condition: WeatherCondition
    visibility: float
    recorded_at: UTCDateTime
    created_at: UTCDateTime

    @computed_field
    @property
    def condition_label(self) -> str:
        return formatting.condition_label(self.condition)

    @computed_field
    @property
    def condition_emoji(self) -> str:
        return formatting.condition_emoji(self.condition)

    @computed_field
    @property
    def wind_compass(self) -> str:
        return formatting.wind_direction(self.wind_direction)

    @computed_field
    @property
    def temperature_description(self) -> str:
        return formatting.temperature_description(self.temperature)

    @computed_field
    @property
    def humidity_level(self) -> str:
        return formatting.humidity_level(self.humidity)

    @computed_field
    @property
    def visibility_description(self) -> str:
        return formatting.visibility_description(self.visibility)


class WeatherAlertResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    city_id: int
    type: AlertType
    severity: AlertSeverity
    title: str
    description: str
    start_time: UTCDateTime
    end_time: Optional[UTCDateTime]
    is_active: bool
    created_at: UTCDateTime

    @computed_field
    @property
    def emoji(self) -> str:
        return formatting.alert_emoji(self.type)

    @computed_field
    @property
    def severity_rank(self) -> int:
        """0 for low up to 3 for extreme."""
        return formatting.SEVERITY_RANK[self.severity]

    @computed_field
    @property
    def time_remaining(self) -> str:
        """Relative to the moment the response is rendered."""
        return formatting.time_remaining(self.end_time)


class WeatherMapResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    region: str
    map_type: MapType
    data_url: str
    timestamp: UTCDateTime
    created_at: UTCDateTime
