"""Main FastAPI application."""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, ORJSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_service import __version__
from weather_service.config import settings
from weather_service.errors import WeatherServiceError
from weather_service.middleware import REQUEST_ID_HEADER, RequestIdMiddleware
from weather_service.routes import health, cities, weather, alerts, maps
from weather_service.storage.db import Database
from weather_service.app_logging import setup_logging, get_logger

logger = get_logger(__name__)


def _error_body(message: str, error_type: str, **extra) -> dict:
    return {"error": {"message": message, "type": error_type, **extra}}


def _validation_details(exc: RequestValidationError) -> list:
    # Submitted values are left out; a NaN input would not render as JSON.
    return [{"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]} for error in exc.errors()]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.detail, "http_error"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body("Validation error", "validation_error", details=_validation_details(exc)),
        )

    @app.exception_handler(WeatherServiceError)
    async def service_exception_handler(request: Request, exc: WeatherServiceError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.error_type),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=_error_body("Store unavailable", "store_error"),
        )


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    ``database`` is opened by the caller when given; otherwise one is built
    from settings at startup and disposed at shutdown.
    """
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting Weather API - Environment: {settings.ENVIRONMENT}")
        owned = database is None
        app.state.database = Database.from_settings(settings) if owned else database
        app.state.database.init_db()
        yield
        if owned:
            app.state.database.dispose()
        logger.info("Shutting down Weather API")

    app = FastAPI(
        title="Weather API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(cities.router, prefix="/api/cities", tags=["cities"])
    app.include_router(weather.router, prefix="/api/weather", tags=["weather"])
    app.include_router(alerts.router, prefix="/api/alerts", tags=["alerts"])
    app.include_router(maps.router, prefix="/api/maps", tags=["maps"])

    @app.get("/", include_in_schema=False)
    async def root():
        return {"message": "Weather API", "documentation": "/docs"}

    return app


app = create_app()
