"""Serve the API with uvicorn."""
import uvicorn

from weather_service.config import settings


def main() -> None:
    uvicorn.run("weather_service.app:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT)


if __name__ == "__main__":
    main()
