"""API routes module."""
from . import health
from . import cities
from . import weather
from . import alerts
from . import maps

__all__ = ["health", "cities", "weather", "alerts", "maps"]
