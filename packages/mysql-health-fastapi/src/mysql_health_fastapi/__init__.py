"""FastAPI adapter for mysql-health classifications."""

from mysql_health_fastapi.app import create_app
from mysql_health_fastapi.routes import create_health_router
from mysql_health_fastapi.settings import get_database_settings, get_service_settings

__all__ = [
    "create_app",
    "create_health_router",
    "get_database_settings",
    "get_service_settings",
]
