"""Settings, database sessions, the error taxonomy and auth primitives."""

from app.core.config import get_settings, settings
from app.core.database import get_db

__all__ = ["get_settings", "get_db", "settings"]
