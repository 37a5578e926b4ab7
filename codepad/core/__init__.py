"""Core app configuration and database."""

from codepad.core.config import get_settings, settings
from codepad.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
