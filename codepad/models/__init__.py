"""SQLAlchemy ORM models."""

from codepad.models.base import Base
from codepad.models.project import Project
from codepad.models.user import User

__all__ = ["Base", "Project", "User"]
