"""ORM model for editor accounts."""

import uuid

from sqlalchemy import Column, String

from codepad.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    Registered account used for login.

    email is intentionally not unique: duplicate registrations are accepted.
    """

    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(255), nullable=False, default="")
    email = Column(String(255), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
