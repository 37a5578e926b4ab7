"""ORM model for editor projects (HTML/CSS/JS source blobs)."""

import uuid

from sqlalchemy import Column, DateTime, String, Text

from codepad.models.base import Base, TimestampMixin, utcnow


class Project(Base, TimestampMixin):
    """
    One editor project owned by the user who created it.

    user_id is the owner's id stored as an opaque string (no foreign key) and
    is never changed after creation; neither is name.
    """

    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, default="")
    user_id = Column(String(64), nullable=False, index=True)
    html_code = Column(Text, nullable=False, default="")
    css_code = Column(Text, nullable=False, default="")
    js_code = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
