"""Project CRUD scoped by the caller's claims."""

import logging

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from codepad.core.errors import ProjectNotFoundError, StoreError
from codepad.models import Project

logger = logging.getLogger(__name__)


def _store_error(db: Session, action: str, e: SQLAlchemyError) -> StoreError:
    db.rollback()
    logger.exception("Failed to %s", action)
    return StoreError.from_exception(e)


def list_projects(db: Session, user_id: str) -> list[Project]:
    """Return the owner's projects, newest first. Empty list when there are none."""
    try:
        return (
            db.query(Project)
            .filter(Project.user_id == user_id)
            .order_by(desc(Project.created_at))
            .all()
        )
    except SQLAlchemyError as e:
        raise _store_error(db, "list projects", e) from e


def get_project(db: Session, project_id: str) -> Project:
    """
    Fetch a project by id alone. Any authenticated caller may read any
    project; ownership is not compared against the caller.
    """
    try:
        project = db.query(Project).filter(Project.id == project_id).first()
    except SQLAlchemyError as e:
        raise _store_error(db, "load project", e) from e
    if project is None:
        raise ProjectNotFoundError()
    return project


def create_project(
    db: Session,
    user_id: str,
    name: str | None = None,
    html_code: str | None = None,
    css_code: str | None = None,
    js_code: str | None = None,
) -> Project:
    """Create a project owned by user_id; missing fields are stored as empty strings."""
    project = Project(
        user_id=user_id,
        name=name or "",
        html_code=html_code or "",
        css_code=css_code or "",
        js_code=js_code or "",
    )
    try:
        db.add(project)
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, "create project", e) from e
    db.refresh(project)
    logger.info("Created project id=%s for user id=%s", project.id, user_id)
    return project


def update_project(
    db: Session,
    project_id: str,
    html_code: str | None = None,
    css_code: str | None = None,
    js_code: str | None = None,
) -> Project:
    """
    Overwrite the three code fields. A missing field is saved as "" rather
    than left unchanged, so an empty update clears the project's code.
    Name and owner are never touched.
    """
    project = get_project(db, project_id)
    project.html_code = html_code or ""
    project.css_code = css_code or ""
    project.js_code = js_code or ""
    try:
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, "save project code", e) from e
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: str) -> None:
    """Delete a project by id. Raises ProjectNotFoundError if it does not exist."""
    project = get_project(db, project_id)
    try:
        db.delete(project)
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, "delete project", e) from e
    logger.info("Deleted project id=%s", project_id)
