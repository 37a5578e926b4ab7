"""Project endpoints. Reads and writes by id are not restricted to the owner."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from codepad.api.deps import get_current_claims
from codepad.core.database import get_db
from codepad.core.errors import ProjectNotFoundError, StoreError
from codepad.models import Project
from codepad.schemas.auth import Claims, MessageResponse
from codepad.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from codepad.services import projects as project_service

router = APIRouter()


def _not_found(e: ProjectNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


def _server_error(e: StoreError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)


@router.get("/projects", response_model=list[ProjectResponse])
def list_projects(
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[Claims, Depends(get_current_claims)],
) -> list[Project]:
    """All projects owned by the caller, newest first."""
    try:
        return project_service.list_projects(db, claims.user_id)
    except StoreError as e:
        raise _server_error(e) from e


@router.get("/project/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: str,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[Claims, Depends(get_current_claims)],
) -> Project:
    try:
        return project_service.get_project(db, project_id)
    except ProjectNotFoundError as e:
        raise _not_found(e) from e
    except StoreError as e:
        raise _server_error(e) from e


@router.post("/project", response_model=ProjectResponse, status_code=201)
def create_project(
    body: ProjectCreate,
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[Claims, Depends(get_current_claims)],
) -> Project:
    """Create a project owned by the caller, whatever owner the body names."""
    try:
        return project_service.create_project(
            db,
            user_id=claims.user_id,
            name=body.name,
            html_code=body.html_code,
            css_code=body.css_code,
            js_code=body.js_code,
        )
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.put("/project/{project_id}", response_model=ProjectResponse)
def save_project_code(
    project_id: str,
    body: ProjectUpdate,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[Claims, Depends(get_current_claims)],
) -> Project:
    """Replace htmlCode, cssCode and jsCode; omitted fields are cleared."""
    try:
        return project_service.update_project(
            db,
            project_id,
            html_code=body.html_code,
            css_code=body.css_code,
            js_code=body.js_code,
        )
    except ProjectNotFoundError as e:
        raise _not_found(e) from e
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save project code",
        ) from e


@router.delete("/project/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: str,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[Claims, Depends(get_current_claims)],
) -> MessageResponse:
    try:
        project_service.delete_project(db, project_id)
    except ProjectNotFoundError as e:
        raise _not_found(e) from e
    except StoreError as e:
        raise _server_error(e) from e
    return MessageResponse(message="Project deleted successfully")
