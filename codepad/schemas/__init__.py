"""Pydantic request/response schemas."""

from codepad.schemas.auth import (
    Claims,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from codepad.schemas.health import HealthResponse
from codepad.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate

__all__ = [
    "Claims",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "RegisterRequest",
    "TokenResponse",
]
