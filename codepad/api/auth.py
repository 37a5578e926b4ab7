"""Register, login and the token check route."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from codepad.api.deps import get_current_claims
from codepad.core.config import Settings, get_settings
from codepad.core.database import get_db
from codepad.core.errors import (
    CodepadError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from codepad.schemas.auth import (
    Claims,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from codepad.services import auth as auth_service

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Create an account. Any failure is reported as 400."""
    try:
        auth_service.register_user(db, body.username, body.email, body.password, settings)
    except CodepadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Send it as the raw value of the Authorization header.
    """
    try:
        token = auth_service.login(db, body.email, body.password, settings)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    except CodepadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return TokenResponse(token=token)


@router.get("/protected", response_model=MessageResponse)
def protected(_claims: Annotated[Claims, Depends(get_current_claims)]) -> MessageResponse:
    return MessageResponse(message="Access granted!")
