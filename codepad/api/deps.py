"""Auth dependency shared by the protected routes."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from codepad.core.config import Settings, get_settings
from codepad.core.errors import AuthInvalidError, AuthMissingError
from codepad.schemas.auth import Claims
from codepad.services.auth import verify_token


def _extract_token(authorization: str | None) -> str | None:
    """The editor sends the raw token; a "Bearer " prefix is accepted as well."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return authorization.strip() or None


def get_current_claims(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> Claims:
    """Dependency: 401 when no token is sent, 403 when it is invalid or expired."""
    try:
        return verify_token(_extract_token(authorization), settings)
    except AuthMissingError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    except AuthInvalidError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message) from e
