"""Request/response schemas for register, login and the auth dependency."""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """New account; all three fields must be present."""

    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email (exact match on login)")
    password: str = Field(..., description="Plain password; hashed before storage")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., description="Email used at registration")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """Signed access token returned after successful login."""

    token: str = Field(..., description="JWT access token; send raw in the Authorization header")


class MessageResponse(BaseModel):
    """Plain confirmation payload."""

    message: str


class Claims(BaseModel):
    """Verified token payload injected into protected routes."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId")
    username: str
    exp: int | None = None
