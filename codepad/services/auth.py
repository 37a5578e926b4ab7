"""Register, login and token verification for editor accounts."""

import logging
from typing import TYPE_CHECKING

import jwt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from codepad.core.errors import (
    AuthInvalidError,
    AuthMissingError,
    InvalidCredentialsError,
    StoreError,
    UserNotFoundError,
    ValidationError,
    driver_message,
)
from codepad.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from codepad.models import User
from codepad.schemas.auth import Claims

if TYPE_CHECKING:
    from codepad.core.config import Settings

logger = logging.getLogger(__name__)


def register_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    settings: "Settings",
) -> User:
    """
    Persist a new user with a bcrypt digest of the password.

    Email uniqueness is not enforced; a second registration with the same
    email creates another account. Raises ValidationError if the store
    rejects the row.
    """
    if not password:
        raise ValidationError("Password is required")
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password, settings.BCRYPT_ROUNDS),
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError(driver_message(e)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to register user")
        raise ValidationError(driver_message(e)) from e
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def login(db: Session, email: str, password: str, settings: "Settings") -> str:
    """Check credentials for the first user with this email; return a signed token."""
    try:
        user = db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("User lookup failed during login")
        raise StoreError.from_exception(e) from e
    if user is None:
        raise UserNotFoundError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return create_access_token(user.id, user.username, settings)


def verify_token(token: str | None, settings: "Settings") -> Claims:
    """
    Return the claims of a valid token. Stateless: only the signature and
    expiry are checked, nothing is looked up in the store.
    """
    if not token:
        raise AuthMissingError()
    try:
        payload = decode_access_token(token, settings)
    except jwt.PyJWTError as e:
        raise AuthInvalidError() from e
    if not isinstance(payload.get("userId"), str) or not isinstance(payload.get("username"), str):
        raise AuthInvalidError("Invalid token payload")
    return Claims.model_validate(payload)
