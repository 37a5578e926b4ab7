"""Application error types raised by services and mapped to HTTP by the routes."""

from sqlalchemy.exc import SQLAlchemyError


class CodepadError(Exception):
    """Base class for all application errors; carries a client-safe message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(CodepadError):
    """Raised when input is missing or the store rejects a write."""


class NotFoundError(CodepadError):
    """Raised when a lookup by id or email yields nothing."""


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class ProjectNotFoundError(NotFoundError):
    def __init__(self, message: str = "Project not found") -> None:
        super().__init__(message)


class InvalidCredentialsError(CodepadError):
    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class AuthMissingError(CodepadError):
    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class AuthInvalidError(CodepadError):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class StoreError(CodepadError):
    """Raised when the database fails (connection, driver, constraint)."""

    @classmethod
    def from_exception(cls, e: SQLAlchemyError) -> "StoreError":
        """Build from a SQLAlchemy error, keeping only the driver message."""
        return cls(driver_message(e))


def driver_message(e: SQLAlchemyError) -> str:
    """The DBAPI error text without the SQL statement and params SQLAlchemy appends."""
    orig = getattr(e, "orig", None)
    return str(orig) if orig is not None else str(e)
