"""Login failure kinds and their HTTP mapping."""

import enum

from fastapi import status


class LoginErrorKind(str, enum.Enum):
    """Why a login attempt failed."""

    PROVIDER_REJECTED = "provider_rejected"  # OAuth exchange refused by provider
    MISSING_EMAIL = "missing_email"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        """HTTP status returned to the browser for this kind."""
        if self is LoginErrorKind.INTERNAL:
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        return status.HTTP_400_BAD_REQUEST


class LoginError(Exception):
    """A login failure with a known kind."""

    def __init__(self, kind: LoginErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def classify_login_error(exc: BaseException) -> LoginErrorKind:
    """Map any exception raised during a login to a failure kind."""
    if isinstance(exc, LoginError):
        return exc.kind
    return LoginErrorKind.INTERNAL
