"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.session import validate_session_token
from src.constants import SESSION_COOKIE_NAME
from src.db import get_db
from src.models.session import Session
from src.models.user import User


async def get_optional_session(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> tuple[Session, User] | None:
    """Get the session and user for the request's session cookie, if valid."""
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        return None
    return await validate_session_token(db, token)


async def get_optional_user(
    current: Annotated[tuple[Session, User] | None, Depends(get_optional_session)],
) -> User | None:
    """Get current user from session if logged in."""
    if current is None:
        return None
    return current[1]


async def get_current_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Get current user, raising 401 if not authenticated."""
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user
