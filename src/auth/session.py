"""Database-backed login sessions.

The browser holds a random session token in a cookie. Only the SHA-256 digest
of the token is stored, so a leaked sessions table cannot be replayed as
cookies. Sessions last ``session_duration_days`` and are pushed forward when
a request arrives in the second half of their lifetime.
"""

import base64
import hashlib
import logging
import secrets
from datetime import UTC, datetime, timedelta

from fastapi import Response
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_settings
from src.constants import SESSION_COOKIE_NAME, SESSION_TOKEN_BYTES
from src.models.session import Session
from src.models.user import User

logger = logging.getLogger(__name__)


def generate_session_token() -> str:
    """Generate a random session token (lowercase base32, no padding)."""
    token_bytes = secrets.token_bytes(SESSION_TOKEN_BYTES)
    return base64.b32encode(token_bytes).decode("ascii").lower().rstrip("=")


def session_id_from_token(token: str) -> str:
    """Derive the stored session id from a cookie token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _session_duration() -> timedelta:
    return timedelta(days=get_settings().session_duration_days)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


async def create_session(db: AsyncSession, token: str, user_id: int) -> Session:
    """Stage a new session for the user, keyed by the token digest.

    Flushes only; the caller commits it together with any other login writes.
    """
    session = Session(
        id=session_id_from_token(token),
        user_id=user_id,
        expires_at=datetime.now(UTC) + _session_duration(),
    )
    db.add(session)
    await db.flush()
    logger.info(f"Created session for user {user_id}")
    return session


async def validate_session_token(
    db: AsyncSession, token: str
) -> tuple[Session, User] | None:
    """Resolve a cookie token to its session and user.

    Expired sessions are deleted and yield None.
    """
    result = await db.execute(
        select(Session, User)
        .join(User, Session.user_id == User.id)
        .where(Session.id == session_id_from_token(token))
    )
    row = result.first()
    if row is None:
        return None

    session, user = row
    now = datetime.now(UTC)
    expires_at = _as_utc(session.expires_at)

    if now >= expires_at:
        await db.delete(session)
        await db.commit()
        return None

    duration = _session_duration()
    if now >= expires_at - duration / 2:
        session.expires_at = now + duration
        await db.commit()

    return session, user


async def invalidate_session(db: AsyncSession, session_id: str) -> None:
    """Delete a session (logout)."""
    await db.execute(delete(Session).where(Session.id == session_id))
    await db.commit()


def set_session_token_cookie(response: Response, token: str, expires_at: datetime) -> None:
    """Attach the session cookie to a response."""
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        expires=_as_utc(expires_at),
        path="/",
        httponly=True,
        samesite="lax",
        secure=get_settings().is_production,
    )


def delete_session_token_cookie(response: Response) -> None:
    """Clear the session cookie on the client."""
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=get_settings().is_production,
    )
