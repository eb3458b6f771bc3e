"""CRUD operations for users and their linked OAuth accounts."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.oauth_account import OAuthAccount
from src.models.user import User


async def get_oauth_account(
    db: AsyncSession,
    provider_id: str,
    provider_user_id: str,
) -> OAuthAccount | None:
    """Find the account linking a remote identity, if any."""
    result = await db.execute(
        select(OAuthAccount).where(
            OAuthAccount.provider_id == provider_id,
            OAuthAccount.provider_user_id == provider_user_id,
        )
    )
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Find a user by email address."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def add_oauth_account(
    db: AsyncSession,
    provider_id: str,
    provider_user_id: str,
    user_id: int,
) -> OAuthAccount:
    """Link a remote identity to a user. Flushes, the caller commits."""
    account = OAuthAccount(
        provider_id=provider_id,
        provider_user_id=provider_user_id,
        user_id=user_id,
    )
    db.add(account)
    await db.flush()
    return account


async def create_user_with_oauth_account(
    db: AsyncSession,
    *,
    email: str,
    name: str,
    avatar_url: str | None,
    provider_id: str,
    provider_user_id: str,
) -> User:
    """Stage a new user and its OAuth account in the current transaction.

    Nothing is committed here; a rollback by the caller discards both rows.
    """
    user = User(email=email, name=name, avatar_url=avatar_url)
    db.add(user)
    await db.flush()
    await add_oauth_account(db, provider_id, provider_user_id, user.id)
    return user
