"""Tests for user and OAuth account CRUD operations."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.crud.accounts import (
    add_oauth_account,
    create_user_with_oauth_account,
    get_oauth_account,
    get_user_by_email,
)
from src.models import OAuthAccount, User


class TestLookups:
    """Tests for account and user lookups."""

    @pytest.mark.asyncio
    async def test_get_oauth_account(self, db_session: AsyncSession, linked_user: User):
        """Test finding a linked identity."""
        account = await get_oauth_account(db_session, "github", "4242")
        assert account is not None
        assert account.user_id == linked_user.id

    @pytest.mark.asyncio
    async def test_get_oauth_account_other_provider(
        self, db_session: AsyncSession, linked_user: User
    ):
        """Test lookups are scoped to the provider."""
        assert await get_oauth_account(db_session, "gitlab", "4242") is None

    @pytest.mark.asyncio
    async def test_get_user_by_email(self, db_session: AsyncSession, test_user: User):
        """Test finding a user by email."""
        user = await get_user_by_email(db_session, "octocat@example.com")
        assert user is not None
        assert user.id == test_user.id
        assert await get_user_by_email(db_session, "nobody@example.com") is None


class TestWrites:
    """Tests for inserting users and links."""

    @pytest.mark.asyncio
    async def test_create_user_with_oauth_account(self, db_session: AsyncSession):
        """Test the user and its link are both persisted."""
        user = await create_user_with_oauth_account(
            db_session,
            email="new@example.com",
            name="New",
            avatar_url=None,
            provider_id="github",
            provider_user_id="1",
        )

        assert user.id is not None
        account = await get_oauth_account(db_session, "github", "1")
        assert account is not None
        assert account.user_id == user.id

    @pytest.mark.asyncio
    async def test_add_oauth_account(self, db_session: AsyncSession, test_user: User):
        """Test linking an identity to an existing user."""
        await add_oauth_account(db_session, "github", "99", test_user.id)
        await db_session.commit()

        account = await get_oauth_account(db_session, "github", "99")
        assert account is not None
        assert account.user_id == test_user.id

    @pytest.mark.asyncio
    async def test_add_oauth_account_is_not_committed(
        self, db_session: AsyncSession, test_user: User
    ):
        """Test a staged link is discarded by a rollback."""
        await add_oauth_account(db_session, "github", "99", test_user.id)
        await db_session.rollback()

        assert await get_oauth_account(db_session, "github", "99") is None

    @pytest.mark.asyncio
    async def test_identity_links_to_one_user(
        self, db_session: AsyncSession, linked_user: User, test_user: User
    ):
        """Test the same remote identity cannot be linked twice."""
        linked_user_id = linked_user.id
        test_user_id = test_user.id
        db_session.expunge_all()

        with pytest.raises(IntegrityError):
            await add_oauth_account(db_session, "github", "4242", test_user_id)
        await db_session.rollback()

        result = await db_session.execute(select(OAuthAccount))
        accounts = result.scalars().all()
        assert len(accounts) == 1
        assert accounts[0].user_id == linked_user_id

    @pytest.mark.asyncio
    async def test_duplicate_email_creates_nothing(
        self, db_session: AsyncSession, test_user: User
    ):
        """Test a failed user insert leaves no account behind."""
        db_session.expunge_all()

        with pytest.raises(IntegrityError):
            await create_user_with_oauth_account(
                db_session,
                email="octocat@example.com",
                name="Dup",
                avatar_url=None,
                provider_id="github",
                provider_user_id="7",
            )
        await db_session.rollback()

        assert await get_oauth_account(db_session, "github", "7") is None
        result = await db_session.execute(select(User))
        assert len(result.scalars().all()) == 1
