"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth import get_current_user, get_github_oauth_client, get_optional_session
from src.auth.errors import LoginError, LoginErrorKind, classify_login_error
from src.auth.github import GitHubOAuthClient
from src.auth.models import CurrentUserResponse, GitHubUser, OAuthTokens
from src.auth.session import (
    create_session,
    delete_session_token_cookie,
    generate_session_token,
    invalidate_session,
    set_session_token_cookie,
)
from src.config import get_settings
from src.constants import (
    GITHUB_OAUTH_STATE_COOKIE,
    OAUTH_STATE_BYTES,
    OAUTH_STATE_MAX_AGE,
    PROVIDER_GITHUB,
)
from src.db import get_db
from src.db.crud.accounts import (
    add_oauth_account,
    create_user_with_oauth_account,
    get_oauth_account,
    get_user_by_email,
)
from src.models.session import Session
from src.models.user import User
from src.utils.logging import LogContext
from src.utils.secrets import constant_time_equals, generate_secure_key, mask_secret

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


# ============== Helpers ==============


async def _reconcile_github_user(
    db: AsyncSession,
    github: GitHubOAuthClient,
    tokens: OAuthTokens,
    github_user: GitHubUser,
    log: LogContext,
) -> int:
    """Return the local user id for a GitHub identity, staging rows as needed.

    Order: linked account, then existing user with the same email, then a
    brand new user. New rows are flushed but not committed.
    """
    account = await get_oauth_account(db, PROVIDER_GITHUB, github_user.provider_user_id)
    if account:
        log.info(f"Existing account for user {account.user_id}")
        return account.user_id

    # email is null when the user keeps it private on their profile
    email = github_user.email
    if email is None:
        email = await github.get_primary_email(tokens.access_token)
    if not email:
        raise LoginError(LoginErrorKind.MISSING_EMAIL, "No email address available from GitHub")

    user = await get_user_by_email(db, email)
    if user:
        await add_oauth_account(db, PROVIDER_GITHUB, github_user.provider_user_id, user.id)
        log.info(f"Linked GitHub identity to existing user {user.id}")
        return user.id

    user = await create_user_with_oauth_account(
        db,
        email=email,
        name=github_user.display_name,
        avatar_url=github_user.avatar_url,
        provider_id=PROVIDER_GITHUB,
        provider_user_id=github_user.provider_user_id,
    )
    log.info(f"Created user {user.id}")
    return user.id


def _state_cookie_kwargs() -> dict:
    return {
        "path": "/",
        "httponly": True,
        "samesite": "lax",
        "secure": settings.is_production,
    }


# ============== GitHub OAuth ==============


@router.get("/login/github")
async def github_login(
    github: Annotated[GitHubOAuthClient, Depends(get_github_oauth_client)],
) -> RedirectResponse:
    """Initiate GitHub OAuth login."""
    state = generate_secure_key(OAUTH_STATE_BYTES)
    response = RedirectResponse(url=github.authorization_url(state), status_code=302)
    response.set_cookie(
        GITHUB_OAUTH_STATE_COOKIE,
        state,
        max_age=OAUTH_STATE_MAX_AGE,
        **_state_cookie_kwargs(),
    )
    return response


@router.get("/callback/github")
async def github_callback(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    github: Annotated[GitHubOAuthClient, Depends(get_github_oauth_client)],
    code: str | None = None,
    state: str | None = None,
) -> Response:
    """Handle the redirect back from GitHub and log the user in."""
    stored_state = request.cookies.get(GITHUB_OAUTH_STATE_COOKIE)
    if (
        not code
        or not state
        or not stored_state
        or not constant_time_equals(state, stored_state)
    ):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    log = LogContext(logger, provider=PROVIDER_GITHUB)

    try:
        tokens = await github.validate_authorization_code(code)
        log.debug(f"Exchanged code for token {mask_secret(tokens.access_token)}")
        github_user = await github.get_user(tokens.access_token)
        log = log.bind(github_id=github_user.provider_user_id)

        user_id = await _reconcile_github_user(db, github, tokens, github_user, log)

        token = generate_session_token()
        session = await create_session(db, token, user_id)
        # account links, new user and session land in a single commit
        await db.commit()
    except Exception as e:
        await db.rollback()
        kind = classify_login_error(e)
        if kind is LoginErrorKind.INTERNAL:
            log.exception("GitHub login failed")
        else:
            log.warning(f"GitHub login refused ({kind.value}): {e}")
        return Response(status_code=kind.status_code)

    response = RedirectResponse(url="/", status_code=302)
    set_session_token_cookie(response, token, session.expires_at)
    response.delete_cookie(GITHUB_OAUTH_STATE_COOKIE, **_state_cookie_kwargs())
    return response


# ============== Common ==============


@router.post("/logout")
async def logout(
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[tuple[Session, User] | None, Depends(get_optional_session)],
) -> RedirectResponse:
    """Log out the current user."""
    if current is not None:
        session, user = current
        await invalidate_session(db, session.id)
        logger.info(f"User {user.id} logged out")

    response = RedirectResponse(url="/", status_code=302)
    delete_session_token_cookie(response)
    return response


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(user: Annotated[User, Depends(get_current_user)]) -> CurrentUserResponse:
    """Get current authenticated user."""
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        avatar_url=user.avatar_url,
    )
