"""GitHub OAuth client: authorization code exchange and profile lookups."""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.httpx_client import AsyncOAuth2Client
from pydantic import TypeAdapter

from src.auth.errors import LoginError, LoginErrorKind
from src.auth.models import GitHubEmail, GitHubUser, OAuthTokens
from src.config import get_settings
from src.constants import (
    GITHUB_AUTHORIZE_URL,
    GITHUB_OAUTH_SCOPE,
    GITHUB_TOKEN_URL,
    GITHUB_USER_EMAILS_URL,
    GITHUB_USER_URL,
    HTTPX_TIMEOUT,
)

logger = logging.getLogger(__name__)

_emails_adapter = TypeAdapter(list[GitHubEmail])


class GitHubOAuthClient:
    """Talks to GitHub on behalf of the login flow.

    A fresh httpx client is opened per call so that no token state is shared
    between concurrent requests. ``transport`` lets callers route requests
    through a custom httpx transport.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self._transport = transport

    def authorization_url(self, state: str) -> str:
        """Build the GitHub consent page URL for the given state."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": GITHUB_OAUTH_SCOPE,
            "state": state,
        }
        return f"{GITHUB_AUTHORIZE_URL}?{urlencode(params)}"

    async def validate_authorization_code(self, code: str) -> OAuthTokens:
        """Exchange an authorization code for an access token.

        Raises:
            LoginError: PROVIDER_REJECTED when GitHub refuses the code
                (expired, already redeemed, wrong client).
        """
        async with AsyncOAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
            token_endpoint_auth_method="client_secret_post",
            timeout=HTTPX_TIMEOUT,
            transport=self._transport,
        ) as client:
            try:
                token = await client.fetch_token(GITHUB_TOKEN_URL, code=code)
            except AuthlibBaseError as e:
                raise LoginError(
                    LoginErrorKind.PROVIDER_REJECTED,
                    f"GitHub rejected authorization code: {e.error}",
                ) from e

        return OAuthTokens.model_validate(dict(token))

    async def get_user(self, access_token: str) -> GitHubUser:
        """Fetch the authenticated user's profile."""
        data = await self._get_json(GITHUB_USER_URL, access_token)
        return GitHubUser.model_validate(data)

    async def get_emails(self, access_token: str) -> list[GitHubEmail]:
        """Fetch all email addresses of the authenticated user."""
        data = await self._get_json(GITHUB_USER_EMAILS_URL, access_token)
        return _emails_adapter.validate_python(data)

    async def get_primary_email(self, access_token: str) -> str | None:
        """Return the address flagged as primary, if GitHub reports one."""
        emails = await self.get_emails(access_token)
        for entry in emails:
            if entry.primary:
                return entry.email
        logger.debug(f"No primary email among {len(emails)} GitHub addresses")
        return None

    async def _get_json(self, url: str, access_token: str) -> Any:
        async with httpx.AsyncClient(timeout=HTTPX_TIMEOUT, transport=self._transport) as client:
            response = await client.get(
                url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
            )
            response.raise_for_status()
            return response.json()


def get_github_oauth_client() -> GitHubOAuthClient:
    """Dependency providing a GitHub client configured from settings."""
    settings = get_settings()
    return GitHubOAuthClient(
        client_id=settings.github_client_id,
        client_secret=settings.github_client_secret,
        redirect_uri=settings.github_redirect_uri,
    )
