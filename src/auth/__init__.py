"""Authentication module."""

from src.auth.dependencies import get_current_user, get_optional_session, get_optional_user
from src.auth.github import GitHubOAuthClient, get_github_oauth_client

__all__ = [
    "GitHubOAuthClient",
    "get_current_user",
    "get_github_oauth_client",
    "get_optional_session",
    "get_optional_user",
]
