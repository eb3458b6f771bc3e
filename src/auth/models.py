"""Authentication-related Pydantic models."""

from pydantic import BaseModel


class GitHubUser(BaseModel):
    """GitHub user data from the /user endpoint."""

    id: int
    login: str
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    location: str | None = None

    @property
    def provider_user_id(self) -> str:
        """Remote identity id as stored on OAuthAccount."""
        return str(self.id)

    @property
    def display_name(self) -> str:
        return self.name or self.login


class GitHubEmail(BaseModel):
    """One entry from the /user/emails endpoint."""

    email: str
    primary: bool = False
    verified: bool = False
    visibility: str | None = None


class OAuthTokens(BaseModel):
    """Tokens returned by the authorization code exchange."""

    access_token: str
    token_type: str = "bearer"
    scope: str | None = None


class CurrentUserResponse(BaseModel):
    """Schema for the /me response."""

    id: int
    email: str
    name: str
    avatar_url: str | None = None
