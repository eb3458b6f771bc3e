"""SQLAlchemy models."""

from src.models.base import Base
from src.models.oauth_account import OAuthAccount
from src.models.session import Session
from src.models.user import User

__all__ = [
    "Base",
    "OAuthAccount",
    "Session",
    "User",
]
