"""OAuth account link model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.user import User


class OAuthAccount(Base, TimestampMixin):
    """Binds a remote provider identity to a local user.

    The composite primary key allows at most one local user per remote
    identity per provider.
    """

    __tablename__ = "oauth_accounts"

    provider_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    provider_user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )

    user: Mapped["User"] = relationship("User", back_populates="oauth_accounts")

    def __repr__(self) -> str:
        return (
            f"<OAuthAccount(provider_id={self.provider_id}, "
            f"provider_user_id={self.provider_user_id}, user_id={self.user_id})>"
        )
