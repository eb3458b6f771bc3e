"""CRUD operations module."""

from src.db.crud.accounts import (
    add_oauth_account,
    create_user_with_oauth_account,
    get_oauth_account,
    get_user_by_email,
)

__all__ = [
    "add_oauth_account",
    "create_user_with_oauth_account",
    "get_oauth_account",
    "get_user_by_email",
]
