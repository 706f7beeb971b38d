"""User model — account names referenced by favorites.

Accounts are owned by the user-management component; this package only
needs the table to exist so favorites can reference it.
"""

from __future__ import annotations

from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    """Base fields for a user account. Subclass with ``table=True`` for a concrete table."""

    username: str = Field(primary_key=True)


class User(UserBase, table=True):
    """Default user table — ``favoritefs_users``."""

    __tablename__ = "favoritefs_users"
