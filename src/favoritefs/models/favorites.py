"""Favorite model — the (node, user) favorite index.

One row per favorited pair.  The composite primary key is the
uniqueness constraint; the foreign keys make the database reject
favorites on missing nodes or unknown users.
"""

from __future__ import annotations

from sqlmodel import Field, SQLModel


class FavoriteBase(SQLModel):
    """Base fields for a favorite record. Subclass with ``table=True`` for a concrete table."""

    node_id: int = Field(primary_key=True)
    username: str = Field(primary_key=True)


class Favorite(FavoriteBase, table=True):
    """Default favorite table — ``favoritefs_favorites``.

    Rows disappear with their node or user through ``ON DELETE CASCADE``.
    """

    __tablename__ = "favoritefs_favorites"

    node_id: int = Field(
        foreign_key="favoritefs_nodes.id", primary_key=True, ondelete="CASCADE"
    )
    username: str = Field(
        foreign_key="favoritefs_users.username", primary_key=True, ondelete="CASCADE"
    )
