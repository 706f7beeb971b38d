"""FavoriteService — add, remove and check favorite records.

Stateless service that receives the node and favorite models at
construction and a session at call time, following the SharingService
pattern.  Referential checks are left to the database: a missing node,
an unknown user and a duplicate pair all surface as ``PersistenceError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from favoritefs.exceptions import PersistenceError

from .utils import node_id_from_handle, normalize_path

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from favoritefs.models.favorites import FavoriteBase
    from favoritefs.models.nodes import NodeBase

logger = logging.getLogger(__name__)


class FavoriteService:
    """Manages the favorite index.

    Constructor receives the concrete models so callers can use custom
    SQLModel subclasses with different table names.
    """

    def __init__(
        self,
        node_model: type[NodeBase],
        favorite_model: type[FavoriteBase],
    ) -> None:
        self._node_model = node_model
        self._favorite_model = favorite_model

    async def mark(self, session: AsyncSession, path: str, user: str) -> None:
        """Favorite the live node at *path* for *user*. Flushes but does not commit.

        The node id is looked up inside the INSERT, so an unknown path
        yields a NULL id and the NOT NULL constraint rejects the row.
        """
        path = normalize_path(path)
        node = self._node_model
        fav = self._favorite_model
        node_id = (
            select(node.id)
            .where(node.path == path, node.deleted.is_(False))  # type: ignore[union-attr]
            .scalar_subquery()
        )
        try:
            await session.execute(insert(fav).values(node_id=node_id, username=user))
            await session.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to mark node at path %s as favorite for user %s: %s", path, user, e
            )
            raise PersistenceError(
                f"Failed to mark {path!r} as favorite for {user!r}"
            ) from e

    async def remove(self, session: AsyncSession, path: str, user: str) -> None:
        """Remove the favorite on *path* for *user*, if present.

        Absence is not an error: once this returns, the pair is
        guaranteed not to exist.
        """
        path = normalize_path(path)
        node = self._node_model
        fav = self._favorite_model
        try:
            await session.execute(
                delete(fav).where(
                    fav.node_id.in_(select(node.id).where(node.path == path)),  # type: ignore[union-attr]
                    fav.username == user,
                )
            )
            await session.flush()
        except SQLAlchemyError as e:
            logger.error(
                "Failed to unmark node at path %s as favorite for user %s: %s", path, user, e
            )
            raise PersistenceError(
                f"Failed to remove favorite {path!r} for {user!r}"
            ) from e

    async def is_favorite(
        self,
        session: AsyncSession,
        node_id: int | float,
        user: str,
    ) -> bool:
        """Check if *user* has favorited the node identified by *node_id*."""
        nid = node_id_from_handle(node_id)
        fav = self._favorite_model
        try:
            result = await session.execute(
                select(func.count()).select_from(fav).where(
                    fav.node_id == nid,
                    fav.username == user,
                )
            )
            count = result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("Failed to verify if favorite record exists: %s", e)
            raise PersistenceError(
                f"Failed to check favorite {nid} for {user!r}"
            ) from e
        return count > 0
