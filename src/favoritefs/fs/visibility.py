"""VisibilityResolver — which nodes a user or group can currently reach.

A node is visible to a scope through exactly three rules, unioned in a
single query:

1. a share whose target is the scope,
2. descent from a directory shared with the scope,
3. ownership by the scope name.

The favorite queries intersect that set with the favorite index of the
requesting user.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import case, func, union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import aliased
from sqlmodel import select

from favoritefs.exceptions import PersistenceError
from favoritefs.targets import GroupTarget, ShareTarget, UserTarget

from .types import NodeInfo

if TYPE_CHECKING:
    from sqlalchemy import CompoundSelect, Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from favoritefs.models.favorites import FavoriteBase
    from favoritefs.models.nodes import NodeBase
    from favoritefs.models.shares import ShareBase

logger = logging.getLogger(__name__)


def _describe(scope: ShareTarget) -> str:
    if isinstance(scope, GroupTarget):
        return f"group {scope.name}"
    return f"user {scope.name}"


class VisibilityResolver:
    """Resolves visible and favorited nodes per scope.

    Receives the node, share and favorite models at construction so
    callers can use custom SQLModel subclasses with different table names.
    """

    def __init__(
        self,
        node_model: type[NodeBase],
        share_model: type[ShareBase],
        favorite_model: type[FavoriteBase],
    ) -> None:
        self._node_model = node_model
        self._share_model = share_model
        self._favorite_model = favorite_model

    # ------------------------------------------------------------------
    # Query construction
    # ------------------------------------------------------------------

    def _shared_with(self, scope: ShareTarget) -> Select:
        """Node ids carrying a share whose target is *scope*."""
        if not isinstance(scope, (UserTarget, GroupTarget)):
            raise TypeError(f"Unsupported share scope: {scope!r}")
        share = self._share_model
        return select(share.node_id).where(
            share.target_kind == scope.kind,
            share.target_name == scope.name,
        )

    def _visible_ids(self, scope: ShareTarget) -> CompoundSelect:
        """UNION of directly shared, subtree-of-shared and owned node ids."""
        node = self._node_model
        shared_dir = aliased(node)
        direct = self._shared_with(scope)

        # path starts with "<shared path>/", or just "/" when the root is shared;
        # substr avoids LIKE wildcards in paths
        prefix = case(
            (shared_dir.path == "/", "/"),
            else_=shared_dir.path.concat("/"),  # type: ignore[union-attr]
        )
        under_shared = (
            select(node.id)
            .join(shared_dir, func.substr(node.path, 1, func.length(prefix)) == prefix)
            .where(shared_dir.id.in_(direct))  # type: ignore[union-attr]
        )
        owned = select(node.id).where(node.owner == scope.name)
        return union(direct, under_shared, owned)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def _fetch(self, session: AsyncSession, stmt: Select, context: str) -> list[NodeInfo]:
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to get %s: %s", context, e)
            raise PersistenceError(f"Failed to get {context}") from e
        if result is None:
            logger.error("Error loading %s", context)
            raise PersistenceError(f"No result set while loading {context}")
        try:
            return [NodeInfo.from_node(row) for row in result.scalars().all()]
        except (SQLAlchemyError, ValueError) as e:
            logger.error("Error while reading %s: %s", context, e)
            raise PersistenceError(f"Failed to read {context}") from e

    async def visible_nodes(self, session: AsyncSession, scope: ShareTarget) -> list[NodeInfo]:
        """All nodes visible to *scope*, favorited or not, ordered by id."""
        node = self._node_model
        stmt = (
            select(node)
            .where(node.id.in_(self._visible_ids(scope)))  # type: ignore[union-attr]
            .order_by(node.id)
        )
        return await self._fetch(session, stmt, f"visible nodes for {_describe(scope)}")

    async def favorited_in_scope(
        self,
        session: AsyncSession,
        user: str,
        scope: ShareTarget,
    ) -> list[NodeInfo]:
        """Nodes favorited by *user* and visible to *scope*, ordered by id."""
        node = self._node_model
        fav = self._favorite_model
        favorited = select(fav.node_id).where(fav.username == user)
        stmt = (
            select(node)
            .where(
                node.id.in_(self._visible_ids(scope)),  # type: ignore[union-attr]
                node.id.in_(favorited),  # type: ignore[union-attr]
            )
            .order_by(node.id)
        )
        return await self._fetch(
            session, stmt, f"favorited nodes of {user} via {_describe(scope)}"
        )

    async def favorited_for_user(self, session: AsyncSession, user: str) -> list[NodeInfo]:
        """Favorites of *user* reachable through ownership or shares to *user*."""
        return await self.favorited_in_scope(session, user, UserTarget(user))

    async def favorited_for_group(
        self,
        session: AsyncSession,
        user: str,
        group: str,
    ) -> list[NodeInfo]:
        """Favorites of *user* reachable through shares to (or ownership by) *group*."""
        return await self.favorited_in_scope(session, user, GroupTarget(group))
