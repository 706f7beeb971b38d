"""FavoriteAggregator — merge favorites across a user's own and group scopes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.ext.asyncio import AsyncSession

    from .types import NodeInfo
    from .visibility import VisibilityResolver

logger = logging.getLogger(__name__)


class FavoriteAggregator:
    """Unions per-scope favorite lookups into one deduplicated list.

    The user scope is always resolved first, then each group in the
    order given.  A node already collected from an earlier scope is not
    added again (first seen wins).  Any resolver failure propagates
    immediately; partial results are never returned.
    """

    def __init__(self, resolver: VisibilityResolver) -> None:
        self._resolver = resolver

    async def get_favorited_nodes(
        self,
        session: AsyncSession,
        user: str,
        groups: Iterable[str] = (),
    ) -> list[NodeInfo]:
        """Return every node favorited by *user* and visible to them."""
        nodes = await self._resolver.favorited_for_user(session, user)
        seen = {n.id for n in nodes}

        for group in groups:
            for node in await self._resolver.favorited_for_group(session, user, group):
                if node.id in seen:
                    continue
                seen.add(node.id)
                nodes.append(node)

        logger.debug("Resolved %d favorited nodes for user %s", len(nodes), user)
        return nodes
