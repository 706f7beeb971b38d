"""FavoritesAsync — async facade over the favorites services."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from favoritefs.database import create_engine
from favoritefs.fs.aggregator import FavoriteAggregator
from favoritefs.fs.mutation import FavoriteService
from favoritefs.fs.schema import init_all_tables, init_favorites_table
from favoritefs.fs.visibility import VisibilityResolver

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

    from favoritefs.config import FavoritesConfig
    from favoritefs.fs.types import NodeInfo
    from favoritefs.models.favorites import FavoriteBase
    from favoritefs.models.nodes import NodeBase
    from favoritefs.models.shares import ShareBase


class FavoritesAsync:
    """Async entry point for marking, checking and listing favorites.

    The session factory is injected; every public method runs in its
    own session and transaction, committed on success and rolled back
    on error.

    Usage::

        engine, factory = create_engine(load_config())
        await init_favorites_table(engine)
        favorites = FavoritesAsync(factory)
        await favorites.mark_favorite("/alice/notes.md", "alice")
        nodes = await favorites.get_favorited_nodes("alice", ["staff"])
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        node_model: type[NodeBase] | None = None,
        share_model: type[ShareBase] | None = None,
        favorite_model: type[FavoriteBase] | None = None,
        engine: AsyncEngine | None = None,
    ) -> None:
        from favoritefs.models import Favorite, Node, Share

        self._session_factory = session_factory
        self._engine = engine
        self._closed = False

        nm = node_model or Node
        sm = share_model or Share
        fm = favorite_model or Favorite
        self._mutation = FavoriteService(nm, fm)
        self._resolver = VisibilityResolver(nm, sm, fm)
        self._aggregator = FavoriteAggregator(self._resolver)

    @classmethod
    async def from_config(cls, config: FavoritesConfig) -> FavoritesAsync:
        """Create an engine from *config*, bootstrap the schema and open a facade.

        The facade owns the engine and disposes it on ``close()``.
        Raises ``SchemaInitError`` if the schema cannot be created.
        """
        engine, session_factory = create_engine(config)
        try:
            if config.create_all:
                await init_all_tables(engine)
            else:
                await init_favorites_table(engine)
        except Exception:
            await engine.dispose()
            raise
        return cls(session_factory, engine=engine)

    # ------------------------------------------------------------------
    # Session Management (per-operation only)
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession]:
        """Yield a session, committing on success and rolling back on error."""
        if self._closed:
            raise RuntimeError("FavoritesAsync is closed")
        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    # ------------------------------------------------------------------
    # Favorite operations
    # ------------------------------------------------------------------

    async def mark_favorite(self, path: str, user: str) -> None:
        """Favorite the node at *path* for *user*.

        Raises ``PersistenceError`` if the node or user does not exist or
        the node is already a favorite.
        """
        async with self._session() as session:
            await self._mutation.mark(session, path, user)

    async def remove_favorite(self, path: str, user: str) -> None:
        """Remove the favorite on *path* for *user*. Absence is not an error."""
        async with self._session() as session:
            await self._mutation.remove(session, path, user)

    async def is_favorite(self, node_id: int | float, user: str) -> bool:
        """Return whether *user* has favorited the node *node_id*."""
        async with self._session() as session:
            return await self._mutation.is_favorite(session, node_id, user)

    async def get_favorited_nodes(
        self,
        user: str,
        groups: Sequence[str] = (),
    ) -> list[NodeInfo]:
        """Return the favorites of *user* currently visible to them.

        *groups* are the groups the caller belongs to, as reported by the
        membership service.
        """
        async with self._session() as session:
            return await self._aggregator.get_favorited_nodes(session, user, groups)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Dispose the engine if this facade created it."""
        if self._closed:
            return
        self._closed = True
        if self._engine is not None:
            await self._engine.dispose()

    async def __aenter__(self) -> FavoritesAsync:
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.close()
