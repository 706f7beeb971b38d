"""Favorites — synchronous wrapper around FavoritesAsync."""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any

from favoritefs._favorites_async import FavoritesAsync
from favoritefs.config import FavoritesConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from favoritefs.fs.types import NodeInfo


class Favorites:
    """Synchronous favorites API backed by a private event loop thread.

    All work happens in ``FavoritesAsync``; the loop lets callers use it
    from plain sync code or from inside an existing async context.

    Usage::

        with Favorites("sqlite+aiosqlite:///favorites.db") as favs:
            favs.mark_favorite("/alice/notes.md", "alice")
            nodes = favs.get_favorited_nodes("alice", ["staff"])
    """

    def __init__(
        self,
        source: str | FavoritesConfig,
        *,
        echo: bool = False,
        create_all: bool = False,
    ) -> None:
        if isinstance(source, FavoritesConfig):
            config = source
        else:
            config = FavoritesConfig(database_url=source, echo=echo, create_all=create_all)

        self._closed = False

        # Private event loop in a daemon thread
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever, daemon=True)
        self._thread.start()

        try:
            self._async: FavoritesAsync = self._run(FavoritesAsync.from_config(config))
        except BaseException:
            self._stop_loop()
            raise

    def _run(self, coro: Any) -> Any:
        """Submit *coro* to the private loop and block for the result."""
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        return future.result()

    def _stop_loop(self) -> None:
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)

    # ------------------------------------------------------------------
    # Favorite operations (sync)
    # ------------------------------------------------------------------

    def mark_favorite(self, path: str, user: str) -> None:
        """Favorite the node at *path* for *user*."""
        self._run(self._async.mark_favorite(path, user))

    def remove_favorite(self, path: str, user: str) -> None:
        """Remove the favorite on *path* for *user*, if present."""
        self._run(self._async.remove_favorite(path, user))

    def is_favorite(self, node_id: int | float, user: str) -> bool:
        """Return whether *user* has favorited the node *node_id*."""
        return self._run(self._async.is_favorite(node_id, user))

    def get_favorited_nodes(self, user: str, groups: Sequence[str] = ()) -> list[NodeInfo]:
        """Return the favorites of *user* visible through ownership or shares."""
        return self._run(self._async.get_favorited_nodes(user, groups))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Dispose the engine, stop the event loop and join the thread."""
        if self._closed:
            return
        self._closed = True

        try:
            self._run(self._async.close())
        finally:
            self._stop_loop()

    def __enter__(self) -> Favorites:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()
