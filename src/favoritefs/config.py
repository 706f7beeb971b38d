"""Configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FavoritesConfig:
    """Connection settings for the favorites store.

    ``database_url`` must name an async SQLAlchemy driver, e.g.
    ``sqlite+aiosqlite:///favorites.db`` or ``postgresql+asyncpg://...``.
    """

    database_url: str
    echo: bool = False
    create_all: bool = False


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_config() -> FavoritesConfig:
    """Construct a FavoritesConfig from environment variables.

    Required environment variables:
        FAVORITEFS_DATABASE_URL: Async SQLAlchemy database URL.

    Optional environment variables (with defaults):
        FAVORITEFS_ECHO: Log every SQL statement (default: false).
        FAVORITEFS_CREATE_ALL: Also create the user, node and share
            tables on startup (default: false).

    Raises:
        KeyError: If FAVORITEFS_DATABASE_URL is not set.
    """
    return FavoritesConfig(
        database_url=os.environ["FAVORITEFS_DATABASE_URL"],
        echo=_env_flag("FAVORITEFS_ECHO"),
        create_all=_env_flag("FAVORITEFS_CREATE_ALL"),
    )
