"""Schema bootstrap for the favorites table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from favoritefs.exceptions import SchemaInitError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine
    from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


async def _create_tables(engine: AsyncEngine, models: list[type[SQLModel]]) -> None:
    async with engine.begin() as conn:
        for model in models:
            await conn.run_sync(
                lambda c, m=model: m.__table__.create(c, checkfirst=True)  # type: ignore[attr-defined]
            )


async def init_favorites_table(
    engine: AsyncEngine,
    favorite_model: type[SQLModel] | None = None,
) -> None:
    """Create the favorites table if it does not exist.

    Failure is not recoverable: it is logged at CRITICAL and raised as
    ``SchemaInitError`` so startup stops.
    """
    if favorite_model is None:
        from favoritefs.models.favorites import Favorite

        favorite_model = Favorite

    try:
        await _create_tables(engine, [favorite_model])
    except SQLAlchemyError as e:
        logger.critical("Failed to create table %r: %s", favorite_model.__tablename__, e)
        raise SchemaInitError(f"Failed to create table {favorite_model.__tablename__!r}") from e

    logger.debug("Initialized %r table", favorite_model.__tablename__)


async def init_all_tables(engine: AsyncEngine) -> None:
    """Create the user, node, share and favorite tables if absent.

    The first three belong to other components; this is for development
    databases and tests.
    """
    from favoritefs.models import Favorite, Node, Share, User

    try:
        await _create_tables(engine, [User, Node, Share])
    except SQLAlchemyError as e:
        logger.critical("Failed to create node tables: %s", e)
        raise SchemaInitError("Failed to create node tables") from e

    await init_favorites_table(engine, Favorite)
