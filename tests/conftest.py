"""Shared fixtures for favoritefs tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import Session, SQLModel, create_engine

from favoritefs.database import enable_sqlite_foreign_keys
from favoritefs.models import Node, Share, User
from favoritefs.targets import GroupTarget, UserTarget

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from sqlalchemy import Engine
    from sqlalchemy.ext.asyncio import AsyncEngine


# ---------------------------------------------------------------------------
# Sample tree
# ---------------------------------------------------------------------------

USERS = ["alice", "bob", "carol"]

# (path, owner, is_directory)
NODES = [
    ("/alice", "alice", True),
    ("/alice/notes.md", "alice", False),
    ("/bob", "bob", True),
    ("/bob/shared", "bob", True),
    ("/bob/shared/sub", "bob", True),
    ("/bob/shared/sub/file.txt", "bob", False),
    ("/bob/shared2.txt", "bob", False),
    ("/bob/private.txt", "bob", False),
    ("/team", "eng", True),
    ("/team/plan.md", "eng", False),
    ("/carol", "carol", True),
    ("/carol/report.pdf", "carol", False),
    ("/carol/both.txt", "carol", False),
]

# (path, target)
SHARES = [
    ("/bob/shared", UserTarget("alice")),
    ("/carol/report.pdf", GroupTarget("g1")),
    ("/carol/both.txt", UserTarget("alice")),
    ("/carol/both.txt", GroupTarget("g1")),
]


def populate(session: Session) -> dict[str, int]:
    """Insert the sample users, nodes and shares. Returns ``{path: node_id}``."""
    for name in USERS:
        session.add(User(username=name))
    nodes = {}
    for path, owner, is_dir in NODES:
        node = Node(
            owner=owner,
            path=path,
            is_directory=is_dir,
            mime_type="inode/directory" if is_dir else "text/plain",
        )
        session.add(node)
        nodes[path] = node
    session.flush()
    for path, target in SHARES:
        session.add(Share.for_target(nodes[path].id, target))
    session.flush()
    return {path: node.id for path, node in nodes.items()}


# ---------------------------------------------------------------------------
# Engines and sessions
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> Engine:
    """In-memory SQLite engine with foreign keys on and all tables created."""
    eng = create_engine("sqlite://", echo=False)
    enable_sqlite_foreign_keys(eng)
    SQLModel.metadata.create_all(eng)
    return eng


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """SQLModel session bound to the in-memory engine, rolled back after each test."""
    with Session(engine) as s:
        s.begin()
        yield s
        s.rollback()


@pytest.fixture
async def async_engine() -> AsyncIterator[AsyncEngine]:
    """Async in-memory SQLite engine with foreign keys on and all tables created."""
    eng = create_async_engine("sqlite+aiosqlite://", echo=False)
    enable_sqlite_foreign_keys(eng)
    async with eng.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Async session factory bound to the in-memory engine."""
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def async_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Async SQLModel session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def world(session_factory: async_sessionmaker[AsyncSession]) -> dict[str, int]:
    """Committed sample tree. Returns ``{path: node_id}``."""
    async with session_factory() as s:
        ids = await s.run_sync(populate)
        await s.commit()
    return ids


@pytest.fixture
def sample_db(tmp_path) -> tuple[str, dict[str, int]]:
    """SQLite file holding the committed sample tree.

    Returns ``(async_url, {path: node_id})``.
    """
    db = tmp_path / "favorites.db"
    eng = create_engine(f"sqlite:///{db}", echo=False)
    enable_sqlite_foreign_keys(eng)
    SQLModel.metadata.create_all(eng)
    with Session(eng) as s:
        ids = populate(s)
        s.commit()
    eng.dispose()
    return f"sqlite+aiosqlite:///{db}", ids
