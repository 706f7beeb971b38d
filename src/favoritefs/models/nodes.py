"""Node model — path-addressed files and directories.

Provides ``NodeBase`` (non-table) and ``Node`` (concrete table).  Nodes
are created and mutated by the node-management component and are only
read here.
"""

from __future__ import annotations

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel


class NodeBase(SQLModel):
    """Base fields for a node. Subclass with ``table=True`` for a concrete table."""

    id: int | None = Field(default=None, primary_key=True)
    owner: str = Field(index=True)
    path: str = Field(index=True)
    is_directory: bool = Field(default=False)
    mime_type: str = Field(default="text/plain")
    deleted: bool = Field(default=False)


class Node(NodeBase, table=True):
    """Default node table — ``favoritefs_nodes``.

    ``path`` is unique among live nodes only; soft-deleted rows may share
    a path with the live node that replaced them.
    """

    __tablename__ = "favoritefs_nodes"
    __table_args__ = (
        Index(
            "uq_favoritefs_nodes_live_path",
            "path",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
    )
