"""Share model — grants visibility on a node to a user or a group.

The target is stored as two columns, ``target_kind`` and ``target_name``,
so user and group grants never share a namespace.
"""

from __future__ import annotations

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from favoritefs.targets import ShareTarget, make_target


class ShareBase(SQLModel):
    """Base fields for a share record. Subclass with ``table=True`` for a concrete table."""

    id: int | None = Field(default=None, primary_key=True)
    node_id: int = Field(index=True)
    target_kind: str = Field(index=True)
    target_name: str = Field(index=True)

    @property
    def target(self) -> ShareTarget:
        return make_target(self.target_kind, self.target_name)


class Share(ShareBase, table=True):
    """Default share table — ``favoritefs_shares``."""

    __tablename__ = "favoritefs_shares"
    __table_args__ = (
        UniqueConstraint(
            "node_id", "target_kind", "target_name", name="uq_favoritefs_shares_target"
        ),
    )

    node_id: int = Field(
        foreign_key="favoritefs_nodes.id", index=True, ondelete="CASCADE"
    )

    @classmethod
    def for_target(cls, node_id: int, target: ShareTarget) -> Share:
        """Build a share row granting *target* visibility on *node_id*."""
        return cls(node_id=node_id, target_kind=target.kind, target_name=target.name)
