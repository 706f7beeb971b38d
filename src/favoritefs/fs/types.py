"""Result types crossing the favorites boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from favoritefs.models.nodes import NodeBase


@dataclass
class NodeInfo:
    """Node metadata returned by resolution and aggregation."""

    id: int
    owner: str
    path: str
    is_directory: bool
    mime_type: str
    deleted: bool = False

    @classmethod
    def from_node(cls, node: NodeBase) -> NodeInfo:
        """Materialize a node row into a NodeInfo."""
        if node.id is None:
            raise ValueError(f"Node at {node.path!r} has no id")
        return cls(
            id=node.id,
            owner=node.owner,
            path=node.path,
            is_directory=node.is_directory,
            mime_type=node.mime_type,
            deleted=node.deleted,
        )
