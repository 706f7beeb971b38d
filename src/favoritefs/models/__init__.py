"""SQLModel database models for favoritefs."""

from favoritefs.models.favorites import Favorite, FavoriteBase
from favoritefs.models.nodes import Node, NodeBase
from favoritefs.models.shares import Share, ShareBase
from favoritefs.models.users import User, UserBase

__all__ = [
    "Favorite",
    "FavoriteBase",
    "Node",
    "NodeBase",
    "Share",
    "ShareBase",
    "User",
    "UserBase",
]
