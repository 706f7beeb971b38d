"""favoritefs: share-aware favorites for path-addressed nodes.

Marks nodes as favorites per user and lists the favorites a user can
still reach through ownership, direct shares, group shares and shared
directories.
"""

__version__ = "0.1.0"

from favoritefs._favorites import Favorites
from favoritefs._favorites_async import FavoritesAsync
from favoritefs.config import FavoritesConfig, load_config
from favoritefs.exceptions import FavoritesError, PersistenceError, SchemaInitError
from favoritefs.fs.types import NodeInfo
from favoritefs.targets import GroupTarget, ShareTarget, UserTarget, encode_target, parse_target

__all__ = [
    "Favorites",
    "FavoritesAsync",
    "FavoritesConfig",
    "FavoritesError",
    "GroupTarget",
    "NodeInfo",
    "PersistenceError",
    "SchemaInitError",
    "ShareTarget",
    "UserTarget",
    "__version__",
    "encode_target",
    "load_config",
    "parse_target",
]
