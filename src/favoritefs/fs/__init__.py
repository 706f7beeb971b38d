"""Favorites layer — mutation, visibility resolution, aggregation."""

from favoritefs.fs.aggregator import FavoriteAggregator
from favoritefs.fs.mutation import FavoriteService
from favoritefs.fs.schema import init_all_tables, init_favorites_table
from favoritefs.fs.types import NodeInfo
from favoritefs.fs.utils import node_id_from_handle, normalize_path
from favoritefs.fs.visibility import VisibilityResolver

__all__ = [
    "FavoriteAggregator",
    "FavoriteService",
    "NodeInfo",
    "VisibilityResolver",
    "init_all_tables",
    "init_favorites_table",
    "node_id_from_handle",
    "normalize_path",
]
