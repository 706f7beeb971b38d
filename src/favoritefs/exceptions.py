"""Exception hierarchy for the favorites layer."""


class FavoritesError(Exception):
    """Base exception for all favoritefs errors."""


class PersistenceError(FavoritesError):
    """Raised on any storage failure.

    Covers connection loss, constraint violations (missing node, unknown
    user, duplicate favorite), malformed results and scan failures.  The
    originating ``SQLAlchemyError`` is chained as ``__cause__``.
    """


class SchemaInitError(FavoritesError):
    """Raised when the favorites table cannot be created at startup."""
