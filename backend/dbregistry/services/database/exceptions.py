"""
Custom exceptions for the database registry.
Adapters raise these for their own failures; driver errors pass through untouched.
"""


class DatabaseError(Exception):
    """Base registry error."""
    pass


class MissingCallbackError(DatabaseError):
    """Raised when init() is called without a callable callback."""
    pass


class InvalidSchemaError(DatabaseError):
    """Raised when a database schema list fails validation."""
    pass


class UnsupportedDatabaseTypeError(DatabaseError):
    """Raised when no adapter is registered for a schema entry type."""
    pass


class AdapterCreationError(DatabaseError):
    """Raised by an adapter when its table or index declarations are unusable."""
    pass
