"""
Database registry and adapters for plug-and-play database support.
Supports LevelDB (key-value), SQLite (relational) and Memory (in-memory) backends.
"""
from .base import DatabaseInterface
from .exceptions import (
    AdapterCreationError,
    DatabaseError,
    InvalidSchemaError,
    MissingCallbackError,
    UnsupportedDatabaseTypeError,
)
from .factory import DatabaseFactory
from .leveldb_adapter import LevelDBAdapter
from .memory_adapter import MemoryAdapter
from .registry import DatabaseRegistry
from .schema import SchemaEntry, load_schema, validate_schema
from .sqlite_adapter import SQLiteAdapter

__all__ = [
    "DatabaseInterface",
    "DatabaseFactory",
    "DatabaseRegistry",
    "LevelDBAdapter",
    "MemoryAdapter",
    "SQLiteAdapter",
    "SchemaEntry",
    "load_schema",
    "validate_schema",
    "DatabaseError",
    "MissingCallbackError",
    "InvalidSchemaError",
    "UnsupportedDatabaseTypeError",
    "AdapterCreationError",
]
