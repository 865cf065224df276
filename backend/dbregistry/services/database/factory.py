"""
Database Factory for creating database adapters.
Implements Factory Pattern for plug-and-play database support.
"""
from typing import Dict, List, Type

from .base import DatabaseInterface
from .exceptions import UnsupportedDatabaseTypeError
from .leveldb_adapter import LevelDBAdapter
from .memory_adapter import MemoryAdapter
from .sqlite_adapter import SQLiteAdapter
from ...core.logging_config import get_logger

logger = get_logger(__name__)

class DatabaseFactory:
    """
    Factory for creating database adapters.
    Adapters are looked up by the schema entry's type string.
    Supports LevelDB (key-value), SQLite (relational) and Memory (in-memory) out of the box.
    """

    _adapters: Dict[str, Type[DatabaseInterface]] = {
        LevelDBAdapter.db_type: LevelDBAdapter,
        SQLiteAdapter.db_type: SQLiteAdapter,
        MemoryAdapter.db_type: MemoryAdapter,
    }

    @staticmethod
    def create(database_type: str) -> DatabaseInterface:
        """
        Create a database adapter instance.

        Args:
            database_type: Type of database ('leveldb', 'sqlite', 'memory' or any registered type)

        Returns:
            DatabaseInterface instance, not yet created

        Examples:
            # LevelDB (key-value, persistent)
            adapter = DatabaseFactory.create('leveldb')
            await adapter.create(rootdir, 'leveldb', 'streembitkv')

            # SQLite (relational, persistent)
            adapter = DatabaseFactory.create('sqlite')
        """
        adapter_class = DatabaseFactory._adapters.get(database_type)
        if adapter_class is None:
            supported = ", ".join(f"'{t}'" for t in DatabaseFactory.supported_types())
            raise UnsupportedDatabaseTypeError(
                f"Unsupported database type: {database_type}. "
                f"Supported types: {supported}"
            )
        return adapter_class()

    @staticmethod
    def register(database_type: str, adapter_class: Type[DatabaseInterface]) -> None:
        """Register (or replace) the adapter class for a database type."""
        if not database_type:
            raise ValueError("database_type is required")
        logger.debug(f"Registering adapter {adapter_class.__name__} for type '{database_type}'")
        DatabaseFactory._adapters[database_type] = adapter_class

    @staticmethod
    def unregister(database_type: str) -> None:
        """Remove the adapter class for a database type, if any."""
        DatabaseFactory._adapters.pop(database_type, None)

    @staticmethod
    def supported_types() -> List[str]:
        """Registered database types, sorted."""
        return sorted(DatabaseFactory._adapters)
