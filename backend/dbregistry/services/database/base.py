"""
Abstract base class for database adapters.
All database implementations must inherit from this class.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Union

from .exceptions import AdapterCreationError
from ...core.config import DB_DIR_NAME
from ...core.logging_config import get_logger

logger = get_logger(__name__)

class DatabaseInterface(ABC):
    """
    Abstract interface for database adapters.
    An adapter physically creates (or opens) one database from its declared
    schema and exposes the live handle as `db`.
    This allows plug-and-play backend support without changing the registry.
    """

    db_type: str = "unknown"

    def __init__(self):
        self.db: Any = None
        self.path: Optional[Path] = None

    @staticmethod
    def database_dir(rootdir: Union[str, Path], db_type: str) -> Path:
        """Directory holding every database of one type: <rootdir>/<DB_DIR_NAME>/<type>."""
        return Path(rootdir) / DB_DIR_NAME / db_type

    @staticmethod
    def table_names(tables: Optional[Any]) -> List[str]:
        """
        Normalize table declarations to a list of names.

        Accepts a list of names or of mappings carrying a "name" field.
        """
        if not tables:
            return []
        if not isinstance(tables, list):
            raise AdapterCreationError("tables must be a list")

        names = []
        for table in tables:
            name = table.get("name") if isinstance(table, dict) else table
            if not name or not isinstance(name, str):
                raise AdapterCreationError(f"invalid table declaration: {table!r}")
            names.append(name)
        return names

    @abstractmethod
    async def create(
        self,
        rootdir: Union[str, Path],
        db_type: str,
        name: str,
        tables: Optional[Any] = None,
        indexes: Optional[Any] = None,
    ) -> Any:
        """
        Create or open the database and its declared tables and indexes.

        Args:
            rootdir: Base path for database files
            db_type: Backend type string from the schema entry
            name: Physical database name
            tables: Backend-specific table declarations
            indexes: Backend-specific index declarations

        Returns:
            The live handle, also stored on `db`
        """
        pass

    @abstractmethod
    async def close(self):
        """Close the database handle."""
        pass
