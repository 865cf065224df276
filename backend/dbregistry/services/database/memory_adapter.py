"""
In-memory adapter implementing DatabaseInterface.
Perfect for demos and testing - the handle is a plain dict of tables.
Data is lost on restart (on-demand, no persistence).
"""
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import DatabaseInterface
from ...core.logging_config import get_logger

logger = get_logger(__name__)

class MemoryAdapter(DatabaseInterface):
    """
    In-memory database adapter using Python dictionaries.
    The handle maps each declared table name to an empty dict.
    Nothing touches the filesystem.
    """

    db_type = "memory"

    async def create(
        self,
        rootdir: Union[str, Path],
        db_type: str,
        name: str,
        tables: Optional[Any] = None,
        indexes: Optional[Any] = None,
    ) -> Dict[str, Dict]:
        """Create the in-memory table dicts."""
        self.db = {table: {} for table in self.table_names(tables)}
        logger.debug(f"Created in-memory database {name} with {len(self.db)} table(s)")
        return self.db

    async def close(self):
        """Drop all in-memory tables."""
        if self.db is not None:
            self.db.clear()
