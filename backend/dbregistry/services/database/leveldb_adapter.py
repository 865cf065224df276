"""
LevelDB adapter implementing DatabaseInterface.
Opens (creating if missing) a plyvel database under <root>/db/leveldb/<name>.
"""
import asyncio
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import DatabaseInterface
from ...core.logging_config import get_logger

logger = get_logger(__name__)

class LevelDBAdapter(DatabaseInterface):
    """
    Key-value database adapter backed by plyvel.

    Declared tables become key-prefixed namespaces of the same database,
    available through `tables`. LevelDB has no secondary indexes, so index
    declarations are ignored.
    """

    db_type = "leveldb"

    def __init__(self):
        super().__init__()
        self.tables: Dict[str, Any] = {}

    async def create(
        self,
        rootdir: Union[str, Path],
        db_type: str,
        name: str,
        tables: Optional[Any] = None,
        indexes: Optional[Any] = None,
    ):
        """Open the LevelDB directory, creating it and its parents if needed."""
        table_names = self.table_names(tables)
        if indexes:
            logger.warning(f"LevelDB database {name}: index declarations are not supported, ignoring")

        self.path = self.database_dir(rootdir, db_type) / name

        def _open():
            import plyvel

            self.path.parent.mkdir(parents=True, exist_ok=True)
            return plyvel.DB(str(self.path), create_if_missing=True)

        # Run in executor to avoid blocking
        loop = asyncio.get_event_loop()
        self.db = await loop.run_in_executor(None, _open)

        self.tables = {
            table: self.db.prefixed_db(f"{table}!".encode("utf-8"))
            for table in table_names
        }

        logger.debug(f"Opened LevelDB database at {self.path}")
        return self.db

    async def close(self):
        """Close the LevelDB handle."""
        if self.db is not None and not self.db.closed:
            self.db.close()
        self.tables = {}
