"""
SQLite adapter implementing DatabaseInterface.
Opens <root>/db/sqlite/<name>.db with aiosqlite and creates declared tables and indexes.
"""
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import aiosqlite

from .base import DatabaseInterface
from .exceptions import AdapterCreationError
from ...core.logging_config import get_logger

logger = get_logger(__name__)

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
COLUMN_TYPE_RE = re.compile(r"^[A-Za-z0-9_ (),]+$")


def _identifier(value: Any, what: str) -> str:
    if not isinstance(value, str) or not IDENTIFIER_RE.match(value):
        raise AdapterCreationError(f"invalid {what}: {value!r}")
    return value


def build_create_table(table: Dict) -> str:
    """
    Render CREATE TABLE for a declaration like
    {"name": "accounts", "columns": [{"name": "id", "type": "INTEGER PRIMARY KEY"}]}.
    """
    if not isinstance(table, dict):
        raise AdapterCreationError(f"invalid table declaration: {table!r}")

    table_name = _identifier(table.get("name"), "table name")
    columns = table.get("columns")
    if not columns or not isinstance(columns, list):
        raise AdapterCreationError(f"table {table_name} must declare columns")

    column_defs: List[str] = []
    for column in columns:
        if not isinstance(column, dict):
            raise AdapterCreationError(f"invalid column declaration in {table_name}: {column!r}")
        column_name = _identifier(column.get("name"), f"column name in {table_name}")
        column_type = column.get("type", "")
        if column_type:
            if not isinstance(column_type, str) or not COLUMN_TYPE_RE.match(column_type):
                raise AdapterCreationError(f"invalid column type for {table_name}.{column_name}: {column_type!r}")
            column_defs.append(f"{column_name} {column_type}")
        else:
            column_defs.append(column_name)

    return f"CREATE TABLE IF NOT EXISTS {table_name} ({', '.join(column_defs)})"


def build_create_index(index: Dict) -> str:
    """
    Render CREATE INDEX for a declaration like
    {"name": "idx_accounts_name", "table": "accounts", "columns": ["name"], "unique": true}.
    """
    if not isinstance(index, dict):
        raise AdapterCreationError(f"invalid index declaration: {index!r}")

    index_name = _identifier(index.get("name"), "index name")
    table_name = _identifier(index.get("table"), f"table for index {index_name}")
    columns = index.get("columns")
    if isinstance(columns, str):
        columns = [columns]
    if not columns or not isinstance(columns, list):
        raise AdapterCreationError(f"index {index_name} must declare columns")

    column_names = [_identifier(c, f"column for index {index_name}") for c in columns]
    unique = "UNIQUE " if index.get("unique") else ""
    return f"CREATE {unique}INDEX IF NOT EXISTS {index_name} ON {table_name} ({', '.join(column_names)})"


class SQLiteAdapter(DatabaseInterface):
    """
    Relational database adapter backed by aiosqlite.
    The handle is the open aiosqlite connection.
    """

    db_type = "sqlite"

    async def create(
        self,
        rootdir: Union[str, Path],
        db_type: str,
        name: str,
        tables: Optional[Any] = None,
        indexes: Optional[Any] = None,
    ) -> aiosqlite.Connection:
        """Open the database file, then create the declared tables and indexes."""
        if tables and not isinstance(tables, list):
            raise AdapterCreationError("tables must be a list")
        if indexes and not isinstance(indexes, list):
            raise AdapterCreationError("indexes must be a list")

        # Declarations are rendered before the file is opened
        statements = [build_create_table(t) for t in tables or []]
        statements += [build_create_index(i) for i in indexes or []]

        db_dir = self.database_dir(rootdir, db_type)
        db_dir.mkdir(parents=True, exist_ok=True)
        self.path = db_dir / f"{name}.db"

        conn = await aiosqlite.connect(str(self.path))
        try:
            for statement in statements:
                logger.debug(f"{name}: {statement}")
                await conn.execute(statement)
            await conn.commit()
        except Exception:
            await conn.close()
            raise

        self.db = conn
        logger.debug(f"Opened SQLite database at {self.path}")
        return self.db

    async def close(self):
        """Close the SQLite connection."""
        if self.db is not None:
            await self.db.close()
