"""
Process-wide database registry.

Validates a declarative schema list, creates one database per entry through
the adapter registered for its type, and keeps the live handles by key.

Usage:
    registry = DatabaseRegistry.instance()
    registry.init(load_schema("schema.json"), on_ready)
    kv = registry.getdb("streembitkv")
"""
import asyncio
from typing import Any, Callable, Dict, List, Optional, Set

from .base import DatabaseInterface
from .exceptions import MissingCallbackError
from .factory import DatabaseFactory
from .schema import SchemaEntry, validate_schema
from ...core.config import get_root_dir
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class DatabaseRegistry:
    """
    Holds every database handle of the process under its logical key.

    Use `instance()` for the shared registry. Entries are created strictly one
    after another; a key that already holds a handle is never recreated.
    """

    _instance: Optional["DatabaseRegistry"] = None

    def __init__(self):
        self.databases: Dict[str, Any] = {}
        self._adapters: Dict[str, DatabaseInterface] = {}
        self._tasks: Set[asyncio.Task] = set()

    @classmethod
    def instance(cls) -> "DatabaseRegistry":
        """Return the process-wide registry, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def rootdir(self) -> str:
        """Base path passed to every adapter (the working directory unless DB_ROOT_DIR is set)."""
        return str(get_root_dir())

    def getdb(self, key: str) -> Any:
        return self.databases.get(key)

    def keys(self) -> List[str]:
        return list(self.databases)

    def validate_schema(self, dbschema: Any) -> List[SchemaEntry]:
        return validate_schema(dbschema)

    async def createdb(self, entry: SchemaEntry) -> None:
        """Create one database unless its key is already registered."""
        if entry.key in self.databases:
            logger.debug(f"Database '{entry.key}' already exists, skipping")
            return

        adapter = DatabaseFactory.create(entry.type)
        await adapter.create(self.rootdir, entry.type, entry.name, entry.tables, entry.indexes)

        self.databases[entry.key] = adapter.db
        self._adapters[entry.key] = adapter
        logger.info(f"Added {entry.type} database '{entry.name}' as '{entry.key}'")

    async def initialize(self, dbschema: Any) -> None:
        """
        Validate the schema and create its databases in list order.

        Raises:
            InvalidSchemaError: before any adapter is touched
            Exception: the first adapter failure, as raised by the adapter;
                later entries are not processed
        """
        entries = self.validate_schema(dbschema)
        for entry in entries:
            await self.createdb(entry)

    def init(self, dbschema: Any, callback: Callable[[Optional[Exception]], Any]) -> Optional[asyncio.Task]:
        """
        Create the schema's databases and report the outcome to `callback`.

        The callback receives the first error, or None on success, exactly
        once. Outside an event loop the work completes before init() returns;
        inside a running loop a Task is returned.

        Raises:
            MissingCallbackError: callback missing or not callable
        """
        if callback is None or not callable(callback):
            raise MissingCallbackError("callback is required")

        async def _run():
            try:
                await self.initialize(dbschema)
            except Exception as e:
                logger.error(f"Database initialization failed: {e}")
                callback(e)
                return
            callback(None)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_run())
            return None

        task = loop.create_task(_run())
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        """Drop a finished init() task and log the error it ended with, if any."""
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Database initialization callback failed: {error!r}")

    async def close(self) -> None:
        """Close every registered database and forget its handle."""
        try:
            for key in list(self._adapters):
                adapter = self._adapters.pop(key)
                self.databases.pop(key, None)
                logger.debug(f"Closing database '{key}'")
                await adapter.close()
        finally:
            self._adapters.clear()
            self.databases.clear()
