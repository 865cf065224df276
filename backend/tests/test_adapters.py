"""Tests for the bundled database adapters."""

import pytest

from dbregistry.services.database import (
    AdapterCreationError,
    LevelDBAdapter,
    MemoryAdapter,
    SQLiteAdapter,
)
from dbregistry.services.database.sqlite_adapter import build_create_index, build_create_table


@pytest.mark.asyncio
async def test_memory_adapter_tables(db_root):
    adapter = MemoryAdapter()
    db = await adapter.create(db_root, "memory", "cache", ["users", {"name": "sessions"}])
    assert db == {"users": {}, "sessions": {}}
    assert adapter.db is db
    assert list(db_root.iterdir()) == []
    await adapter.close()
    assert db == {}


@pytest.mark.asyncio
async def test_memory_adapter_rejects_bad_tables(db_root):
    with pytest.raises(AdapterCreationError, match="tables must be a list"):
        await MemoryAdapter().create(db_root, "memory", "cache", "users")
    with pytest.raises(AdapterCreationError, match="invalid table declaration"):
        await MemoryAdapter().create(db_root, "memory", "cache", [{"columns": []}])


@pytest.mark.asyncio
async def test_leveldb_adapter_prefixed_tables(db_root):
    adapter = LevelDBAdapter()
    db = await adapter.create(db_root, "leveldb", "kv", ["contacts", "messages"])
    try:
        assert adapter.path == db_root / "db" / "leveldb" / "kv"
        adapter.tables["contacts"].put(b"alice", b"1")
        assert db.get(b"contacts!alice") == b"1"
        assert adapter.tables["messages"].get(b"alice") is None
    finally:
        await adapter.close()
    assert db.closed


@pytest.mark.asyncio
async def test_leveldb_adapter_reopens_existing(db_root):
    first = LevelDBAdapter()
    db = await first.create(db_root, "leveldb", "kv")
    db.put(b"k", b"v")
    await first.close()

    second = LevelDBAdapter()
    db = await second.create(db_root, "leveldb", "kv")
    try:
        assert db.get(b"k") == b"v"
    finally:
        await second.close()


@pytest.mark.asyncio
async def test_sqlite_adapter_creates_tables_and_indexes(db_root):
    tables = [
        {"name": "accounts", "columns": [{"name": "id", "type": "INTEGER PRIMARY KEY"}, {"name": "account"}]},
    ]
    indexes = [{"name": "idx_accounts_account", "table": "accounts", "columns": "account", "unique": True}]

    adapter = SQLiteAdapter()
    conn = await adapter.create(db_root, "sqlite", "store", tables, indexes)
    try:
        assert adapter.path == db_root / "db" / "sqlite" / "store.db"
        async with conn.execute("SELECT type, name FROM sqlite_master WHERE name NOT LIKE 'sqlite_%' ORDER BY name") as cursor:
            rows = await cursor.fetchall()
        assert [tuple(r) for r in rows] == [("table", "accounts"), ("index", "idx_accounts_account")]

        await conn.execute("INSERT INTO accounts (account) VALUES ('alice')")
        with pytest.raises(Exception):
            await conn.execute("INSERT INTO accounts (account) VALUES ('alice')")
    finally:
        await adapter.close()


@pytest.mark.asyncio
async def test_sqlite_adapter_is_idempotent(db_root):
    tables = [{"name": "t", "columns": [{"name": "c", "type": "TEXT"}]}]
    for _ in range(2):
        adapter = SQLiteAdapter()
        await adapter.create(db_root, "sqlite", "again", tables)
        await adapter.close()


@pytest.mark.asyncio
async def test_sqlite_adapter_bad_declaration_creates_nothing(db_root):
    tables = [{"name": "accounts; DROP TABLE x", "columns": [{"name": "id"}]}]
    with pytest.raises(AdapterCreationError, match="invalid table name"):
        await SQLiteAdapter().create(db_root, "sqlite", "bad", tables)
    assert not (db_root / "db").exists()


def test_build_create_table():
    sql = build_create_table({"name": "contacts", "columns": [{"name": "id", "type": "INTEGER PRIMARY KEY"}, {"name": "pk"}]})
    assert sql == "CREATE TABLE IF NOT EXISTS contacts (id INTEGER PRIMARY KEY, pk)"


def test_build_create_table_requires_columns():
    with pytest.raises(AdapterCreationError, match="must declare columns"):
        build_create_table({"name": "empty"})


def test_build_create_table_rejects_bad_type():
    with pytest.raises(AdapterCreationError, match="invalid column type"):
        build_create_table({"name": "t", "columns": [{"name": "c", "type": "TEXT); --"}]})


def test_build_create_index():
    sql = build_create_index({"name": "idx_a", "table": "t", "columns": ["a", "b"]})
    assert sql == "CREATE INDEX IF NOT EXISTS idx_a ON t (a, b)"
    sql = build_create_index({"name": "idx_u", "table": "t", "columns": ["a"], "unique": True})
    assert sql == "CREATE UNIQUE INDEX IF NOT EXISTS idx_u ON t (a)"


def test_build_create_index_requires_table():
    with pytest.raises(AdapterCreationError, match="table for index idx_a"):
        build_create_index({"name": "idx_a", "columns": ["a"]})
