"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
import pytest_asyncio

from dbregistry.services.database import DatabaseRegistry

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def db_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every registry at a temporary root directory."""
    monkeypatch.setenv("DB_ROOT_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def registry() -> Generator[DatabaseRegistry, None, None]:
    """Fresh registry for tests that run init() outside an event loop."""
    registry = DatabaseRegistry()
    yield registry
    asyncio.run(registry.close())


@pytest_asyncio.fixture
async def async_registry() -> AsyncGenerator[DatabaseRegistry, None]:
    """Fresh registry for coroutine tests."""
    registry = DatabaseRegistry()
    yield registry
    await registry.close()


@pytest.fixture
def fixture_path():
    def _path(name: str) -> Path:
        return FIXTURES_DIR / name
    return _path
