from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dispatcher.config import SQLAlchemyConfig
from dispatcher.infrastructure.database.sqlalchemy import SQLAlchemyDatabase

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
async def database(anyio_backend, tmp_path: Path):
    """A migrated SQLite database in a temporary directory."""
    config = SQLAlchemyConfig().with_dsn(f"sqlite+aiosqlite:///{tmp_path}/test.sqlite3")
    async with SQLAlchemyDatabase(config) as db:
        await db.migrate()
        yield db
