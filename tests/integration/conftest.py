"""Fixtures for tests against a real PostgreSQL database.

The database named by ``DATABASE__URL`` is used as is. Tables are created
when missing and never dropped, so every test seeds its own targets and
only asserts on rows under them.
"""

import pytest
import pytest_asyncio
from sqlalchemy import Table, insert
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.config import Settings
from alumni.domain.value import TargetId
from alumni.persistence.database import create_engine
from alumni.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def database_schema():
    """Skip unless PostgreSQL is reachable; create missing tables."""
    engine = create_engine(Settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except (OSError, DBAPIError) as e:
        pytest.skip(f"PostgreSQL unavailable: {e}")
    finally:
        await engine.dispose()


async def insert_target(session: AsyncSession, table: Table) -> TargetId:
    """Insert a gallery, blog or post row and return its new ID."""
    result = await session.execute(insert(table).returning(table.c.id))
    return TargetId(result.scalar_one())
