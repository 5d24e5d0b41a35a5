"""Pytest fixtures for salary tracker tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from salary_tracker.models import Base, SalaryRecord

# In-memory SQLite shared across connections via StaticPool
TEST_DATABASE_URL = "sqlite+aiosqlite://"

PAYMENT_DATE = datetime(2024, 1, 31, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def engine():
    """Create a fresh test database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


def record_fields(**overrides: Any) -> dict[str, Any]:
    """Keyword arguments for a valid salary record."""
    fields: dict[str, Any] = {
        "employee_id": "EMP001",
        "employee_name": "Asha Rao",
        "month": "January",
        "year": 2024,
        "total_monthly_salary": Decimal("5000"),
        "advance_amount_paid": Decimal("2000"),
        "payment_date": PAYMENT_DATE,
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def make_record():
    """Factory for unsaved salary records."""

    def _make(**overrides: Any) -> SalaryRecord:
        return SalaryRecord(**record_fields(**overrides))

    return _make
