"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os
import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Test settings must be in place before config is imported anywhere
os.environ["RUNTIME_ENVIRONMENT"] = "test"
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"  # In-memory test database
os.environ["STORE_LANGUAGE"] = "en"  # For Localizator
os.environ["CURRENCY"] = "NGN"
os.environ.setdefault("COMBO_MAX_PAIR_SAMPLE_SIZE", "50")


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Create in-memory SQLite database (sync engine, repositories accept both)."""
    from models import Base
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create database session."""
    session = Session(engine)
    yield session
    session.rollback()
    session.close()


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine (in-memory SQLite)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False
    )

    # Import and create all tables
    from models import Base
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine):
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


# ============================================================================
# Domain Fixtures
# ============================================================================

@pytest.fixture
def rate_bands():
    """Standard weight rate bands (0-2-5-10 kg)."""
    from models.shipping_rate import WeightRateBandDTO
    return [
        WeightRateBandDTO(min_weight=0, max_weight=2, cost=2500),
        WeightRateBandDTO(min_weight=2, max_weight=5, cost=4500),
        WeightRateBandDTO(min_weight=5, max_weight=10, cost=8000),
    ]
