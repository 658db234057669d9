"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness checks hit the test engine
    - AI collaborators are overridden per test via `override_ai`

Design Decisions:
    - SQLite in-memory: fast, no external dependency, same dialect as the default config
    - ASGITransport does not run the lifespan: the fixture does its setup instead
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from triz_master.api.dependencies import (
    get_contradiction_analyst, get_draft_writer,
)
from triz_master.db.base import Base
from triz_master.infrastructure.database import get_db, DatabaseSessionManager
import triz_master.infrastructure.database as db_module
import triz_master.models  # noqa: F401
from triz_master.main import app
from triz_master.services.contradiction_analyst import ContradictionAnalyst
from triz_master.services.draft_writer import InnovationDraftWriter


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def override_ai():
    """Install collaborators backed by a MockAnthropicClient.

    Usage: override_ai(mock_client) before issuing requests.
    """
    def _install(mock_client):
        app.dependency_overrides[get_contradiction_analyst] = (
            lambda: ContradictionAnalyst(mock_client, model="test-model")
        )
        app.dependency_overrides[get_draft_writer] = (
            lambda: InnovationDraftWriter(mock_client, model="test-model")
        )
        return mock_client
    return _install
