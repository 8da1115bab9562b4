"""Service test fixtures — async DB, Storage, and a FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - Passkey table, session registry and upload store replaced on app.state per test
    - Uploads written under pytest's tmp_path, never the working directory

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - db_manager patched so the readiness probe sees the test engine
"""

from datetime import timedelta

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import app.models  # noqa: F401
from app.core.auth_sessions import PasskeyTable, SessionRegistry
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import app
from app.services.storage import Storage
from app.services.uploads import UploadStore

PASSKEY = "open-sesame"
USERNAME = "couple"


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
def storage(test_db):
    return Storage(test_db)


@pytest.fixture
def upload_store(tmp_path):
    return UploadStore(tmp_path / "uploads", public_prefix="/uploads")


@pytest.fixture
async def client(test_engine, test_session_factory, upload_store):
    """FastAPI test client with DB dependency and app.state overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    original_state = (
        app.state.passkey_table, app.state.session_registry, app.state.upload_store,
    )
    app.state.passkey_table = PasskeyTable({PASSKEY: USERNAME})
    app.state.session_registry = SessionRegistry(timedelta(hours=1))
    app.state.upload_store = upload_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    (
        app.state.passkey_table, app.state.session_registry, app.state.upload_store,
    ) = original_state


@pytest.fixture
async def auth_headers(client):
    """Log in with the test passkey and return the bearer header."""
    res = await client.post("/api/v1/auth/login", json={"passkey": PASSKEY})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
