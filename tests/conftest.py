import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app import main
from app.core.config import settings
from app.core.database import Base, get_db
from app.core.seed import ensure_admin_user, seed_categories
from app.notifications import broadcaster


@pytest.fixture()
def session_factory(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}",
        poolclass=NullPool
    )
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def setup():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with factory() as db:
            await seed_categories(db)
            await ensure_admin_user(db)

    asyncio.run(setup())
    yield factory
    asyncio.run(engine.dispose())


@pytest.fixture()
def client(session_factory, monkeypatch):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def skip_init(sample_data=False):
        return None

    # Tables live in the per-test database
    monkeypatch.setattr(main, "init_database", skip_init)
    main.app.dependency_overrides[get_db] = override_get_db

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.clear()
    broadcaster.connections.clear()
    broadcaster.rooms.clear()


@pytest.fixture()
def auth_headers(client):
    res = client.post("/api/auth/login", json={
        "email": settings.DEFAULT_ADMIN_EMAIL,
        "password": settings.DEFAULT_ADMIN_PASSWORD,
    })
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture()
def category_ids(client):
    res = client.get("/api/categories/")
    return {c["name"]: c["id"] for c in res.json()["items"]}
