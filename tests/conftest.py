"""
Shared fixtures: a fresh SQLite database per test and an ASGI client bound to it
"""
import os
import tempfile

# Must be set before studentblog.core.config is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="studentblog-uploads-"))

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from studentblog.core.seed import DEFAULT_CATEGORIES
from studentblog.db.database import get_db, init_models
from studentblog.services.auth_service import AuthService
from studentblog.services.category_service import CategoryService
from studentblog.utils.auth import create_access_token


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def categories(db):
    await CategoryService.seed_categories(db, DEFAULT_CATEGORIES)
    return await CategoryService.get_categories(db)


@pytest.fixture
async def category(categories):
    return next(c for c in categories if c.slug == "mercadeo")


@pytest.fixture
async def admin(db):
    return await AuthService.create_user(db, "profesora", "secret123", is_admin=True)


@pytest.fixture
def admin_headers(admin):
    token = create_access_token(data={"sub": str(admin.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def reader_headers(db):
    user = await AuthService.create_user(db, "estudiante", "secret123", is_admin=False)
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}
