import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from main import app
from app.core.database import get_async_session, Base

# In-memory test database, one per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"

@pytest.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker, None]:
    """Setup test database"""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()

@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create test client"""
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest.fixture
async def employee(client: AsyncClient) -> dict:
    """Employee on the default Monday-Friday schedule"""
    response = await client.post("/api/v1/hr/employee/", json={
        "employee_number": 1001,
        "name": "Ana Souza",
        "position": "Cashier",
        "department": "Store",
        "birth_date": "1990-05-15",
    })
    assert response.status_code == 200
    return response.json()
