import pytest
import httpx
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import placementlog.models  # noqa: F401  (registers tables)
from placementlog.api.deps import get_token_service
from placementlog.core.database import Base, get_db
from placementlog.core.rate_limit import limiter
from placementlog.core.security import pwd_context
from placementlog.core.tokens import TokenService
from placementlog.main import app
from placementlog.repositories.admin_repository import AdminRepository
from placementlog.services.auth_service import AdminAuthService

TEST_SECRET = "test-secret-key"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True, scope="session")
def fast_password_hashing():
    # Minimum bcrypt cost keeps the suite fast
    pwd_context.update(bcrypt__rounds=4)


@pytest.fixture(autouse=True)
def rate_limit_disabled():
    limiter.enabled = False
    yield
    limiter.enabled = False


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET)


@pytest.fixture
async def engine(anyio_backend):
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker, token_service):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def admin_token(session_maker, token_service):
    """Token of an admin created directly in the store (bootstrap path)."""
    async with session_maker() as session:
        admin = await AdminAuthService(AdminRepository(session), token_service).register(
            username="root",
            password="rootpw",
        )
    return admin.token
