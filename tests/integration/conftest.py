import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel import SQLModel

from config import ApplicationConfig
from backoffice.adapter.database import Database
from backoffice.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from backoffice.api.app import create_app
from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.password_hasher import PasswordHasher
from backoffice.depends import get_unit_of_work
from backoffice.domain.entities import AdminRole
from tests.fixtures.json_loader import TestDataLoader

TEST_DB_URI = "sqlite+aiosqlite:///./test.db"


class TestConfig(ApplicationConfig):
    __test__ = False

    DB_URI = TEST_DB_URI
    DB_CREATE_TABLES = False
    API_PREFIX = ""
    BCRYPT_ROUNDS = 4
    SESSION_PRUNE_INTERVAL_SECONDS = 0


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def database():
    database = Database(TEST_DB_URI)
    database.connect()
    await database.create_all()
    yield database
    async with database.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await database.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def auth_service(db_session):
    return AuthService(SqlAlchemyUnitOfWork(db_session), hasher=PasswordHasher(rounds=4))


@pytest_asyncio.fixture
async def client(database, db_session):
    app = create_app(TestConfig, database=database)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _provision(auth_service, data):
    account = await auth_service.create_account(
        data["username"], data["email"], data["password"], AdminRole(data["role"])
    )
    return await auth_service.get_account_with_api_key(account.id)


@pytest_asyncio.fixture
async def super_admin(auth_service, test_data):
    """Super admin account including its API key"""
    return await _provision(auth_service, test_data.get("super_admin"))


@pytest_asyncio.fixture
async def alice(auth_service, test_data):
    """Regular admin account including its API key"""
    return await _provision(auth_service, test_data.get("alice"))
