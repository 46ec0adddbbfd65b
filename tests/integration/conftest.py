import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
import src.domain  # noqa: F401
from src.depends import get_session
from src.adapter.repositories import (
    SqlAlchemyActivityRecordRepository,
    SqlAlchemyBudgetRepository,
    SqlAlchemyFarmingYearRepository,
    SqlAlchemyLedgerEntryRepository,
    SqlAlchemySubscriptionRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite database, fresh for every test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def uow(db_session):
    return SqlAlchemyUnitOfWork(db_session)


@pytest_asyncio.fixture
async def activity_repo(db_session):
    return SqlAlchemyActivityRecordRepository(db_session)


@pytest_asyncio.fixture
async def ledger_repo(db_session):
    return SqlAlchemyLedgerEntryRepository(db_session)


@pytest_asyncio.fixture
async def farming_year_repo(db_session):
    return SqlAlchemyFarmingYearRepository(db_session)


@pytest_asyncio.fixture
async def budget_repo(db_session):
    return SqlAlchemyBudgetRepository(db_session)


@pytest_asyncio.fixture
async def subscription_repo(db_session):
    return SqlAlchemySubscriptionRepository(db_session)


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
