"""Service test fixtures — async DB, fakes for collaborators, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_revalidator overridden per test; `client` also bypasses require_user
    - Route assertions read rows through a fresh session (no stale identity map)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; CHECK constraints still enforced,
      so write failures can be produced for real
"""

import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from dashboard.api.deps import get_revalidator, require_user
from dashboard.db.base import Base
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.passwords import PasslibPasswordHasher
from dashboard.infrastructure.revalidation import VersionedPathRevalidator
from dashboard.main import app
from dashboard.models import Customer, Invoice, User
from tests.services.fakes import SEED_PASSWORD


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
def revalidator():
    return VersionedPathRevalidator()


@pytest.fixture
async def anon_client(test_session_factory, revalidator):
    """FastAPI test client with DB + revalidator overridden, no signed-in user."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_revalidator] = lambda: revalidator

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def client(anon_client):
    """Test client acting as a signed-in user."""
    app.dependency_overrides[require_user] = lambda: "user-1"
    yield anon_client


@pytest.fixture
async def seed_customer(test_db):
    customer = Customer(id="c1", name="Delba de Oliveira", email="delba@oliveira.com")
    test_db.add(customer)
    await test_db.commit()
    return customer


@pytest.fixture
async def seed_invoice(test_db, seed_customer):
    invoice = Invoice(
        customer_id=seed_customer.id, amount=15795, status="pending",
        date=datetime.date(2022, 12, 6),
    )
    test_db.add(invoice)
    await test_db.commit()
    await test_db.refresh(invoice)
    return invoice


@pytest.fixture
async def seed_user(test_db):
    user = User(
        name="User", email="user@nextmail.com",
        password=PasslibPasswordHasher().hash(SEED_PASSWORD),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
def fetch_invoices(test_session_factory):
    """Read all invoice rows through a fresh session."""
    async def _fetch() -> list[Invoice]:
        async with test_session_factory() as session:
            result = await session.execute(select(Invoice))
            return list(result.scalars().all())
    return _fetch
