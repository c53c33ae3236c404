"""Service test fixtures: async in-memory DB, seeded data and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Query engine and invoice actions share the test session factory
    - broken_session_factory points at a database with no tables, so every
      statement fails with a real OperationalError
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from invoice_dashboard.api.dependencies import get_invoice_actions, get_query_engine
from invoice_dashboard.db.base import Base
from invoice_dashboard.db.session import create_session_factory
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.main import app
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.models.revenue import Revenue
from invoice_dashboard.services.invoice_actions import InvoiceActions
from invoice_dashboard.services.query_engine import InvoiceQueryEngine


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
    return create_session_factory(engine=test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def broken_session_factory():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    yield create_session_factory(engine=engine)
    await engine.dispose()


@pytest.fixture
def query_engine(test_session_factory):
    return InvoiceQueryEngine(test_session_factory)


@pytest.fixture
def invoice_actions(test_session_factory):
    return InvoiceActions(test_session_factory)


@pytest.fixture
async def alice(test_db):
    """Alice with one paid invoice of 5000 cents dated 2024-01-01."""
    customer = Customer(
        name="Alice", email="alice@x.com", image_url="/customers/alice.png",
    )
    test_db.add(customer)
    await test_db.flush()
    test_db.add(Invoice(
        customer_id=customer.id, amount=5000, status="paid",
        date=date(2024, 1, 1),
    ))
    await test_db.commit()
    return customer


@pytest.fixture
async def dashboard_data(test_db):
    """Three customers, eight invoices and a short revenue series."""
    lee = Customer(name="Lee Robinson", email="lee@robinson.com", image_url="/customers/lee.png")
    delba = Customer(name="Delba de Oliveira", email="delba@oliveira.com", image_url="/customers/delba.png")
    evil = Customer(name="Evil Rabbit", email="evil@rabbit.com", image_url="/customers/evil.png")
    test_db.add_all([lee, delba, evil])
    await test_db.flush()
    test_db.add_all([
        Invoice(customer_id=lee.id, amount=15795, status="pending", date=date(2022, 12, 6)),
        Invoice(customer_id=delba.id, amount=20348, status="pending", date=date(2022, 11, 14)),
        Invoice(customer_id=evil.id, amount=3040, status="paid", date=date(2022, 10, 29)),
        Invoice(customer_id=lee.id, amount=44800, status="paid", date=date(2023, 9, 10)),
        Invoice(customer_id=delba.id, amount=34577, status="pending", date=date(2023, 8, 5)),
        Invoice(customer_id=evil.id, amount=54246, status="pending", date=date(2023, 7, 16)),
        Invoice(customer_id=lee.id, amount=666, status="pending", date=date(2023, 6, 27)),
        Invoice(customer_id=delba.id, amount=32545, status="paid", date=date(2023, 6, 9)),
    ])
    test_db.add_all([
        Revenue(month="Jan", revenue=2000),
        Revenue(month="Feb", revenue=1800),
        Revenue(month="Mar", revenue=2200),
    ])
    await test_db.commit()
    return {"lee": lee, "delba": delba, "evil": evil}


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with services bound to the test DB."""
    engine = InvoiceQueryEngine(test_session_factory)
    actions = InvoiceActions(test_session_factory)
    app.dependency_overrides[get_query_engine] = lambda: engine
    app.dependency_overrides[get_invoice_actions] = lambda: actions
    app.state.db_manager = DatabaseSessionManager(test_engine)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None
