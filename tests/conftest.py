# Standard Library
from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator, Dict

# Third-Party Libraries
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# First-Party Libraries
from usinagem.config import settings
from usinagem.database import get_db_session
from usinagem.customers.models import Customer  # noqa: F401
from usinagem.history.models import HistoryEntry  # noqa: F401
from usinagem.main import app
from usinagem.orders.models import Order
from usinagem.quotes.models import Quote

# URL de base pour la DB en mémoire
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# --- Fixtures de Base ---

@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Crée un engine, des tables, et fournit une session DB en mémoire pour chaque test."""
    engine: AsyncEngine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # Une seule connexion: la base en mémoire est partagée
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Fournit un AsyncClient httpx qui utilise la session DB de test isolée."""
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    del app.dependency_overrides[get_db_session]

# --- Authentification ---

def make_token(payload: Dict) -> str:
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    """En-têtes Bearer pour un utilisateur 'Operador Teste' (id 42)."""
    token = make_token({"id": 42, "name": "Operador Teste"})
    return {"Authorization": f"Bearer {token}"}

# --- Données ---

EMISSION_DATE = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture(scope="function")
async def test_quote(db_session: AsyncSession) -> Quote:
    """Devis PENDENTE pour l'item 'item-1'."""
    quote = Quote(
        quantidade=10,
        material="Aço 1045",
        data_emissao=EMISSION_DATE,
        operacao="Torneamento",
        cliente="Metalúrgica Silva",
        item_id="item-1",
        valor=Decimal("1500.00"),
    )
    db_session.add(quote)
    await db_session.commit()
    await db_session.refresh(quote)
    return quote


@pytest_asyncio.fixture(scope="function")
async def quote_without_client(db_session: AsyncSession) -> Quote:
    quote = Quote(
        quantidade=3,
        material="Alumínio 6061",
        data_emissao=EMISSION_DATE,
        operacao="Fresamento",
        cliente=None,
        item_id="item-2",
        valor=Decimal("300.50"),
    )
    db_session.add(quote)
    await db_session.commit()
    await db_session.refresh(quote)
    return quote


async def add_order(db_session: AsyncSession, item_id: str, status: str) -> Order:
    """Insère directement une commande pour un item."""
    order = Order(
        quantidade=1,
        material="Aço 1020",
        data_emissao=EMISSION_DATE,
        operacao="Furação",
        cliente="Outro Cliente",
        item_id=item_id,
        status=status,
    )
    db_session.add(order)
    await db_session.commit()
    await db_session.refresh(order)
    return order
