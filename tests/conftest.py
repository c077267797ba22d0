"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: In-memory SQLite store, session, and httpx client
fixtures. The schema is created fresh for every test, and the app's `get_db`
dependency is overridden with the test session.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from home_repair.config import settings
from home_repair.database import Base, get_db
from home_repair.main import app
from home_repair.models import BookedService, Service
from home_repair.utils.jwt import create_access_token

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

PROVIDER_A = "a@x.com"
PROVIDER_B = "b@x.com"
CUSTOMER = "customer@x.com"

# 저장 순서 고정용 기준 시각: Fixed base time so insertion order is deterministic
_BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
def make_service(index: int, **overrides) -> Service:
    """순서가 고정된 서비스 객체를 만듭니다."""
    data = {
        "service_name": f"Service {index}",
        "provider_email": PROVIDER_A,
        "provider_name": "Provider A",
        "image_url": f"https://img.example/{index}.png",
        "price": 10.0 + index,
        "service_area": "Dhaka",
        "description": f"Description {index}",
        "created_at": _BASE_TIME + timedelta(minutes=index),
    }
    data.update(overrides)
    return Service(**data)


@pytest_asyncio.fixture
async def services(db: AsyncSession) -> list[Service]:
    """저장 순서가 고정된 서비스 8개를 생성합니다 (A 소유 5개, B 소유 3개)."""
    names = [
        "Pipe Fixing", "Electrical Wiring", "AC Servicing", "Wall Painting",
        "Roof Leak Repair", "Door Lock Fix", "Tile Grouting", "Fan Installation",
    ]
    rows = [
        make_service(i, service_name=name, provider_email=PROVIDER_A if i < 5 else PROVIDER_B)
        for i, name in enumerate(names)
    ]
    db.add_all(rows)
    await db.commit()
    return rows


@pytest_asyncio.fixture
async def booking(db: AsyncSession) -> BookedService:
    """대기 상태의 예약 1건을 생성합니다."""
    b = BookedService(
        service_name="Pipe Fixing",
        price=40.0,
        provider_email=PROVIDER_A,
        user_email=CUSTOMER,
        service_status="pending",
    )
    db.add(b)
    await db.commit()
    return b


def make_token(email: str, **claims) -> str:
    """테스트용 신원 토큰을 생성합니다."""
    return create_access_token({"email": email, **claims})


def auth_cookie(token: str) -> dict[str, str]:
    return {"Cookie": f"{settings.JWT_COOKIE_NAME}={token}"}
