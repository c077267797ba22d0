"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine that backs the `services` and
`booked_services` collections, the session factory, and the ORM base class.
The session is handed to handlers through the `get_db` dependency so tests
can swap in their own store.
"""

import logging
import threading
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from home_repair.config import settings

logger = logging.getLogger(__name__)

# 비동기 데이터베이스 엔진: Async database engine
# pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

# 비동기 세션 팩토리: Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# 마지막으로 발급한 삽입 시각: Last insertion timestamp handed out in this process
_last_insert_time: datetime = datetime.min.replace(tzinfo=timezone.utc)
_insert_time_lock: threading.Lock = threading.Lock()


def insertion_time() -> datetime:
    """삽입 시각을 발급합니다. 같은 프로세스 안에서는 항상 증가합니다.

    Default for `created_at`. Inserts on the same clock tick get timestamps
    1 microsecond apart, so native order (`created_at`, then `id`) matches
    insertion order within a process. Rows written by different processes
    on the same microsecond still fall back to the `id` tie-break.
    """
    global _last_insert_time
    with _insert_time_lock:
        now: datetime = datetime.now(timezone.utc)
        if now <= _last_insert_time:
            now = _last_insert_time + timedelta(microseconds=1)
        _last_insert_time = now
        return now


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def ping_database(db_engine: AsyncEngine = engine) -> bool:
    """DB 연결 상태를 확인합니다.

    Run a trivial query against the store. A failure is logged and reported
    as False; the caller keeps the process running without a working store.
    """
    try:
        async with db_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Could not reach the database at startup")
        return False
    logger.info("Pinged the database. Connection is healthy.")
    return True
