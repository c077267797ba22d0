"""데모 데이터 시드 스크립트 — 샘플 서비스 생성.

Seed script: Inserts a handful of demo services so the listing, popular and
search endpoints have something to show on a fresh database.

Usage:
    python -m home_repair.seed
"""

import asyncio
import logging

from sqlalchemy import select

from home_repair.config import settings
from home_repair.database import async_session, engine, Base
from home_repair.models import Service
from home_repair.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEMO_PROVIDER: dict[str, str] = {
    "provider_email": "provider@homerepair.dev",
    "provider_name": "Demo Provider",
}

DEMO_SERVICES: list[dict[str, object]] = [
    {"service_name": "Pipe Fixing", "price": 40, "service_area": "Dhaka",
     "description": "Leaking pipes and joints repaired on site."},
    {"service_name": "Electrical Wiring", "price": 75, "service_area": "Dhaka",
     "description": "Rewiring, switchboards and fixture installation."},
    {"service_name": "AC Servicing", "price": 55, "service_area": "Chattogram",
     "description": "Filter cleaning, gas refill and general check-up."},
    {"service_name": "Furniture Assembly", "price": 30, "service_area": "Sylhet",
     "description": "Flat-pack furniture assembled and fixed in place."},
    {"service_name": "Wall Painting", "price": 120, "service_area": "Khulna",
     "description": "Interior painting including surface preparation."},
    {"service_name": "Roof Leak Repair", "price": 90, "service_area": "Rajshahi",
     "description": "Inspection and sealing of roof leaks."},
]


async def seed() -> None:
    """데이터베이스를 데모 데이터로 시드합니다.

    Create tables if missing, then insert the demo services.

    Idempotent: 서비스가 이미 있으면 건너뜁니다 (Skips when any service exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Service).limit(1))
        if result.scalar_one_or_none():
            logger.info("Already seeded. Skipping.")
            return

        for data in DEMO_SERVICES:
            db.add(Service(**DEMO_PROVIDER, **data))
        await db.commit()

    logger.info("Seeded %d demo services", len(DEMO_SERVICES))


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed())
