"""예약 레포지토리 — 예약 조회 및 상태 변경 쿼리.

Booking Repository: Queries over the `bookedServices` collection.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.models.booking import BookedService
from home_repair.repositories.base import BaseRepository


class BookingRepository(BaseRepository[BookedService]):
    """예약 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the booked_services table.
    """

    def __init__(self) -> None:
        super().__init__(BookedService)

    async def get_by_customer(
        self,
        db: AsyncSession,
        user_email: str,
    ) -> Sequence[BookedService]:
        """고객이 예약한 목록 (Bookings made by a customer)."""
        return await self.get_all(db, filters={"user_email": user_email})

    async def get_by_provider(
        self,
        db: AsyncSession,
        provider_email: str,
    ) -> Sequence[BookedService]:
        """제공자가 처리할 예약 목록 (A provider's to-do bookings)."""
        return await self.get_all(db, filters={"provider_email": provider_email})

    async def set_status(
        self,
        db: AsyncSession,
        booking_id: UUID,
        status: str,
    ) -> tuple[int, int]:
        """상태를 무조건 덮어씁니다 (Unconditional status overwrite; no upsert)."""
        return await self.overwrite(db, booking_id, {"service_status": status})


# 싱글턴 인스턴스: Singleton instance
booking_repository: BookingRepository = BookingRepository()
