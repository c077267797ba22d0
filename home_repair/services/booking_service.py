"""예약 서비스 — 예약 생성/조회/상태 변경 비즈니스 로직.

Booking Service: Business logic for the `bookedServices` collection.
Bookings are snapshots: creation does not check that the referenced service
still exists, and duplicate bookings are accepted.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.models.booking import BookedService
from home_repair.repositories.booking_repository import booking_repository
from home_repair.schemas.booking import BookingCreate, BookingResponse
from home_repair.schemas.common import InsertResult, UpdateResult
from home_repair.utils.exceptions import NotFoundError


class BookingService:
    """예약 관련 비즈니스 로직을 처리하는 서비스.

    Service handling booking business logic.
    """

    def _to_response(self, booking: BookedService) -> BookingResponse:
        return BookingResponse.model_validate(booking)

    async def create_booking(
        self,
        db: AsyncSession,
        data: BookingCreate,
    ) -> InsertResult:
        """새 예약을 생성합니다.

        Insert a booking snapshot and summarize the insert.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 서비스 스냅샷 + 고객 정보 (Service snapshot plus customer)

        Returns:
            InsertResult: 부여된 ID 포함 (Summary carrying the assigned id)
        """
        booking: BookedService = await booking_repository.create(db, data.model_dump())
        return InsertResult(inserted_id=booking.id)

    async def get_booking(
        self,
        db: AsyncSession,
        booking_id: UUID,
    ) -> BookingResponse:
        """예약 단건 조회.

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Booking not found)
        """
        booking: BookedService | None = await booking_repository.get_by_id(db, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return self._to_response(booking)

    async def list_by_customer(
        self,
        db: AsyncSession,
        user_email: str,
    ) -> list[BookingResponse]:
        """고객 본인의 예약 목록 (The customer's own bookings)."""
        bookings = await booking_repository.get_by_customer(db, user_email)
        return [self._to_response(b) for b in bookings]

    async def list_by_provider(
        self,
        db: AsyncSession,
        provider_email: str,
    ) -> list[BookingResponse]:
        """제공자가 처리할 예약 목록 (Bookings the provider has to fulfil)."""
        bookings = await booking_repository.get_by_provider(db, provider_email)
        return [self._to_response(b) for b in bookings]

    async def update_status(
        self,
        db: AsyncSession,
        booking_id: UUID,
        status: str,
    ) -> UpdateResult:
        """예약 상태를 덮어씁니다.

        Overwrite service_status with any value, from any prior value.
        A missing booking yields a zero-matched result.
        """
        matched, modified = await booking_repository.set_status(db, booking_id, status)
        return UpdateResult(matched_count=matched, modified_count=modified)


# 싱글턴 인스턴스: Singleton instance
booking_service: BookingService = BookingService()
