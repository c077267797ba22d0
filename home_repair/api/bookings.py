"""예약 라우터 — 예약 생성/조회/상태 변경 엔드포인트.

Booking Router: Booking creation, the customer and provider listings
(behind the access guard), single lookup and status overwrite.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.api.deps import ensure_owner, get_current_claims
from home_repair.database import get_db
from home_repair.schemas.booking import BookingCreate, BookingResponse, BookingStatusUpdate
from home_repair.schemas.common import InsertResult, UpdateResult
from home_repair.services.booking_service import booking_service

router: APIRouter = APIRouter()


@router.post("/book-service", response_model=InsertResult, status_code=201)
async def book_service(
    data: BookingCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InsertResult:
    """서비스를 예약합니다 (Create a booking snapshot)."""
    result: InsertResult = await booking_service.create_booking(db, data)
    await db.commit()
    return result


@router.get("/booked-services", response_model=list[BookingResponse])
async def booked_services(
    email: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    claims: Annotated[dict[str, Any], Depends(get_current_claims)],
) -> list[BookingResponse]:
    """고객 본인의 예약 목록 — 쿠키 인증 + 이메일 소유권 검사.

    The customer's own bookings.
    """
    ensure_owner(claims, email)
    return await booking_service.list_by_customer(db, email)


@router.get("/booked-services/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BookingResponse:
    """예약 단건 조회 (Single booking; 404 when missing)."""
    return await booking_service.get_booking(db, booking_id)


@router.get("/service-to-do", response_model=list[BookingResponse])
async def service_to_do(
    email: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    claims: Annotated[dict[str, Any], Depends(get_current_claims)],
) -> list[BookingResponse]:
    """제공자가 처리할 예약 목록 — 쿠키 인증 + 이메일 소유권 검사.

    Bookings the provider has to fulfil.
    """
    ensure_owner(claims, email)
    return await booking_service.list_by_provider(db, email)


@router.patch("/update-status/{booking_id}", response_model=UpdateResult)
async def update_status(
    booking_id: UUID,
    data: BookingStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UpdateResult:
    """예약 상태를 덮어씁니다 (Overwrite the status with any value)."""
    result: UpdateResult = await booking_service.update_status(db, booking_id, data.updated_status)
    await db.commit()
    return result
