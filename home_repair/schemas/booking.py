"""예약 관련 Pydantic 요청/응답 스키마 정의.

Booked service request/response schemas.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from home_repair.schemas.common import CamelModel


class BookingCreate(CamelModel):
    """예약 생성 요청 스키마.

    Booking request: a snapshot of the booked service plus the customer.
    `service_status` may be left unset; it stays null until a provider sets it.
    """

    service_id: UUID | None = None
    service_name: str = Field(min_length=1, max_length=255)
    image_url: str | None = None
    price: float = Field(ge=0)
    provider_email: str = Field(min_length=1, max_length=255)
    provider_name: str | None = None
    user_email: str = Field(min_length=1, max_length=255)
    user_name: str | None = None
    service_date: date | None = None
    special_instruction: str | None = None
    service_status: str | None = Field(default=None, max_length=50)


class BookingStatusUpdate(CamelModel):
    """예약 상태 변경 요청 (Status overwrite: {"updatedStatus": "..."})."""

    updated_status: str = Field(min_length=1, max_length=50)


class BookingResponse(CamelModel):
    """예약 응답 스키마 (Booked service document)."""

    id: UUID = Field(alias="_id")
    service_id: UUID | None = None
    service_name: str
    image_url: str | None = None
    price: float
    provider_email: str
    provider_name: str | None = None
    user_email: str
    user_name: str | None = None
    service_date: date | None = None
    special_instruction: str | None = None
    service_status: str | None = None
    created_at: datetime | None = None
