"""예약 모델 — 고객이 예약한 서비스의 스냅샷.

Booked service model: Snapshot of a service taken at booking time.
Backs the `bookedServices` collection.
"""

import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from home_repair.database import Base, insertion_time


class BookedService(Base):
    """예약 테이블.

    A customer's booking. Descriptive fields are copied from the service, so
    later edits or deletion of the service do not affect the booking.

    Attributes:
        id: 고유 식별자 (Primary key UUID)
        service_id: 원본 서비스 ID (Referenced service, no foreign key)
        user_email: 예약한 고객 이메일 (Customer who booked)
        provider_email: 처리할 제공자 이메일 (Provider who fulfils it)
        service_status: 진행 상태 (Free-form status string, NULL until set)
    """

    __tablename__ = "booked_services"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 스냅샷 참조: 서비스 삭제와 무관 (Snapshot reference, not enforced)
    service_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    user_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    user_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    provider_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    provider_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    service_name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    special_instruction: Mapped[str | None] = mapped_column(Text, nullable=True)

    # 상태: 검증 없는 단일 필드 덮어쓰기 (Single-field overwrite, any value)
    service_status: Mapped[str | None] = mapped_column(String(50), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=insertion_time
    )
