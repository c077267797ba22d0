"""서비스 모델 — 제공자가 등록한 수리 서비스.

Service model: A repair service listed by a provider.
Backs the `services` collection.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from home_repair.database import Base, insertion_time


class Service(Base):
    """서비스 테이블.

    Service listing owned by exactly one provider email.
    The five descriptive fields (service_name, image_url, price, service_area,
    description) are replaced as a whole on update.

    Attributes:
        id: 고유 식별자 UUID (Opaque identity assigned on insert)
        provider_email: 소유 제공자 이메일 (Owning provider; NULL only for upserted rows)
        provider_name: 제공자 이름 (Provider display name)
        provider_image: 제공자 사진 URL (Provider avatar URL)
        service_name: 서비스 이름 (Searchable name)
        image_url: 서비스 이미지 URL (Service image URL)
        price: 가격 (Price)
        service_area: 서비스 지역 (Area served)
        description: 설명 (Free-text description)
        created_at: 생성 일시 UTC (Insertion timestamp, defines native order)
    """

    __tablename__ = "services"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소유자: 생성 시 설정, 이후 변경하지 않음 (Set at creation, not touched by update)
    provider_email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    provider_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    provider_image: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # 설명 필드 5종: The five descriptive attributes
    service_name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    service_area: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=insertion_time
    )
