"""서비스 관련 Pydantic 요청/응답 스키마 정의.

Service request/response schemas. Field names travel as camelCase
(`serviceName`, `providerEmail`, ...), identity travels as `_id`.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from home_repair.schemas.common import CamelModel


class ServiceCreate(CamelModel):
    """서비스 생성 요청 스키마.

    Service creation request. The provider email becomes the owning identity
    and is never changed by updates.
    """

    service_name: str = Field(min_length=1, max_length=255)
    provider_email: str = Field(min_length=1, max_length=255)
    provider_name: str | None = None
    provider_image: str | None = None
    image_url: str | None = None
    price: float = Field(ge=0)
    service_area: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ServiceUpdate(CamelModel):
    """서비스 수정 요청 스키마 — 설명 필드 5종 전체 교체.

    Full replacement of the five descriptive fields. Required fields match
    ServiceCreate; omitted optional fields are cleared.
    """

    service_name: str = Field(min_length=1, max_length=255)
    image_url: str | None = None
    price: float = Field(ge=0)
    service_area: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ServiceResponse(CamelModel):
    """서비스 응답 스키마 (Service document as returned to clients)."""

    id: UUID = Field(alias="_id")
    provider_email: str | None = None
    provider_name: str | None = None
    provider_image: str | None = None
    service_name: str
    image_url: str | None = None
    price: float
    service_area: str | None = None
    description: str | None = None
    created_at: datetime | None = None
