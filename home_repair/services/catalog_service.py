"""카탈로그 서비스 — 서비스 목록/검색/CRUD 비즈니스 로직.

Catalog Service: Business logic for the `services` collection:
paginated listing, count, popular slice, per-provider listing, lookup,
create, full-field update (upsert), delete and name search.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.config import settings
from home_repair.models.service import Service
from home_repair.repositories.service_repository import service_repository
from home_repair.schemas.common import DeleteResult, InsertResult, UpdateResult
from home_repair.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from home_repair.utils.exceptions import NotFoundError


class CatalogService:
    """서비스 컬렉션 비즈니스 로직 (Business logic for provider services)."""

    def _to_response(self, service: Service) -> ServiceResponse:
        return ServiceResponse.model_validate(service)

    async def list_all(
        self,
        db: AsyncSession,
        page: int = 1,
        limit: int | None = None,
    ) -> list[ServiceResponse]:
        """서비스 목록을 페이지 단위로 조회합니다.

        Return `limit` services after skipping `(page - 1) * limit`.
        `limit` has no upper bound.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page: 페이지 번호, 1부터 시작 (1-based page number)
            limit: 페이지 크기, 기본값 DEFAULT_PAGE_SIZE (Page size)
        """
        per_page: int = limit if limit is not None else settings.DEFAULT_PAGE_SIZE
        services = await service_repository.get_page(db, page=page, per_page=per_page)
        return [self._to_response(s) for s in services]

    async def count(self, db: AsyncSession) -> int:
        """전체 서비스 개수 (Total number of services)."""
        return await service_repository.count(db)

    async def list_popular(self, db: AsyncSession) -> list[ServiceResponse]:
        """인기 서비스 — 저장 순서상 앞의 N개.

        First POPULAR_SERVICES_LIMIT services in native order; no ranking.
        """
        services = await service_repository.get_all(db, limit=settings.POPULAR_SERVICES_LIMIT)
        return [self._to_response(s) for s in services]

    async def list_by_provider(
        self,
        db: AsyncSession,
        provider_email: str,
    ) -> list[ServiceResponse]:
        """제공자 본인의 서비스 목록 (Services owned by the provider)."""
        services = await service_repository.get_by_provider(db, provider_email)
        return [self._to_response(s) for s in services]

    async def get_service(
        self,
        db: AsyncSession,
        service_id: UUID,
    ) -> ServiceResponse:
        """서비스 단건 조회.

        Raises:
            NotFoundError: 서비스를 찾을 수 없을 때 (Service not found)
        """
        service: Service | None = await service_repository.get_by_id(db, service_id)
        if service is None:
            raise NotFoundError("Service not found")
        return self._to_response(service)

    async def create_service(
        self,
        db: AsyncSession,
        data: ServiceCreate,
    ) -> InsertResult:
        """새 서비스를 생성합니다 (Insert a service; the id is assigned on insert)."""
        service: Service = await service_repository.create(db, data.model_dump())
        return InsertResult(inserted_id=service.id)

    async def update_service(
        self,
        db: AsyncSession,
        service_id: UUID,
        data: ServiceUpdate,
    ) -> UpdateResult:
        """설명 필드 5종을 교체합니다.

        Replace the five descriptive fields. When no service has this id a new
        one is created holding only those fields, so it has no provider email.
        """
        fields: dict[str, Any] = data.model_dump()
        matched, modified, upserted_id = await service_repository.upsert(db, service_id, fields)
        return UpdateResult(
            matched_count=matched,
            modified_count=modified,
            upserted_count=1 if upserted_id is not None else 0,
            upserted_id=upserted_id,
        )

    async def delete_service(
        self,
        db: AsyncSession,
        service_id: UUID,
    ) -> DeleteResult:
        """서비스를 삭제합니다. 없는 ID는 0건 결과 (Missing id deletes nothing)."""
        deleted: int = await service_repository.delete(db, service_id)
        return DeleteResult(deleted_count=deleted)

    async def search(
        self,
        db: AsyncSession,
        text: str,
    ) -> list[ServiceResponse]:
        """서비스 이름 검색 (Case-insensitive literal substring search)."""
        services = await service_repository.search_by_name(db, text)
        return [self._to_response(s) for s in services]


# 싱글턴 인스턴스: Singleton instance
catalog_service: CatalogService = CatalogService()
