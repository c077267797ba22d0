"""서비스 레포지토리 — 서비스 CRUD 및 검색 쿼리.

Service Repository: CRUD, ownership filtering and name search over the
`services` collection.
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.models.service import Service
from home_repair.repositories.base import BaseRepository

# LIKE 패턴 이스케이프 문자: Escape character for LIKE patterns
LIKE_ESCAPE: str = "!"


def escape_like(value: str, escape: str = LIKE_ESCAPE) -> str:
    """검색어를 LIKE 패턴의 리터럴로 변환합니다.

    Escape LIKE wildcards so user text only ever matches itself.
    """
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class ServiceRepository(BaseRepository[Service]):
    """서비스 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the services table.
    """

    def __init__(self) -> None:
        super().__init__(Service)

    async def get_by_provider(
        self,
        db: AsyncSession,
        provider_email: str,
    ) -> Sequence[Service]:
        """제공자 이메일로 서비스를 조회합니다 (All services owned by a provider)."""
        return await self.get_all(db, filters={"provider_email": provider_email})

    async def search_by_name(
        self,
        db: AsyncSession,
        text: str,
    ) -> Sequence[Service]:
        """서비스 이름 부분 일치 검색 (대소문자 무시).

        Case-insensitive substring match on service_name. The text is matched
        literally; an empty string matches every service.
        """
        query: Select = select(Service)
        if text:
            pattern: str = f"%{escape_like(text)}%"
            query = query.where(Service.service_name.ilike(pattern, escape=LIKE_ESCAPE))
        result = await db.execute(self.native_order(query))
        return result.scalars().all()

    async def upsert(
        self,
        db: AsyncSession,
        service_id: UUID,
        fields: dict[str, Any],
    ) -> tuple[int, int, UUID | None]:
        """필드를 덮어쓰고, 없으면 해당 필드만으로 새 문서를 생성합니다.

        Overwrite `fields` on the service; when no service has this id, insert
        one under the same id holding only `fields` (no provider_email).

        Returns:
            tuple[int, int, UUID | None]: (matched, modified, upserted_id)
        """
        matched, modified = await self.overwrite(db, service_id, fields)
        if matched:
            return matched, modified, None

        created: Service = await self.create(db, {"id": service_id, **fields})
        return 0, 0, created.id


# 싱글턴 인스턴스: Singleton instance
service_repository: ServiceRepository = ServiceRepository()
