"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository: Parent class for the collection repositories.
Provides generic insert, lookup, filtered listing, field overwrite and delete
operations. Each call is a single store round trip; nothing here spans
several calls atomically.

Usage:
    class ServiceRepository(BaseRepository[Service]):
        def __init__(self) -> None:
            super().__init__(Service)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.database import Base

# 제네릭 타입 변수: SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def native_order(self, query: Select) -> Select:
        """저장 순서 정렬을 적용합니다.

        Apply insertion order: `created_at` (strictly increasing per process,
        see `insertion_time`), then `id`.
        """
        return query.order_by(self.model.created_at, self.model.id)

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        limit: int | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 레코드를 저장 순서대로 조회합니다.

        Retrieve records matching equality filters, in native order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Equality filter dict {'column_name': value})
            limit: 최대 개수, None이면 제한 없음 (Max rows; None = unbounded)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용: Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                query = query.where(getattr(self.model, column_name) == value)

        query = self.native_order(query)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return result.scalars().all()

    async def get_page(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> Sequence[ModelType]:
        """페이지 단위로 레코드를 조회합니다.

        Skip `(page - 1) * per_page` records in native order and return the
        next `per_page`.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page: 현재 페이지 번호, 1부터 시작 (Current page number, 1-based)
            per_page: 페이지당 레코드 수 (Number of records per page)

        Returns:
            Sequence[ModelType]: 현재 페이지 레코드 (Records on this page)
        """
        # 오프셋 계산 및 페이지 적용: Calculate offset and apply pagination
        offset: int = (page - 1) * per_page
        query: Select = self.native_order(select(self.model)).offset(offset).limit(per_page)
        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 (Total number of records)."""
        total: int = (await db.execute(select(func.count()).select_from(self.model))).scalar() or 0
        return total

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record. The identity is assigned on insert unless
        `obj_data` carries one.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def overwrite(
        self,
        db: AsyncSession,
        record_id: UUID,
        fields: dict[str, Any],
    ) -> tuple[int, int]:
        """기존 레코드의 필드를 덮어씁니다.

        Overwrite the given fields on an existing record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드의 UUID (UUID of the record to update)
            fields: 덮어쓸 필드와 값 (Fields and values to write)

        Returns:
            tuple[int, int]: (일치 개수, 변경 개수), i.e. (matched, modified), each 0 or 1
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return 0, 0

        changed: bool = False
        for field, value in fields.items():
            if getattr(db_obj, field) != value:
                setattr(db_obj, field, value)
                changed = True

        if changed:
            await db.flush()
        return 1, int(changed)

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> int:
        """레코드를 삭제합니다.

        Delete a record by its UUID. A missing record is not an error.

        Returns:
            int: 삭제된 개수, 0 또는 1 (Number of deleted records)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return 0

        await db.delete(db_obj)
        await db.flush()
        return 1
