"""서비스 라우터 — 서비스 목록/검색/CRUD 엔드포인트.

Service Router: Listing, search and CRUD endpoints for provider services.
Only `/my-services` sits behind the access guard.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from home_repair.api.deps import ensure_owner, get_current_claims
from home_repair.database import get_db
from home_repair.schemas.common import CountResponse, DeleteResult, InsertResult, UpdateResult
from home_repair.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from home_repair.services.catalog_service import catalog_service

router: APIRouter = APIRouter()

# 페이지 상한: (page - 1) * limit must stay inside a 64-bit store offset
MAX_PAGE: int = 1_000_000_000
MAX_PAGE_SIZE: int = 1_000_000_000


@router.get("/all-services", response_model=list[ServiceResponse])
async def list_services(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1, le=MAX_PAGE)] = 1,
    limit: Annotated[int | None, Query(ge=1, le=MAX_PAGE_SIZE)] = None,
) -> list[ServiceResponse]:
    """서비스 목록을 페이지 단위로 조회합니다.

    Paginated listing in insertion order. Out-of-range page or limit
    values fail validation with 400.
    """
    return await catalog_service.list_all(db, page=page, limit=limit)


@router.get("/service-count", response_model=CountResponse)
async def count_services(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CountResponse:
    """전체 서비스 개수 (Total number of services)."""
    return CountResponse(count=await catalog_service.count(db))


@router.get("/popular-services", response_model=list[ServiceResponse])
async def popular_services(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ServiceResponse]:
    """인기 서비스 목록 (First few services in insertion order)."""
    return await catalog_service.list_popular(db)


@router.get("/my-services", response_model=list[ServiceResponse])
async def my_services(
    email: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    claims: Annotated[dict[str, Any], Depends(get_current_claims)],
) -> list[ServiceResponse]:
    """제공자 본인의 서비스 목록 — 쿠키 인증 + 이메일 소유권 검사.

    The provider's own services. The email must match the token's email.
    """
    ensure_owner(claims, email)
    return await catalog_service.list_by_provider(db, email)


@router.get("/services/{service_id}", response_model=ServiceResponse)
async def get_service(
    service_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ServiceResponse:
    """서비스 단건 조회 (Single service; 404 when missing)."""
    return await catalog_service.get_service(db, service_id)


@router.post("/add-service", response_model=InsertResult, status_code=201)
async def add_service(
    data: ServiceCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> InsertResult:
    """새 서비스를 등록합니다 (Create a service)."""
    result: InsertResult = await catalog_service.create_service(db, data)
    await db.commit()
    return result


@router.put("/update-service/{service_id}", response_model=UpdateResult)
async def update_service(
    service_id: UUID,
    data: ServiceUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UpdateResult:
    """서비스 설명 필드를 교체합니다 — 없으면 생성 (upsert).

    Replace the five descriptive fields, creating the service when missing.
    """
    result: UpdateResult = await catalog_service.update_service(db, service_id, data)
    await db.commit()
    return result


@router.delete("/delete-service/{service_id}", response_model=DeleteResult)
async def delete_service(
    service_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DeleteResult:
    """서비스를 삭제합니다 (Delete; a missing id reports zero deleted)."""
    result: DeleteResult = await catalog_service.delete_service(db, service_id)
    await db.commit()
    return result


@router.get("/search-services", response_model=list[ServiceResponse])
@router.get("/search-services/{query}", response_model=list[ServiceResponse])
async def search_services(
    db: Annotated[AsyncSession, Depends(get_db)],
    query: str = "",
) -> list[ServiceResponse]:
    """서비스 이름 검색 — 대소문자 무시 부분 일치.

    Case-insensitive substring search on the service name. Without a query
    every service matches.
    """
    return await catalog_service.search(db, query)
