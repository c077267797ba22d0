"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package: Aggregates the marketplace endpoints into a single
router mounted at the application root.

Included routers:
    - auth: 토큰 발급/로그아웃 (Token issue and logout)
    - services: 서비스 목록/검색/CRUD (Service listing, search, CRUD)
    - bookings: 예약 및 상태 관리 (Bookings and status changes)
"""

from fastapi import APIRouter

from home_repair.api.auth import router as auth_router
from home_repair.api.services import router as services_router
from home_repair.api.bookings import router as bookings_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, tags=["Auth"])
api_router.include_router(services_router, tags=["Services"])
api_router.include_router(bookings_router, tags=["Bookings"])
