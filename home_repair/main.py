"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point: Middleware, error handlers and router
registration. Run with:

    uvicorn home_repair.main:app --reload
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from home_repair.config import settings
from home_repair.database import ping_database
from home_repair.middleware.axiom_logging import AxiomLoggingMiddleware
from home_repair.utils.exceptions import ApiError
from home_repair.utils.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """시작 시 DB 연결 확인 — 실패해도 서버는 계속 실행.

    Ping the store on startup. A failed ping is logged and the server keeps
    running without a working store connection.
    """
    await ping_database()
    yield


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어: CORS보다 먼저 등록하여 모든 요청을 캡처
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어: 쿠키 전송을 위해 credentials 허용
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    """API 오류를 {message} 형태로 반환합니다 (Render API errors as {message})."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패를 400으로 반환합니다.

    Malformed ids, bodies or query values are reported as 400 Bad Request.
    """
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """서버 동작 확인 텍스트 (Liveness text response)."""
    return "Home repair server is running"


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록: Router registration (mounted at the root, no prefix)
# ---------------------------------------------------------------------------
from home_repair.api import api_router  # noqa: E402

app.include_router(api_router)
