"""FastAPI 의존성 주입 모듈 — 접근 가드 및 소유권 검사.

FastAPI dependency injection module: Access guard and ownership checks.

Access Guard Flow:
    1. 요청의 토큰 쿠키를 읽음 (Read the token cookie from the request)
    2. 쿠키가 없으면 401 (No cookie → 401 Unauthorized)
    3. decode_token() 실패 시 400 (Bad signature / malformed / expired → 400)
    4. 검증된 클레임을 핸들러에 전달 (Verified claims are handed to the handler)

Ownership Check:
    가드는 호출자가 누구인지만 증명합니다. 이메일 쿼리 파라미터를 받는
    핸들러가 ensure_owner()로 직접 비교합니다.
    (The guard proves who the caller is. Handlers that take an email query
    parameter compare it themselves with ensure_owner().)
"""

import logging
from typing import Any

from fastapi import Request

from home_repair.config import settings
from home_repair.utils.exceptions import ForbiddenError, InvalidTokenError, UnauthorizedError
from home_repair.utils.jwt import TokenExpiredError, TokenVerificationError, decode_token

logger = logging.getLogger(__name__)


async def get_current_claims(request: Request) -> dict[str, Any]:
    """토큰 쿠키에서 현재 호출자의 클레임을 추출합니다.

    Verify the token cookie and return the caller's claims.

    Raises:
        UnauthorizedError(401): 토큰 쿠키가 없음 (No token cookie)
        InvalidTokenError(400): 토큰 검증 실패 또는 만료 (Invalid or expired token)
    """
    token: str | None = request.cookies.get(settings.JWT_COOKIE_NAME)
    if not token:
        logger.warning("Rejected %s %s: no token cookie", request.method, request.url.path)
        raise UnauthorizedError()

    try:
        claims: dict[str, Any] = decode_token(token)
    except TokenExpiredError:
        logger.warning("Rejected %s %s: expired token", request.method, request.url.path)
        raise InvalidTokenError("Token expired")
    except TokenVerificationError:
        logger.warning("Rejected %s %s: invalid token", request.method, request.url.path)
        raise InvalidTokenError()

    request.state.claims = claims
    return claims


def ensure_owner(claims: dict[str, Any], email: str) -> None:
    """호출자 이메일과 요청 이메일이 같은지 확인합니다. 다르면 403.

    Raises:
        ForbiddenError(403): 다른 사용자의 리소스 요청 (Email mismatch)
    """
    if claims.get("email") != email:
        raise ForbiddenError()
