"""인증 서비스 — 토큰 발급 및 쿠키 관리.

Auth Service: Issues identity tokens and manages the HTTP-only cookie that
carries them. Tokens are stateless, so logout only clears the cookie: a token
copied elsewhere stays valid until it expires.
"""

import logging
from typing import Any

from fastapi import Response

from home_repair.config import settings
from home_repair.schemas.common import MessageResponse
from home_repair.utils.jwt import create_access_token

logger = logging.getLogger(__name__)


class AuthService:
    """토큰 발급/로그아웃 비즈니스 로직 (Token issue and logout logic)."""

    def issue_token(self, response: Response, claims: dict[str, Any]) -> MessageResponse:
        """클레임에 서명하고 토큰 쿠키를 설정합니다.

        Sign the caller's claims and attach the token as an HTTP-only cookie.

        Args:
            response: 쿠키를 설정할 응답 (Response receiving the cookie)
            claims: 서명할 클레임, email 포함 (Claims to sign, including email)

        Returns:
            MessageResponse: 발급 확인 메시지 (Confirmation message)
        """
        token: str = create_access_token(claims)
        response.set_cookie(
            key=settings.JWT_COOKIE_NAME,
            value=token,
            httponly=True,
            secure=settings.cookie_secure,
            samesite=settings.cookie_samesite,
        )
        logger.info("Issued identity token for %s", claims.get("email"))
        return MessageResponse(message="Token created")

    def logout(self, response: Response) -> MessageResponse:
        """토큰 쿠키를 삭제합니다 (Clear the token cookie; no server-side state)."""
        response.delete_cookie(
            key=settings.JWT_COOKIE_NAME,
            httponly=True,
            secure=settings.cookie_secure,
            samesite=settings.cookie_samesite,
        )
        return MessageResponse(message="Logged out")


# 싱글턴 인스턴스: Singleton instance
auth_service: AuthService = AuthService()
