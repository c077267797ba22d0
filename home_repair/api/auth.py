"""인증 라우터 — 토큰 발급 및 로그아웃.

Auth Router: Issues the identity token cookie and clears it on logout.
"""

from fastapi import APIRouter, Response

from home_repair.schemas.auth import TokenRequest
from home_repair.schemas.common import MessageResponse
from home_repair.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/jwt", response_model=MessageResponse)
async def issue_token(data: TokenRequest, response: Response) -> MessageResponse:
    """토큰 발급 — 요청 본문의 클레임으로 쿠키 설정.

    Sign the request body and set it as the HTTP-only token cookie.
    """
    return auth_service.issue_token(response, data.model_dump())


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """로그아웃 — 토큰 쿠키 삭제.

    Clear the token cookie.
    """
    return auth_service.logout(response)
