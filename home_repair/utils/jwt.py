"""JWT 토큰 발급 및 검증 유틸리티 모듈.

JWT token issuance and verification utility module.
Identity tokens are stateless: the caller's claims are signed with the
server secret and carry their own expiry, nothing is stored server side.

JWT Payload Structure:
    {
        "email": "provider@example.com",  # 호출자 이메일 (Caller identity)
        ...                               # 호출자가 보낸 기타 클레임 (Other caller claims)
        "iat": 1234567890,                # 발급 시각 (Issued at)
        "exp": 1234567890                 # 만료 시각 (Expiration)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from home_repair.config import settings

# 서버가 추가하는 등록 클레임: Registered claims added on issue, stripped on verify
_SERVER_CLAIMS: tuple[str, ...] = ("iat", "exp")

# 검증 시 PyJWT가 해석하는 등록 클레임: Registered claims PyJWT checks on decode.
# A caller value here would make the issued token unverifiable.
RESERVED_CLAIMS: tuple[str, ...] = ("aud", "iss", "sub", "nbf", "jti")


class TokenVerificationError(Exception):
    """토큰 검증 실패 (Token failed verification: bad signature or malformed)."""


class TokenExpiredError(TokenVerificationError):
    """토큰 만료 (Token signature is valid but its TTL has passed)."""


def create_access_token(
    claims: dict[str, Any],
    expires_in: timedelta | None = None,
) -> str:
    """클레임에 서명하여 JWT 토큰을 생성합니다.

    Sign the given claims with the server secret and embed `now + TTL` as the
    expiry. Caller `iat`/`exp` are replaced by the server values.

    Args:
        claims: 토큰에 담을 페이로드 (Caller claims, usually {"email": ...})
        expires_in: 유효 기간, 기본값은 JWT_EXPIRE_HOURS (TTL override)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)

    Raises:
        ValueError: 예약된 등록 클레임 포함 시 (A claim in RESERVED_CLAIMS is present)
    """
    reserved: list[str] = sorted(k for k in claims if k in RESERVED_CLAIMS)
    if reserved:
        raise ValueError(f"Reserved claims not allowed: {', '.join(reserved)}")

    ttl: timedelta = expires_in if expires_in is not None else timedelta(hours=settings.JWT_EXPIRE_HOURS)
    now: datetime = datetime.now(timezone.utc)
    to_encode: dict[str, Any] = {k: v for k, v in claims.items() if k not in _SERVER_CLAIMS}
    to_encode.update({"iat": now, "exp": now + ttl})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 검증하고 원래 클레임을 반환합니다.

    Verify signature and expiry, then return the claims exactly as they were
    given to `create_access_token`.

    Raises:
        TokenExpiredError: 토큰 만료 시 (When the token is past its TTL)
        TokenVerificationError: 서명 불일치 또는 형식 오류 (Bad signature or malformed token)
    """
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenVerificationError("Token is invalid") from exc

    return {k: v for k, v in payload.items() if k not in _SERVER_CLAIMS}
