"""인증 관련 Pydantic 스키마 정의.

Schemas for the token issuing endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from home_repair.utils.jwt import RESERVED_CLAIMS


class TokenRequest(BaseModel):
    """토큰 발급 요청 스키마.

    Claims to sign. `email` is required because the access guard and the
    ownership checks read it; any extra claims are signed as given, except
    the registered claims the verifier interprets (aud, iss, sub, nbf, jti).
    """

    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1, max_length=255)

    @model_validator(mode="after")
    def reject_reserved_claims(self) -> "TokenRequest":
        # 예약 클레임 거부: 서명은 되지만 검증에서 항상 실패함
        reserved: list[str] = sorted(k for k in (self.model_extra or {}) if k in RESERVED_CLAIMS)
        if reserved:
            raise ValueError(f"Reserved claims not allowed: {', '.join(reserved)}")
        return self
