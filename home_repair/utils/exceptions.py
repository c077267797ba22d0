"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error taxonomy of
the API. Every subclass of `ApiError` is rendered as `{"message": detail}`
by the handler registered in `home_repair.main`.

Usage:
    from home_repair.utils.exceptions import NotFoundError, ForbiddenError
    raise NotFoundError("Service not found")
"""

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """API 오류 공통 부모 (Common base for errors rendered as {message})."""


class NotFoundError(ApiError):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a single service or booking lookup finds nothing.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenError(ApiError):
    """403 Forbidden 예외 — 다른 사용자의 리소스에 접근할 때 사용.

    Raised when the verified caller email differs from the email the request
    asks about.

    Args:
        detail: 오류 메시지 (Error message, default: "Forbidden access")
    """

    def __init__(self, detail: str = "Forbidden access") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(ApiError):
    """401 Unauthorized 예외 — 토큰 쿠키가 없을 때 사용.

    Raised when a protected route is called without the token cookie.

    Args:
        detail: 오류 메시지 (Error message, default: "Unauthorized access")
    """

    def __init__(self, detail: str = "Unauthorized access") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class InvalidTokenError(ApiError):
    """400 예외 — 토큰 서명 불일치 또는 만료.

    Raised when the token cookie is present but fails verification
    (bad signature, malformed, or expired).

    Args:
        detail: 오류 메시지 (Error message, default: "Invalid token")
    """

    def __init__(self, detail: str = "Invalid token") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class BadRequestError(ApiError):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Raised when an id or payload is malformed.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
