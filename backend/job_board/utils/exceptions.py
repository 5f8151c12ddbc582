from enum import Enum
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional

from job_board.config import settings

class ErrorKind(str, Enum):
    """서비스 계층 실패 유형"""
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    QUERY_ERROR = "QUERY_ERROR"
    AGGREGATION_ERROR = "AGGREGATION_ERROR"

class JobServiceError(Exception):
    """조회 서비스에서 발생한 실패 (저장소 오류, 잘못된 식별자 등)"""
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

def public_error_detail(exc: JobServiceError) -> str:
    """응답 error 필드에 실을 값. 내부 메시지 노출은 설정으로 제어한다."""
    if settings.EXPOSE_ERROR_DETAILS:
        return exc.message
    return exc.kind.value

class AppException(HTTPException):
    """애플리케이션 전용 예외 클래스"""
    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[str] = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.error = error

def create_error_response(message: str, error: Optional[str] = None) -> Dict[str, Any]:
    """일관된 에러 응답 포맷 생성"""
    response: Dict[str, Any] = {
        "success": False,
        "message": message,
    }
    
    if error is not None:
        response["error"] = error
    
    return response

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.message, exc.error),
    )

# 자주 사용되는 에러들
class NotFoundException(AppException):
    def __init__(self, resource: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            message=message or f"{resource} not found",
        )

class InternalServerException(AppException):
    def __init__(self, message: str = "Internal server error", error: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message,
            error=error,
        )
