from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode:
    """서비스/유스케이스 실패 코드. 뷰에서 HTTP 상태 코드로 매핑됩니다."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


@dataclass(frozen=True, slots=True)
class Err:
    """
    실패 결과.

    - code: ErrorCode 값 중 하나
    - message: 응답 envelope의 message로 그대로 노출되는 문구
    - details: 필드별 검증 에러 등 추가 정보(선택)
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """성공 결과."""

    value: T


Result = Ok[T] | Err
