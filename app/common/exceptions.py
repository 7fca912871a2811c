from __future__ import annotations

from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler


def envelope_exception_handler(exc, context):
    """
    DRF 기본 예외 처리 결과(401/403/404/405/파싱 에러 등)를
    { success: false, message, errors? } envelope으로 감쌉니다.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {
            "success": False,
            "message": "Invalid request data",
            "errors": response.data,
        }
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {
        "success": False,
        "message": str(detail) if detail else "Request failed",
    }
    return response
