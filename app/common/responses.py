"""
Response envelope helpers

모든 API 응답은 { success, message?, <resource>?, error?, errors? } 형태를 따릅니다.
"""

from __future__ import annotations

import logging

from common.application.result import Err, ErrorCode
from common.db_errors import describe_persistence_error
from common.masking import mask_secrets
from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope(*, success: bool, message: str | None = None, **resources) -> dict:
    body: dict = {"success": success}
    if message is not None:
        body["message"] = message
    body.update(resources)
    return body


def success_response(
    status_code: int = status.HTTP_200_OK, message: str | None = None, **resources
) -> Response:
    return Response(
        envelope(success=True, message=message, **resources), status=status_code
    )


def error_response(err: Err) -> Response:
    """서비스 계층의 Err를 HTTP 응답으로 변환합니다."""
    extra = {}
    if err.details:
        extra["errors"] = err.details
    return Response(
        envelope(success=False, message=err.message, **extra),
        status=ERROR_STATUS.get(err.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def server_error_response(message: str, exc: BaseException) -> Response:
    """예상하지 못한 예외(주로 DB 에러)를 500 응답으로 변환합니다."""
    return Response(
        envelope(
            success=False,
            message=describe_persistence_error(exc, message),
            error=mask_secrets(str(exc)),
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
