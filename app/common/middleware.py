from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from common.request_id import reset_request_id, set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성하거나 X-Request-ID 헤더 값을 이어받고
    - 처리 결과(메서드/경로/상태/소요 시간)를 한 줄로 기록한 뒤
    - response에 X-Request-ID 헤더를 포함합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = request.META.get(self.header_name)
        request_id = str(incoming).strip()[:64] if incoming else uuid.uuid4().hex

        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        started = time.monotonic()
        try:
            response = self.get_response(request)
            elapsed_ms = (time.monotonic() - started) * 1000
            logger.info(
                f"{request.method} {request.path} -> {response.status_code} "
                f"({elapsed_ms:.1f}ms)"
            )
            response[self.response_header] = request_id
            return response
        finally:
            reset_request_id()
