from __future__ import annotations

import logging

from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """
    로그 레코드에 현재 요청의 request_id를 붙입니다.

    요청 컨텍스트 밖(관리 명령, 테스트)에서는 "-"가 기록됩니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s 를 항상 쓸 수 있도록 보장
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
