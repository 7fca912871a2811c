from __future__ import annotations

import re

# PostgreSQL SQLSTATE: not_null_violation
NOT_NULL_VIOLATION = "23502"

_SQLITE_NOT_NULL = re.compile(r"NOT NULL constraint failed: \w+\.(\w+)")


def _not_null_column(exc: BaseException) -> str | None:
    cause = exc.__cause__ or exc
    code = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if code == NOT_NULL_VIOLATION:
        diag = getattr(cause, "diag", None)
        return getattr(diag, "column_name", None) or "unknown"

    match = _SQLITE_NOT_NULL.search(str(exc))
    if match:
        return match.group(1)
    return None


def describe_persistence_error(exc: BaseException, default: str) -> str:
    """
    DB 예외를 응답 message로 변환합니다.

    NOT NULL 제약 위반이면 어떤 컬럼이 비었는지 알려주고,
    그 외에는 호출 측이 넘긴 기본 문구를 그대로 사용합니다.
    """
    column = _not_null_column(exc)
    if column:
        return f'Required field "{column}" cannot be null'
    return default
