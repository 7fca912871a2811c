from __future__ import annotations

import re

_SECRET_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    re.compile(
        r"\b(access|refresh|access_token|refresh_token|password)\b\s*[:=]\s*[^\s,]+",
        re.IGNORECASE,
    ),
]

MAX_MASKED_LENGTH = 300


def mask_secrets(text: str | None) -> str | None:
    """
    에러 응답의 `error` 필드와 로그에 토큰/비밀번호가 섞이지 않도록 가립니다.
    """
    if not text:
        return text
    masked = text
    for pat in _SECRET_PATTERNS:
        masked = pat.sub("[REDACTED]", masked)
    if len(masked) > MAX_MASKED_LENGTH:
        masked = masked[:MAX_MASKED_LENGTH] + "...[TRUNCATED]"
    return masked
