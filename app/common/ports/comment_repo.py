from __future__ import annotations

from typing import Any, Protocol


class CommentThreadRepositoryPort(Protocol):
    def job_exists(self, job_id: int) -> bool: ...

    def fetch_thread_rows(self, job_id: int) -> list[dict[str, Any]]:
        """
        comments LEFT JOIN replies 평탄한 행 목록.

        정렬: (comment.created_at DESC, comment.id DESC,
               reply.created_at ASC, reply.id ASC)
        """
        ...
