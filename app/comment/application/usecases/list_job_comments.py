from __future__ import annotations

import logging

from comment.domain.thread import CommentNode, group_comment_rows
from common.application.result import Err, ErrorCode, Ok, Result
from common.ports.comment_repo import CommentThreadRepositoryPort
from django.db import DatabaseError

logger = logging.getLogger(__name__)


class ListJobCommentsUseCase:
    """
    작업 공고의 댓글 스레드 조회 유스케이스.

    - 공고 존재 확인 (없으면 NOT_FOUND)
    - 조인 행 조회 후 댓글/답글 트리로 조립
    - DB 에러는 빈 목록이 아니라 PERSISTENCE_ERROR로 돌려줌
      ("댓글 없음"과 "조회 실패"를 호출 측에서 구분할 수 있도록)
    """

    def __init__(self, *, comment_repo: CommentThreadRepositoryPort):
        self._comment_repo = comment_repo

    def execute(self, *, job_id: int) -> Result[list[CommentNode]]:
        try:
            if not self._comment_repo.job_exists(job_id):
                return Err(code=ErrorCode.NOT_FOUND, message="Job not found")
            rows = self._comment_repo.fetch_thread_rows(job_id)
        except DatabaseError as e:
            logger.error(
                f"Failed to load comments for job {job_id}: {str(e)}", exc_info=True
            )
            return Err(code=ErrorCode.PERSISTENCE_ERROR, message="Error getting comments")

        return Ok(group_comment_rows(rows))
