"""
Comment Service

댓글/답글 작성·조회·삭제
"""

import logging
from typing import Optional

from comment.application.container import build_list_job_comments_usecase
from comment.domain.thread import CommentNode
from comment.models import Comment, Reply
from common.application.result import Err, ErrorCode, Ok, Result
from common.authorization import load_for_mutation
from django.db import transaction
from django.db.models import QuerySet
from job.models import Job

logger = logging.getLogger(__name__)


def _blank(content: Optional[str]) -> bool:
    return not content or not str(content).strip()


class CommentService:
    """
    댓글 서비스

    삭제는 load_for_mutation으로 작성자 본인인지 확인합니다.
    """

    @staticmethod
    def get_job_comments(job_id: int) -> Result[list[CommentNode]]:
        """
        공고의 댓글 스레드 (댓글 최신순, 답글 오래된순)
        """
        usecase = build_list_job_comments_usecase()
        return usecase.execute(job_id=job_id)

    @staticmethod
    def add_comment(job_id: int, author, content: Optional[str]) -> Result[Comment]:
        if _blank(content):
            return Err(
                code=ErrorCode.VALIDATION_ERROR, message="Comment content is required"
            )

        job = Job.objects.filter(pk=job_id).first()
        if job is None:
            return Err(code=ErrorCode.NOT_FOUND, message="Job not found")

        with transaction.atomic():
            comment = Comment.objects.create(job=job, author=author, content=content)
            logger.info(f"Created Comment {comment.pk} on Job {job_id}")
        return Ok(comment)

    @staticmethod
    def delete_comment(comment_id: int, requester) -> Result[None]:
        loaded = load_for_mutation(Comment, comment_id, requester, action="delete")
        if not isinstance(loaded, Ok):
            return loaded

        with transaction.atomic():
            loaded.value.delete()
            logger.info(f"Deleted Comment {comment_id} with its replies")
        return Ok(None)

    @staticmethod
    def add_reply(comment_id: int, author, content: Optional[str]) -> Result[Reply]:
        if _blank(content):
            return Err(
                code=ErrorCode.VALIDATION_ERROR, message="Reply content is required"
            )

        comment = Comment.objects.filter(pk=comment_id).first()
        if comment is None:
            return Err(code=ErrorCode.NOT_FOUND, message="Comment not found")

        with transaction.atomic():
            reply = Reply.objects.create(comment=comment, author=author, content=content)
            logger.info(f"Created Reply {reply.pk} on Comment {comment_id}")
        return Ok(reply)

    @staticmethod
    def list_replies(comment_id: int) -> Result[QuerySet]:
        if not Comment.objects.filter(pk=comment_id).exists():
            return Err(code=ErrorCode.NOT_FOUND, message="Comment not found")

        replies = (
            Reply.objects.filter(comment_id=comment_id)
            .select_related("author")
            .order_by("created_at", "id")
        )
        return Ok(replies)

    @staticmethod
    def delete_reply(reply_id: int, requester) -> Result[None]:
        loaded = load_for_mutation(Reply, reply_id, requester, action="delete")
        if not isinstance(loaded, Ok):
            return loaded

        with transaction.atomic():
            loaded.value.delete()
            logger.info(f"Deleted Reply {reply_id}")
        return Ok(None)
