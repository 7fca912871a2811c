from __future__ import annotations

from typing import Any, Optional

from comment.models import Comment
from job.models import Job
from user.models import UNKNOWN_USER_NAME

_THREAD_COLUMNS = (
    "id",
    "content",
    "job_id",
    "author_id",
    "author__username",
    "author__display_name",
    "author__avatar",
    "created_at",
    "updated_at",
    "replies__id",
    "replies__content",
    "replies__author_id",
    "replies__author__username",
    "replies__author__display_name",
    "replies__author__avatar",
    "replies__created_at",
    "replies__updated_at",
)


def _name(display_name: Optional[str], username: Optional[str]) -> str:
    return display_name or username or UNKNOWN_USER_NAME


class DjangoCommentThreadRepository:
    def job_exists(self, job_id: int) -> bool:
        return Job.objects.filter(pk=job_id).exists()

    def fetch_thread_rows(self, job_id: int) -> list[dict[str, Any]]:
        # reverse FK(replies)를 values()에 포함하면 LEFT OUTER JOIN 한 번으로 조회됨
        queryset = (
            Comment.objects.filter(job_id=job_id)
            .values(*_THREAD_COLUMNS)
            .order_by("-created_at", "-id", "replies__created_at", "replies__id")
        )
        return [
            {
                "comment_id": row["id"],
                "comment_content": row["content"],
                "comment_job_id": row["job_id"],
                "comment_author_id": row["author_id"],
                "comment_author_name": _name(
                    row["author__display_name"], row["author__username"]
                ),
                "comment_author_photo": row["author__avatar"] or None,
                "comment_created_at": row["created_at"],
                "comment_updated_at": row["updated_at"],
                "reply_id": row["replies__id"],
                "reply_content": row["replies__content"],
                "reply_author_id": row["replies__author_id"],
                "reply_author_name": _name(
                    row["replies__author__display_name"],
                    row["replies__author__username"],
                ),
                "reply_author_photo": row["replies__author__avatar"] or None,
                "reply_created_at": row["replies__created_at"],
                "reply_updated_at": row["replies__updated_at"],
            }
            for row in queryset
        ]
