from django.conf import settings
from django.db import models


class Comment(models.Model):
    """작업 공고에 달린 최상위 댓글. 삭제 시 답글도 함께 삭제됩니다."""

    owner_field = "author_id"

    content = models.TextField()
    job = models.ForeignKey(
        "job.Job", on_delete=models.CASCADE, related_name="comments"
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="comments"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "marketplace_comment"
        ordering = ["-created_at", "-id"]
        verbose_name = "comment"

    def __str__(self):
        return f"Comment {self.pk} on job {self.job_id} by user {self.author_id}"


class Reply(models.Model):
    """댓글에 달린 2단계 답글."""

    owner_field = "author_id"

    content = models.TextField()
    comment = models.ForeignKey(
        Comment, on_delete=models.CASCADE, related_name="replies"
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="replies"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "marketplace_reply"
        ordering = ["created_at", "id"]
        verbose_name = "reply"
        verbose_name_plural = "replies"

    def __str__(self):
        return f"Reply {self.pk} on comment {self.comment_id} by user {self.author_id}"
