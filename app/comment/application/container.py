from __future__ import annotations

from comment.application.usecases.list_job_comments import ListJobCommentsUseCase
from common.adapters.django_comment_repo import DjangoCommentThreadRepository


def build_list_job_comments_usecase() -> ListJobCommentsUseCase:
    """
    Comment 유스케이스 조립(Dependency Injection).
    """
    return ListJobCommentsUseCase(comment_repo=DjangoCommentThreadRepository())
