"""
Tests for Comment Views

댓글/답글 API 엔드포인트 테스트
"""

from unittest.mock import patch

import pytest
from comment.models import Comment, Reply
from common.application.result import Err, ErrorCode
from rest_framework import status


def comments_url(job_id):
    return f"/api/v1/jobs/{job_id}/comments/"


def replies_url(comment_id):
    return f"/api/v1/comments/{comment_id}/replies/"


@pytest.mark.django_db
class TestJobComments:
    """GET/POST /api/v1/jobs/<id>/comments/"""

    def test_comments_newest_first_and_replies_oldest_first(
        self, owner_client, other_client, job
    ):
        # Given: 댓글 A, B 순서로 작성
        a = owner_client.post(comments_url(job.pk), {"content": "A"}, format="json")
        b = other_client.post(comments_url(job.pk), {"content": "B"}, format="json")
        comment_a = a.data["comment"]["id"]

        # When
        response = owner_client.get(comments_url(job.pk))

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert [c["content"] for c in response.data["comments"]] == ["B", "A"]
        assert response.data["comments"][0]["id"] == b.data["comment"]["id"]

        # Given: A에 R1, R2 순서로 답글
        owner_client.post(replies_url(comment_a), {"content": "R1"}, format="json")
        other_client.post(replies_url(comment_a), {"content": "R2"}, format="json")

        # When
        response = owner_client.get(comments_url(job.pk))

        # Then
        threads = {c["id"]: c for c in response.data["comments"]}
        assert [r["content"] for r in threads[comment_a]["replies"]] == ["R1", "R2"]
        assert threads[b.data["comment"]["id"]]["replies"] == []

    def test_comment_carries_author_info(self, owner_client, job):
        owner_client.post(comments_url(job.pk), {"content": "Hello"}, format="json")

        comment = owner_client.get(comments_url(job.pk)).data["comments"][0]

        assert comment["user_name"] == "Job Owner"
        assert comment["user_photo"] is None
        assert comment["job_id"] == job.pk

    def test_add_comment(self, other_client, other_user, job):
        response = other_client.post(
            comments_url(job.pk), {"content": "Interested!"}, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["message"] == "Comment added successfully"
        assert response.data["comment"]["author_id"] == other_user.pk
        assert response.data["comment"]["user_name"] == "stranger"
        assert response.data["comment"]["replies"] == []

    def test_add_comment_requires_content(self, owner_client, job):
        response = owner_client.post(comments_url(job.pk), {"content": ""}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Comment content is required"
        assert not Comment.objects.exists()

    def test_add_comment_with_non_object_body(self, owner_client, job):
        response = owner_client.post(comments_url(job.pk), ["A"], format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Comment content is required"
        assert not Comment.objects.exists()

    def test_add_comment_to_missing_job(self, owner_client):
        response = owner_client.post(comments_url(999999), {"content": "x"}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "Job not found"

    def test_get_comments_of_missing_job(self, owner_client):
        response = owner_client.get(comments_url(999999))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_comments_failure_is_reported(self, owner_client, job):
        """조회 실패는 빈 목록이 아니라 500"""
        with patch(
            "comment.views.CommentService.get_job_comments",
            return_value=Err(
                code=ErrorCode.PERSISTENCE_ERROR, message="Error getting comments"
            ),
        ):
            response = owner_client.get(comments_url(job.pk))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"success": False, "message": "Error getting comments"}


@pytest.mark.django_db
class TestCommentDelete:
    """DELETE /api/v1/comments/<id>/"""

    def test_author_deletes_comment_with_replies(
        self, owner_client, owner, other_user, job
    ):
        # Given
        comment = Comment.objects.create(job=job, author=owner, content="Mine")
        Reply.objects.create(comment=comment, author=other_user, content="R1")
        Reply.objects.create(comment=comment, author=owner, content="R2")
        kept = Comment.objects.create(job=job, author=other_user, content="Other")

        # When
        response = owner_client.delete(f"/api/v1/comments/{comment.pk}/")

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == "Comment deleted successfully"
        assert not Reply.objects.filter(comment_id=comment.pk).exists()
        threads = owner_client.get(comments_url(job.pk)).data["comments"]
        assert [c["id"] for c in threads] == [kept.pk]

    def test_non_author_cannot_delete_comment(self, other_client, owner, job):
        comment = Comment.objects.create(job=job, author=owner, content="Mine")

        response = other_client.delete(f"/api/v1/comments/{comment.pk}/")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["message"] == (
            "You do not have permission to delete this comment"
        )
        assert Comment.objects.filter(pk=comment.pk).exists()

    def test_job_owner_cannot_delete_someone_elses_comment(
        self, owner_client, other_user, job
    ):
        comment = Comment.objects.create(job=job, author=other_user, content="Hi")

        response = owner_client.delete(f"/api/v1/comments/{comment.pk}/")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_missing_comment(self, owner_client):
        response = owner_client.delete("/api/v1/comments/999999/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "Comment not found"


@pytest.mark.django_db
class TestReplies:
    """GET/POST /api/v1/comments/<id>/replies/, DELETE /api/v1/replies/<id>/"""

    def test_add_and_list_replies(self, owner_client, other_client, owner, job):
        comment = Comment.objects.create(job=job, author=owner, content="Question?")

        first = other_client.post(replies_url(comment.pk), {"content": "First"}, format="json")
        owner_client.post(replies_url(comment.pk), {"content": "Second"}, format="json")
        response = owner_client.get(replies_url(comment.pk))

        assert first.status_code == status.HTTP_201_CREATED
        assert first.data["message"] == "Reply added successfully"
        assert first.data["reply"]["comment_id"] == comment.pk
        assert [r["content"] for r in response.data["replies"]] == ["First", "Second"]

    def test_add_reply_requires_content(self, owner_client, owner, job):
        comment = Comment.objects.create(job=job, author=owner, content="Q")

        response = owner_client.post(replies_url(comment.pk), {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Reply content is required"

    def test_add_reply_with_non_object_body(self, owner_client, owner, job):
        comment = Comment.objects.create(job=job, author=owner, content="Q")

        response = owner_client.post(replies_url(comment.pk), ["R"], format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Reply content is required"
        assert not Reply.objects.exists()

    def test_add_reply_to_missing_comment(self, owner_client):
        response = owner_client.post(replies_url(999999), {"content": "x"}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "Comment not found"

    def test_list_replies_of_missing_comment(self, owner_client):
        response = owner_client.get(replies_url(999999))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_author_deletes_reply(self, other_client, owner, other_user, job):
        comment = Comment.objects.create(job=job, author=owner, content="Q")
        reply = Reply.objects.create(comment=comment, author=other_user, content="A")

        response = other_client.delete(f"/api/v1/replies/{reply.pk}/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == "Reply deleted successfully"
        assert not Reply.objects.filter(pk=reply.pk).exists()
        assert Comment.objects.filter(pk=comment.pk).exists()

    def test_non_author_cannot_delete_reply(self, owner_client, owner, other_user, job):
        comment = Comment.objects.create(job=job, author=owner, content="Q")
        reply = Reply.objects.create(comment=comment, author=other_user, content="A")

        response = owner_client.delete(f"/api/v1/replies/{reply.pk}/")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["message"] == "You do not have permission to delete this reply"
        assert Reply.objects.filter(pk=reply.pk).exists()

    def test_delete_missing_reply(self, owner_client):
        response = owner_client.delete("/api/v1/replies/999999/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["message"] == "Reply not found"
