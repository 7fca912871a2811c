"""
Tests for Job Views

작업 공고 API 엔드포인트 테스트
"""

from decimal import Decimal

import pytest
from comment.models import Comment, Reply
from job.models import Job
from rest_framework import status
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestJobViewSet:
    """JobViewSet API 테스트"""

    def test_create_job(self, owner_client, owner):
        """작업 공고 생성"""
        # Given
        data = {
            "title": "Django API",
            "description": "Build a REST API",
            "budget": "2500.50",
            "category": "backend",
            "skills": ["Python", "Django"],
        }

        # When
        response = owner_client.post("/api/v1/jobs/", data, format="json")

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["success"] is True
        assert response.data["message"] == "Job created successfully"
        job = response.data["job"]
        assert job["owner_id"] == owner.pk
        assert job["user_name"] == "Job Owner"
        assert job["status"] == "open"
        assert job["skills"] == ["Python", "Django"]
        assert Job.objects.get(pk=job["id"]).budget == Decimal("2500.50")

    def test_create_job_without_budget_is_rejected(self, owner_client):
        """필수 필드(budget) 누락 시 400, 저장되지 않음"""
        # Given
        data = {"title": "No budget", "description": "desc", "category": "misc"}

        # When
        response = owner_client.post("/api/v1/jobs/", data, format="json")

        # Then
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["success"] is False
        assert response.data["message"] == (
            "Missing required fields (title, description, budget, category)"
        )
        assert not Job.objects.exists()

    def test_create_job_with_non_object_body(self, owner_client):
        """JSON 배열 바디는 500이 아니라 400"""
        response = owner_client.post("/api/v1/jobs/", [1, 2], format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            "success": False,
            "message": "Request body must be a JSON object",
        }
        assert not Job.objects.exists()

    def test_update_job_with_non_object_body(self, owner_client, job):
        response = owner_client.put(
            f"/api/v1/jobs/{job.pk}/", ["title"], format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["success"] is False
        job.refresh_from_db()
        assert job.title == "Landing page redesign"

    def test_create_job_with_invalid_budget(self, owner_client):
        """budget이 숫자가 아니면 필드 에러와 함께 400"""
        data = {
            "title": "Bad budget",
            "description": "desc",
            "budget": "lots",
            "category": "misc",
        }

        response = owner_client.post("/api/v1/jobs/", data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "budget" in response.data["errors"]
        assert not Job.objects.exists()

    def test_create_job_ignores_non_list_skills(self, owner_client):
        """skills가 배열이 아니면 빈 목록으로 저장"""
        data = {
            "title": "Skills",
            "description": "desc",
            "budget": 10,
            "category": "misc",
            "skills": "Python",
        }

        response = owner_client.post("/api/v1/jobs/", data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["job"]["skills"] == []

    def test_list_jobs_with_filters(self, owner_client, owner, job):
        """category/status/search 필터"""
        # Given
        Job.objects.create(
            owner=owner,
            title="Data pipeline",
            description="Airflow DAGs",
            budget=Decimal("900"),
            category="data",
            status=Job.Status.IN_PROGRESS,
        )

        # When
        by_category = owner_client.get("/api/v1/jobs/", {"category": "data"})
        by_status = owner_client.get("/api/v1/jobs/", {"status": "open"})
        by_search = owner_client.get("/api/v1/jobs/", {"search": "marketing"})
        everything = owner_client.get("/api/v1/jobs/")

        # Then
        assert [j["title"] for j in by_category.data["jobs"]] == ["Data pipeline"]
        assert [j["id"] for j in by_status.data["jobs"]] == [job.pk]
        assert [j["id"] for j in by_search.data["jobs"]] == [job.pk]
        assert [j["title"] for j in everything.data["jobs"]] == [
            "Data pipeline",
            "Landing page redesign",
        ]

    def test_list_jobs_rejects_non_numeric_owner(self, owner_client):
        response = owner_client.get("/api/v1/jobs/", {"owner": "abc"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve_job(self, owner_client, job):
        """작업 공고 상세 조회"""
        response = owner_client.get(f"/api/v1/jobs/{job.pk}/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["job"]["title"] == "Landing page redesign"

    def test_retrieve_missing_job(self, owner_client):
        response = owner_client.get("/api/v1/jobs/999999/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {"success": False, "message": "Job not found"}

    def test_update_job_by_owner(self, owner_client, job):
        """소유자는 요청에 포함된 필드만 수정"""
        # When
        response = owner_client.put(
            f"/api/v1/jobs/{job.pk}/",
            {"title": "New title", "status": "completed"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        job.refresh_from_db()
        assert job.title == "New title"
        assert job.status == Job.Status.COMPLETED
        assert job.category == "design"

    def test_partial_update_job_by_owner(self, owner_client, job):
        response = owner_client.patch(
            f"/api/v1/jobs/{job.pk}/", {"budget": "2000"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        job.refresh_from_db()
        assert job.budget == Decimal("2000")

    def test_update_job_by_non_owner_is_forbidden(self, other_client, job):
        """소유자가 아니면 403, 공고는 그대로"""
        response = other_client.put(
            f"/api/v1/jobs/{job.pk}/", {"title": "Hijacked"}, format="json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["message"] == "You do not have permission to edit this job"
        job.refresh_from_db()
        assert job.title == "Landing page redesign"

    def test_update_job_with_invalid_status(self, owner_client, job):
        response = owner_client.put(
            f"/api/v1/jobs/{job.pk}/", {"status": "archived"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        job.refresh_from_db()
        assert job.status == Job.Status.OPEN

    def test_update_missing_job(self, owner_client):
        response = owner_client.put(
            "/api/v1/jobs/999999/", {"title": "x"}, format="json"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_job_by_non_owner_is_forbidden(self, other_client, job):
        response = other_client.delete(f"/api/v1/jobs/{job.pk}/")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Job.objects.filter(pk=job.pk).exists()

    def test_delete_job_cascades_to_comments_and_replies(
        self, owner_client, owner, other_user, job
    ):
        """공고 삭제 시 댓글과 답글까지 삭제"""
        # Given
        comment = Comment.objects.create(job=job, author=other_user, content="Hi")
        Reply.objects.create(comment=comment, author=owner, content="Hello")

        # When
        response = owner_client.delete(f"/api/v1/jobs/{job.pk}/")

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == "Job deleted successfully"
        assert not Job.objects.filter(pk=job.pk).exists()
        assert not Comment.objects.exists()
        assert not Reply.objects.exists()

    def test_unauthenticated_request_is_rejected(self, job):
        response = APIClient().get("/api/v1/jobs/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["success"] is False
        assert "message" in response.data


@pytest.mark.django_db
def test_user_jobs_view(owner_client, other_user, job):
    """사용자별 공고 목록"""
    Job.objects.create(
        owner=other_user,
        title="Someone else",
        description="desc",
        budget=Decimal("1"),
        category="misc",
    )

    response = owner_client.get(f"/api/v1/users/{job.owner_id}/jobs/")

    assert response.status_code == status.HTTP_200_OK
    assert [j["id"] for j in response.data["jobs"]] == [job.pk]
