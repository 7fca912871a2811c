"""
Job Service

작업 공고 CRUD 및 조회 필터링
"""

import logging
from typing import Dict, Optional

from common.application.result import Ok, Result
from common.authorization import load_for_mutation
from django.db import transaction
from django.db.models import Q, QuerySet
from job.models import Job

logger = logging.getLogger(__name__)


class JobService:
    """
    작업 공고 서비스

    수정/삭제는 load_for_mutation으로 존재 여부와 소유자를 먼저 확인합니다.
    """

    @staticmethod
    def get_job(job_id: int) -> Optional[Job]:
        try:
            return Job.objects.select_related("owner").get(pk=job_id)
        except Job.DoesNotExist:
            logger.warning(f"Job {job_id} not found")
            return None

    @staticmethod
    def list_jobs(query_params: Dict) -> QuerySet:
        """
        작업 공고 목록 조회 (최신순)

        Args:
            query_params: category, status, search, owner 필터
        """
        filters = {}

        if category := query_params.get("category"):
            filters["category"] = category

        if status := query_params.get("status"):
            filters["status"] = status

        if owner := query_params.get("owner"):
            filters["owner_id"] = owner

        queryset = Job.objects.select_related("owner").filter(**filters)

        if search := query_params.get("search"):
            queryset = queryset.filter(
                Q(title__icontains=search) | Q(description__icontains=search)
            )

        return queryset.order_by("-created_at", "-id")

    @staticmethod
    def create_job(owner, data: Dict) -> Job:
        with transaction.atomic():
            job = Job.objects.create(
                owner=owner,
                title=data["title"],
                description=data["description"],
                budget=data["budget"],
                category=data["category"],
                skills=data.get("skills", []),
                status=data.get("status", Job.Status.OPEN),
            )
            logger.info(f"Created Job {job.pk} for user {owner.pk}")
            return job

    @staticmethod
    def update_job(job_id: int, requester, data: Dict) -> Result[Job]:
        """
        작업 공고 수정 (요청에 포함된 필드만 반영)
        """
        loaded = load_for_mutation(Job, job_id, requester, action="edit")
        if not isinstance(loaded, Ok):
            return loaded

        job = loaded.value
        with transaction.atomic():
            for key, value in data.items():
                setattr(job, key, value)
            job.save()
            logger.info(f"Updated Job {job_id}")
        return Ok(job)

    @staticmethod
    def delete_job(job_id: int, requester) -> Result[None]:
        """
        작업 공고 삭제

        FK CASCADE로 댓글과 답글이 함께 삭제됩니다.
        """
        loaded = load_for_mutation(Job, job_id, requester, action="delete")
        if not isinstance(loaded, Ok):
            return loaded

        with transaction.atomic():
            loaded.value.delete()
            logger.info(f"Deleted Job {job_id}")
        return Ok(None)
