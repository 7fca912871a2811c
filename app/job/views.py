"""
Job Views

작업 공고 API 엔드포인트 (Thin Controller)
"""

import logging
from collections.abc import Mapping

from common.application.result import Err, ErrorCode, Ok
from common.responses import (
    envelope,
    error_response,
    server_error_response,
    success_response,
)
from drf_spectacular.utils import OpenApiParameter, extend_schema
from job.models import Job
from job.serializers import (
    REQUIRED_JOB_FIELDS,
    JobSerializer,
    JobWriteSerializer,
    missing_required_fields,
)
from job.services import JobService
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = (
    f"Missing required fields ({', '.join(REQUIRED_JOB_FIELDS)})"
)


class JobViewSet(GenericViewSet):
    """
    작업 공고 ViewSet (Thin Controller)

    비즈니스 로직은 JobService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    queryset = Job.objects.all()
    serializer_class = JobSerializer
    lookup_value_regex = "[0-9]+"

    @extend_schema(
        parameters=[
            OpenApiParameter("category", str),
            OpenApiParameter("status", str),
            OpenApiParameter("search", str),
            OpenApiParameter("owner", int),
        ],
        summary="List jobs",
    )
    def list(self, request, *args, **kwargs):
        """
        작업 공고 목록 조회

        GET /api/v1/jobs/?category=&status=&search=&owner=
        """
        owner = request.query_params.get("owner")
        if owner and not owner.isdigit():
            return error_response(
                Err(code=ErrorCode.VALIDATION_ERROR, message="owner must be an integer")
            )

        try:
            jobs = JobService.list_jobs(request.query_params)
            return success_response(jobs=JobSerializer(jobs, many=True).data)
        except Exception as e:
            logger.error(f"Failed to list jobs: {str(e)}", exc_info=True)
            return server_error_response("Error getting jobs", e)

    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        작업 공고 상세 조회

        GET /api/v1/jobs/<id>/
        """
        try:
            job = JobService.get_job(int(pk))
            if not job:
                return error_response(
                    Err(code=ErrorCode.NOT_FOUND, message="Job not found")
                )
            return success_response(job=JobSerializer(job).data)
        except Exception as e:
            logger.error(f"Failed to retrieve job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Error getting job", e)

    @extend_schema(request=JobWriteSerializer, summary="Create job")
    def create(self, request, *args, **kwargs):
        """
        작업 공고 생성

        POST /api/v1/jobs/
        """
        if not isinstance(request.data, Mapping):
            return error_response(
                Err(
                    code=ErrorCode.VALIDATION_ERROR,
                    message="Request body must be a JSON object",
                )
            )

        missing = missing_required_fields(request.data)
        if missing:
            logger.warning(f"Job creation rejected, missing fields: {missing}")
            return Response(
                envelope(success=False, message=MISSING_FIELDS_MESSAGE),
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = JobWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                Err(
                    code=ErrorCode.VALIDATION_ERROR,
                    message="Invalid job data",
                    details=serializer.errors,
                )
            )

        try:
            job = JobService.create_job(request.user, serializer.validated_data)
            return success_response(
                status.HTTP_201_CREATED,
                message="Job created successfully",
                job=JobSerializer(job).data,
            )
        except Exception as e:
            logger.error(f"Failed to create job: {str(e)}", exc_info=True)
            return server_error_response("Error creating job", e)

    @extend_schema(request=JobWriteSerializer, summary="Update job (owner only)")
    def update(self, request, pk=None, *args, **kwargs):
        """
        작업 공고 수정

        PUT /api/v1/jobs/<id>/
        요청에 포함된 필드만 반영합니다 (PATCH와 동일).
        """
        serializer = JobWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response(
                Err(
                    code=ErrorCode.VALIDATION_ERROR,
                    message="Invalid job data",
                    details=serializer.errors,
                )
            )

        try:
            result = JobService.update_job(
                int(pk), request.user, serializer.validated_data
            )
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            return success_response(
                message="Job updated successfully",
                job=JobSerializer(result.value).data,
            )
        except Exception as e:
            logger.error(f"Failed to update job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Error updating job", e)

    @extend_schema(request=JobWriteSerializer, summary="Partially update job")
    def partial_update(self, request, pk=None, *args, **kwargs):
        """
        PATCH /api/v1/jobs/<id>/
        """
        return self.update(request, pk, *args, **kwargs)

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        작업 공고 삭제 (댓글/답글 포함)

        DELETE /api/v1/jobs/<id>/
        """
        try:
            result = JobService.delete_job(int(pk), request.user)
            if isinstance(result, Err):
                return error_response(result)

            return success_response(message="Job deleted successfully")
        except Exception as e:
            logger.error(f"Failed to delete job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Error deleting job", e)


class UserJobsView(APIView):
    """특정 사용자가 올린 작업 공고 목록"""

    @extend_schema(responses=JobSerializer(many=True), summary="Jobs by owner")
    def get(self, request, user_id: int):
        try:
            jobs = JobService.list_jobs({"owner": user_id})
            return success_response(jobs=JobSerializer(jobs, many=True).data)
        except Exception as e:
            logger.error(
                f"Failed to list jobs of user {user_id}: {str(e)}", exc_info=True
            )
            return server_error_response("Error getting user jobs", e)
