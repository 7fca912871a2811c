"""
Comment Views

댓글/답글 API 엔드포인트 (Thin Controller)
"""

import logging

from comment.models import Comment, Reply
from comment.serializers import CommentSerializer, ContentSerializer, ReplySerializer
from comment.services import CommentService
from common.application.result import Err, Ok
from common.responses import error_response, server_error_response, success_response
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)


def _content_of(request) -> str | None:
    """요청 바디의 content. 객체가 아니거나 비어 있으면 None."""
    serializer = ContentSerializer(data=request.data)
    if not serializer.is_valid():
        return None
    return serializer.validated_data["content"]


class JobCommentsView(APIView):
    """
    공고별 댓글

    GET  /api/v1/jobs/<job_id>/comments/
    POST /api/v1/jobs/<job_id>/comments/
    """

    @extend_schema(responses={200: OpenApiTypes.OBJECT}, summary="Comment threads")
    def get(self, request, job_id: int):
        try:
            result = CommentService.get_job_comments(job_id)
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            return success_response(comments=[node.to_dict() for node in result.value])
        except Exception as e:
            logger.error(
                f"Failed to get comments for job {job_id}: {str(e)}", exc_info=True
            )
            return server_error_response("Error getting comments", e)

    @extend_schema(request=ContentSerializer, summary="Add comment")
    def post(self, request, job_id: int):
        try:
            result = CommentService.add_comment(
                job_id, request.user, _content_of(request)
            )
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            return success_response(
                status.HTTP_201_CREATED,
                message="Comment added successfully",
                comment=CommentSerializer(result.value).data,
            )
        except Exception as e:
            logger.error(
                f"Failed to add comment to job {job_id}: {str(e)}", exc_info=True
            )
            return server_error_response("Error adding comment", e)


class CommentViewSet(GenericViewSet):
    """
    댓글 삭제 및 답글 작성/조회

    DELETE   /api/v1/comments/<id>/
    GET/POST /api/v1/comments/<id>/replies/
    """

    queryset = Comment.objects.all()
    serializer_class = CommentSerializer
    lookup_value_regex = "[0-9]+"

    def destroy(self, request, pk=None, *args, **kwargs):
        try:
            result = CommentService.delete_comment(int(pk), request.user)
            if isinstance(result, Err):
                return error_response(result)

            return success_response(message="Comment deleted successfully")
        except Exception as e:
            logger.error(f"Failed to delete comment {pk}: {str(e)}", exc_info=True)
            return server_error_response("Error deleting comment", e)

    @extend_schema(request=ContentSerializer, responses={200: ReplySerializer(many=True)})
    @action(detail=True, methods=["get", "post"], url_path="replies")
    def replies(self, request, pk=None):
        if request.method == "POST":
            return self._add_reply(request, int(pk))

        try:
            result = CommentService.list_replies(int(pk))
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            return success_response(
                replies=ReplySerializer(result.value, many=True).data
            )
        except Exception as e:
            logger.error(
                f"Failed to get replies of comment {pk}: {str(e)}", exc_info=True
            )
            return server_error_response("Error getting replies", e)

    def _add_reply(self, request, comment_id: int):
        try:
            result = CommentService.add_reply(
                comment_id, request.user, _content_of(request)
            )
            if isinstance(result, Err):
                return error_response(result)

            assert isinstance(result, Ok)
            return success_response(
                status.HTTP_201_CREATED,
                message="Reply added successfully",
                reply=ReplySerializer(result.value).data,
            )
        except Exception as e:
            logger.error(
                f"Failed to add reply to comment {comment_id}: {str(e)}",
                exc_info=True,
            )
            return server_error_response("Error adding reply", e)


class ReplyViewSet(GenericViewSet):
    """
    DELETE /api/v1/replies/<id>/
    """

    queryset = Reply.objects.all()
    serializer_class = ReplySerializer
    lookup_value_regex = "[0-9]+"

    def destroy(self, request, pk=None, *args, **kwargs):
        try:
            result = CommentService.delete_reply(int(pk), request.user)
            if isinstance(result, Err):
                return error_response(result)

            return success_response(message="Reply deleted successfully")
        except Exception as e:
            logger.error(f"Failed to delete reply {pk}: {str(e)}", exc_info=True)
            return server_error_response("Error deleting reply", e)
