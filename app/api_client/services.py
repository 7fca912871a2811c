"""
Job API Service

서버 REST 핸들러와 1:1로 대응하는 클라이언트 메서드.
응답 envelope에서 리소스를 꺼내 pydantic DTO로 변환합니다.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional

from api_client.dtos import CommentDTO, JobDTO, ReplyDTO
from api_client.session import ApiError, MarketplaceApi

logger = logging.getLogger(__name__)


def _jsonable(data: dict[str, Any]) -> dict[str, Any]:
    return {
        key: str(value) if isinstance(value, Decimal) else value
        for key, value in data.items()
    }


def _require(payload: dict, key: str) -> Any:
    if key not in payload:
        raise ApiError(f"Server response did not include '{key}'", payload=payload)
    return payload[key]


class JobApiService:
    def __init__(self, api: MarketplaceApi):
        self._api = api

    # Jobs
    def list_jobs(
        self,
        *,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        owner: Optional[int] = None,
    ) -> list[JobDTO]:
        params = {
            key: value
            for key, value in {
                "category": category,
                "status": status,
                "search": search,
                "owner": owner,
            }.items()
            if value not in (None, "")
        }
        payload = self._api.get("jobs", params=params or None)
        return [JobDTO.model_validate(job) for job in payload.get("jobs", [])]

    def list_user_jobs(self, user_id: int) -> list[JobDTO]:
        payload = self._api.get(f"users/{user_id}/jobs")
        return [JobDTO.model_validate(job) for job in payload.get("jobs", [])]

    def get_job(self, job_id: int) -> JobDTO:
        payload = self._api.get(f"jobs/{job_id}")
        return JobDTO.model_validate(_require(payload, "job"))

    def create_job(self, data: dict[str, Any]) -> JobDTO:
        payload = self._api.post("jobs", _jsonable(data))
        job = JobDTO.model_validate(_require(payload, "job"))
        logger.info(f"Created job {job.id}")
        return job

    def update_job(self, job_id: int, data: dict[str, Any]) -> JobDTO:
        payload = self._api.put(f"jobs/{job_id}", _jsonable(data))
        return JobDTO.model_validate(_require(payload, "job"))

    def delete_job(self, job_id: int) -> bool:
        self._api.delete(f"jobs/{job_id}")
        return True

    # Comments
    def get_comments(self, job_id: int) -> list[CommentDTO]:
        payload = self._api.get(f"jobs/{job_id}/comments")
        return [CommentDTO.model_validate(c) for c in payload.get("comments", [])]

    def add_comment(self, job_id: int, content: str) -> CommentDTO:
        payload = self._api.post(f"jobs/{job_id}/comments", {"content": content})
        return CommentDTO.model_validate(_require(payload, "comment"))

    def delete_comment(self, comment_id: int) -> bool:
        self._api.delete(f"comments/{comment_id}")
        return True

    # Replies
    def get_replies(self, comment_id: int) -> list[ReplyDTO]:
        payload = self._api.get(f"comments/{comment_id}/replies")
        return [ReplyDTO.model_validate(r) for r in payload.get("replies", [])]

    def add_reply(self, comment_id: int, content: str) -> ReplyDTO:
        payload = self._api.post(f"comments/{comment_id}/replies", {"content": content})
        return ReplyDTO.model_validate(_require(payload, "reply"))

    def delete_reply(self, reply_id: int) -> bool:
        self._api.delete(f"replies/{reply_id}")
        return True
