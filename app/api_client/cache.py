"""
Client-side read-through caches

서버 상태를 메모리에 들고 있는 클라이언트 저장소.

- 읽기: 스냅샷이 없거나 무효화됐거나 max_age_seconds를 넘기면 서버에서 다시 가져옴
- 쓰기: 서버 호출이 성공한 뒤에만 로컬 스냅샷을 패치
- 동시 수정 충돌 해결은 없음 (다음 fetch 전까지 마지막 로컬 쓰기가 유지됨)

스냅샷이 서버와 어긋났을 수 있는지는 patched_locally / is_stale()로 드러납니다.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from api_client.dtos import CommentDTO, JobDTO, ReplyDTO
from api_client.services import JobApiService
from api_client.session import ApiError

logger = logging.getLogger(__name__)

V = TypeVar("V")

ALL_JOBS = "all"


def _user_key(user_id: int) -> tuple[str, int]:
    return ("user", user_id)


@dataclass(slots=True)
class Snapshot(Generic[V]):
    value: V
    fetched_at: float
    patched_locally: bool = False
    stale: bool = False


class ReadThroughCache(Generic[V]):
    """키별 스냅샷 캐시. 로더는 호출 측이 넘깁니다."""

    def __init__(
        self,
        *,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._entries: dict[Hashable, Snapshot[V]] = {}
        self._max_age_seconds = max_age_seconds
        self._clock = clock

    def snapshot(self, key: Hashable) -> Optional[Snapshot[V]]:
        return self._entries.get(key)

    def is_stale(self, key: Hashable) -> bool:
        entry = self._entries.get(key)
        if entry is None or entry.stale:
            return True
        if self._max_age_seconds is None:
            return False
        return self._clock() - entry.fetched_at > self._max_age_seconds

    def get(self, key: Hashable, loader: Callable[[], V], *, refresh: bool = False) -> V:
        if refresh or self.is_stale(key):
            try:
                value = loader()
            except ApiError:
                entry = self._entries.get(key)
                if entry is not None:
                    entry.stale = True
                raise
            self._entries[key] = Snapshot(value=value, fetched_at=self._clock())
        return self._entries[key].value

    def patch(self, key: Hashable, fn: Callable[[V], V]) -> None:
        """스냅샷이 있을 때만 로컬로 고칩니다. 없으면 다음 읽기에서 가져옴."""
        entry = self._entries.get(key)
        if entry is None:
            return
        entry.value = fn(entry.value)
        entry.patched_locally = True

    def keys(self) -> list[Hashable]:
        return list(self._entries)

    def invalidate(self, key: Optional[Hashable] = None) -> None:
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)


class JobStore:
    """
    작업 공고 캐시

    - 전체 목록(ALL_JOBS)과 사용자별 목록(user_jobs)을 함께 들고 있음
    - 수정/삭제는 두 목록 모두에 반영
    - comments를 넘기면 공고 삭제 시 해당 공고의 댓글 스레드도 버림
    """

    def __init__(
        self,
        service: JobApiService,
        *,
        comments: Optional[CommentStore] = None,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._service = service
        self._comments = comments
        self._cache: ReadThroughCache[list[JobDTO]] = ReadThroughCache(
            max_age_seconds=max_age_seconds, clock=clock
        )

    def jobs(self, *, refresh: bool = False) -> list[JobDTO]:
        return list(self._cache.get(ALL_JOBS, self._service.list_jobs, refresh=refresh))

    def user_jobs(self, user_id: int, *, refresh: bool = False) -> list[JobDTO]:
        return list(
            self._cache.get(
                _user_key(user_id),
                lambda: self._service.list_user_jobs(user_id),
                refresh=refresh,
            )
        )

    def get(self, job_id: int) -> Optional[JobDTO]:
        return next((job for job in self.jobs() if job.id == job_id), None)

    def jobs_in_category(self, category: str) -> list[JobDTO]:
        return [job for job in self.jobs() if job.category == category]

    def is_stale(self, user_id: Optional[int] = None) -> bool:
        key = ALL_JOBS if user_id is None else _user_key(user_id)
        return self._cache.is_stale(key)

    @property
    def patched_locally(self) -> bool:
        entry = self._cache.snapshot(ALL_JOBS)
        return bool(entry and entry.patched_locally)

    def create(self, data: dict[str, Any]) -> JobDTO:
        job = self._service.create_job(data)
        # 서버 정렬/필터 기준을 따르기 위해 목록은 다시 가져옴
        self._cache.invalidate(ALL_JOBS)
        self._cache.invalidate(_user_key(job.owner_id))
        return job

    def update(self, job_id: int, data: dict[str, Any]) -> JobDTO:
        updated = self._service.update_job(job_id, data)
        for key in self._cache.keys():
            self._cache.patch(
                key,
                lambda jobs: [updated if job.id == job_id else job for job in jobs],
            )
        return updated

    def delete(self, job_id: int) -> None:
        self._service.delete_job(job_id)
        for key in self._cache.keys():
            self._cache.patch(
                key, lambda jobs: [job for job in jobs if job.id != job_id]
            )
        if self._comments is not None:
            self._comments.invalidate(job_id)

    def invalidate(self) -> None:
        self._cache.invalidate()


class CommentStore:
    """공고별 댓글 스레드 캐시 (댓글 최신순, 답글 오래된순 유지)"""

    def __init__(
        self,
        service: JobApiService,
        *,
        max_age_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._service = service
        self._cache: ReadThroughCache[list[CommentDTO]] = ReadThroughCache(
            max_age_seconds=max_age_seconds, clock=clock
        )

    def comments(self, job_id: int, *, refresh: bool = False) -> list[CommentDTO]:
        return list(
            self._cache.get(
                job_id, lambda: self._service.get_comments(job_id), refresh=refresh
            )
        )

    def is_stale(self, job_id: int) -> bool:
        return self._cache.is_stale(job_id)

    def patched_locally(self, job_id: int) -> bool:
        entry = self._cache.snapshot(job_id)
        return bool(entry and entry.patched_locally)

    def add_comment(self, job_id: int, content: str) -> CommentDTO:
        comment = self._service.add_comment(job_id, content)
        self._cache.patch(job_id, lambda comments: [comment, *comments])
        return comment

    def add_reply(self, job_id: int, comment_id: int, content: str) -> ReplyDTO:
        reply = self._service.add_reply(comment_id, content)

        def append(comments: list[CommentDTO]) -> list[CommentDTO]:
            return [
                c.model_copy(update={"replies": [*c.replies, reply]})
                if c.id == comment_id
                else c
                for c in comments
            ]

        self._cache.patch(job_id, append)
        return reply

    def delete_comment(self, job_id: int, comment_id: int) -> None:
        self._service.delete_comment(comment_id)
        self._cache.patch(
            job_id, lambda comments: [c for c in comments if c.id != comment_id]
        )

    def delete_reply(self, job_id: int, comment_id: int, reply_id: int) -> None:
        self._service.delete_reply(reply_id)

        def remove(comments: list[CommentDTO]) -> list[CommentDTO]:
            return [
                c.model_copy(
                    update={"replies": [r for r in c.replies if r.id != reply_id]}
                )
                if c.id == comment_id
                else c
                for c in comments
            ]

        self._cache.patch(job_id, remove)

    def invalidate(self, job_id: Optional[int] = None) -> None:
        """job_id가 없으면 모든 공고의 스레드를 버립니다."""
        self._cache.invalidate(job_id)
        if job_id is not None:
            logger.debug(f"Invalidated comment cache for job {job_id}")
