"""
댓글 스레드 조립

comments LEFT JOIN replies 결과(평탄한 행 목록)를 댓글 → 답글 트리로 묶습니다.
행은 (댓글 최신순, 답글 오래된순)으로 정렬되어 들어온다고 가정하며,
처음 본 댓글 순서를 그대로 유지합니다.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional


@dataclass(slots=True)
class ReplyNode:
    id: int
    content: str
    comment_id: int
    author_id: Optional[int]
    user_name: str
    user_photo: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class CommentNode:
    id: int
    content: str
    job_id: int
    author_id: Optional[int]
    user_name: str
    user_photo: Optional[str]
    created_at: datetime
    updated_at: datetime
    replies: list[ReplyNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _comment_from_row(row: Mapping[str, Any]) -> CommentNode:
    return CommentNode(
        id=row["comment_id"],
        content=row["comment_content"],
        job_id=row["comment_job_id"],
        author_id=row["comment_author_id"],
        user_name=row["comment_author_name"],
        user_photo=row["comment_author_photo"],
        created_at=row["comment_created_at"],
        updated_at=row["comment_updated_at"],
    )


def _reply_from_row(row: Mapping[str, Any]) -> ReplyNode:
    return ReplyNode(
        id=row["reply_id"],
        content=row["reply_content"],
        comment_id=row["comment_id"],
        author_id=row["reply_author_id"],
        user_name=row["reply_author_name"],
        user_photo=row["reply_author_photo"],
        created_at=row["reply_created_at"],
        updated_at=row["reply_updated_at"],
    )


def group_comment_rows(rows: Iterable[Mapping[str, Any]]) -> list[CommentNode]:
    """
    평탄한 조인 행을 한 번 순회하며 댓글별로 답글을 묶습니다. O(rows)

    - 댓글은 처음 등장할 때 생성
    - 답글이 없는 행(reply_id가 None)은 댓글만 남김
    - 같은 답글 id가 다시 나오면(조인 중복 행) 건너뜀
    """
    threads: dict[int, CommentNode] = {}
    attached: dict[int, set[int]] = {}

    for row in rows:
        comment_id = row["comment_id"]
        node = threads.get(comment_id)
        if node is None:
            node = _comment_from_row(row)
            threads[comment_id] = node
            attached[comment_id] = set()

        reply_id = row.get("reply_id")
        if reply_id is None or reply_id in attached[comment_id]:
            continue

        attached[comment_id].add(reply_id)
        node.replies.append(_reply_from_row(row))

    return list(threads.values())
